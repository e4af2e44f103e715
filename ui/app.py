"""
VentureScope Streamlit UI
- Predict: enter startup attributes and run a prediction
- Result: probability, sentiment, feature importance, suggestions
- History: every stored prediction, with a side-by-side comparison

The UI talks to the FastAPI backend (API_BASE_URL).
"""

from datetime import datetime

import httpx
import streamlit as st
from dotenv import load_dotenv

load_dotenv()

st.set_page_config(
    page_title="VentureScope - Startup Success Prediction",
    page_icon="🚀",
    layout="wide",
)

# Session State
if "current_prediction" not in st.session_state:
    st.session_state.current_prediction = None
if "error_message" not in st.session_state:
    st.session_state.error_message = None
if "page" not in st.session_state:
    st.session_state.page = "🧠 Predict"

FALLBACK_CATEGORIES = [
    "Software", "E-commerce", "FinTech", "HealthTech", "EdTech", "AI/ML",
    "Blockchain", "SaaS", "Mobile Apps", "Gaming", "Other",
]
FALLBACK_REGIONS = [
    "North America", "Europe", "Asia", "South America", "Africa", "Oceania",
]
SENTIMENT_EMOJI = {"Positive": "🟢", "Neutral": "🟡", "Negative": "🔴"}


def api_base_url() -> str:
    import sys
    if "." not in sys.path:
        sys.path.insert(0, ".")
    from app.config import settings
    return settings.API_BASE_URL.rstrip("/")


def api_timeout() -> float:
    from app.config import settings
    return float(settings.API_TIMEOUT)


def api_request(method: str, path: str, **kwargs):
    """Calls the backend. Returns (data, error)."""
    try:
        with httpx.Client(base_url=api_base_url(), timeout=api_timeout()) as client:
            response = client.request(method, path, **kwargs)
    except httpx.HTTPError as e:
        return None, f"API connection failed: {e}"

    if response.status_code == 404:
        return None, "Prediction not found"
    if response.status_code >= 400:
        return None, f"API error {response.status_code}: {format_error(response)}"
    return response.json(), None


def format_error(response: httpx.Response) -> str:
    try:
        detail = response.json().get("detail")
    except ValueError:
        return response.text
    if isinstance(detail, list):
        return "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', [])[1:])}: {err.get('msg', '')}"
            for err in detail
        )
    return str(detail)


@st.cache_data(ttl=600)
def load_options():
    """Category/region choices (falls back to the built-in lists)"""
    data, error = api_request("GET", "/options")
    if error or not data:
        return FALLBACK_CATEGORIES, FALLBACK_REGIONS
    return data["market_categories"], data["regions"]


def probability_color(value: float) -> str:
    if value >= 75:
        return "green"
    if value >= 50:
        return "blue"
    if value >= 25:
        return "orange"
    return "red"


def main():
    st.title("🚀 VentureScope")
    st.subheader("AI-assisted startup success prediction")

    if st.session_state.error_message:
        st.error(st.session_state.error_message)
        if st.button("OK"):
            st.session_state.error_message = None
            st.rerun()

    pages = ["🧠 Predict", "📊 Result", "🗂️ History"]
    page = st.sidebar.radio(
        "Navigation",
        pages,
        index=pages.index(st.session_state.page),
    )
    st.session_state.page = page

    if page == "🧠 Predict":
        render_predict_page()
    elif page == "📊 Result":
        render_result_page()
    else:
        render_history_page()


def render_predict_page():
    """Prediction form"""
    categories, regions = load_options()
    current_year = datetime.now().year

    with st.form("prediction_form"):
        startup_name = st.text_input("Startup Name *")

        col1, col2 = st.columns(2)
        with col1:
            founded_year = st.number_input(
                "Founded Year", min_value=1900, max_value=current_year,
                value=current_year, step=1,
            )
            market_category = st.selectbox("Market Category", categories)
            funding_amount = st.number_input(
                "Total Funding (USD)", min_value=0.0, value=0.0, step=100_000.0,
            )
        with col2:
            team_size = st.number_input(
                "Team Size", min_value=1, max_value=10_000, value=1, step=1,
            )
            location = st.selectbox("Location / Region", regions)

        description = st.text_area(
            "Description *",
            help="At least 10 characters. Used for sentiment analysis.",
        )

        submitted = st.form_submit_button("🔮 Predict", type="primary", use_container_width=True)

    if submitted:
        payload = {
            "startupName": startup_name,
            "foundedYear": int(founded_year),
            "teamSize": int(team_size),
            "marketCategory": market_category,
            "location": location,
            "fundingAmount": float(funding_amount),
            "description": description,
        }
        with st.spinner("Analyzing your startup..."):
            prediction, error = api_request("POST", "/predictions", json=payload)

        if error:
            st.session_state.error_message = f"Prediction failed: {error}"
        else:
            st.session_state.current_prediction = prediction
            st.session_state.page = "📊 Result"
        st.rerun()


def render_result_page():
    """Shows the current prediction, or one looked up by id"""
    lookup_id = st.text_input("Prediction ID", value="", placeholder="Paste an id to load it")
    if lookup_id and st.button("Load"):
        prediction, error = api_request("GET", f"/predictions/{lookup_id.strip()}")
        if error:
            st.error(error)
        else:
            st.session_state.current_prediction = prediction

    prediction = st.session_state.current_prediction
    if not prediction:
        st.info("Run a prediction first, or load one from the history")
        return

    display_prediction(prediction)


def display_prediction(prediction: dict):
    """Result detail"""
    probability = prediction.get("successProbability", 0)
    st.header(prediction.get("startupName", "-"))
    st.caption(f"ID: {prediction.get('id')} | created {prediction.get('createdAt', '')[:19]}")

    col1, col2, col3 = st.columns(3)

    with col1:
        st.markdown("**Success Probability**")
        st.markdown(
            f"<h1 style='color:{probability_color(probability)}'>{round(probability)}%</h1>",
            unsafe_allow_html=True,
        )
        st.progress(min(max(probability / 100, 0.0), 1.0))

    with col2:
        founded = prediction.get("foundedYear")
        age = datetime.now().year - founded if founded else None
        st.metric("Team Size", prediction.get("teamSize", "-"))
        st.metric("Founded", f"{founded} ({age} years)" if age is not None else "-")
        st.metric("Funding", f"${prediction.get('fundingAmount', 0) / 1_000_000:.2f}M")
        st.write(f"**Category:** {prediction.get('marketCategory', '-')}")
        st.write(f"**Location:** {prediction.get('location', '-')}")

    with col3:
        sentiment = prediction.get("sentiment", "Neutral")
        st.markdown("**Sentiment Analysis**")
        st.write(f"{SENTIMENT_EMOJI.get(sentiment, '⚪')} {sentiment}")
        st.metric("Confidence", f"{prediction.get('sentimentScore', 0) * 100:.0f}%")

    st.write("---")
    st.write("**📈 Feature Importance**")
    features = prediction.get("featureImportance", [])
    if features:
        st.bar_chart(
            [{"Feature": f["displayName"], "Importance": f["importance"]} for f in features],
            x="Feature",
            y="Importance",
            horizontal=True,
        )

    st.write("---")
    st.write("**💡 Improvement Suggestions**")
    for i, suggestion in enumerate(prediction.get("improvements", []), 1):
        st.write(f"{i}. {suggestion}")


def render_history_page():
    """Stored predictions, newest first"""
    predictions, error = api_request("GET", "/predictions")
    if error:
        st.error(error)
        return
    if not predictions:
        st.info("No predictions yet")
        return

    st.caption(f"{len(predictions)} predictions")

    rows = [
        {
            "Created": p.get("createdAt", "")[:19].replace("T", " "),
            "Startup": p.get("startupName"),
            "Category": p.get("marketCategory"),
            "Location": p.get("location"),
            "Probability (%)": round(p.get("successProbability", 0), 1),
            "Sentiment": p.get("sentiment"),
        }
        for p in predictions
    ]
    st.dataframe(rows, use_container_width=True, hide_index=True)

    labels = {f"{p['startupName']} ({p['id'][:8]})": p for p in predictions}

    col1, col2 = st.columns([2, 1])
    with col1:
        selected = st.multiselect("Compare predictions", list(labels.keys()))
    with col2:
        open_label = st.selectbox("Open prediction", ["-"] + list(labels.keys()))
        if open_label != "-" and st.button("Open", use_container_width=True):
            st.session_state.current_prediction = labels[open_label]
            st.session_state.page = "📊 Result"
            st.rerun()

    if len(selected) >= 2:
        st.write("**⚖️ Comparison**")
        st.bar_chart(
            [
                {"Prediction": label, "Probability (%)": labels[label]["successProbability"]}
                for label in selected
            ],
            x="Prediction",
            y="Probability (%)",
        )
        cols = st.columns(len(selected))
        for col, label in zip(cols, selected):
            p = labels[label]
            with col:
                st.metric(p["startupName"], f"{p['successProbability']:.1f}%")
                st.caption(f"{p['marketCategory']} | {p['location']} | {p['sentiment']}")


if __name__ == "__main__":
    main()
