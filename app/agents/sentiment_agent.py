"""
Sentiment Agent
Classifies the sentiment of a startup description with the language model.
"""

from typing import Optional

from .base import BaseAgent
from app.config import settings
from app.llm import LLMClient, get_llm_client
from app.schemas.results import SentimentLabel, SentimentResult


SYSTEM_PROMPT = (
    "You are a sentiment analysis expert. Analyze the sentiment of startup "
    "descriptions. Provide a sentiment classification (Positive, Neutral, or "
    "Negative) and a confidence score between 0 and 1. Respond with JSON in "
    "this format: { \"sentiment\": string, \"score\": number }"
)


class SentimentAgent(BaseAgent[str, SentimentResult]):
    """
    Sentiment Agent

    Sends the description to the LLM and normalizes the answer:
    - unknown labels become Neutral
    - a missing score becomes 0.5, other scores are clamped to 0-1

    Raises LLMError when the model cannot be reached. The caller decides
    on the fallback.
    """

    name = "SentimentAgent"

    def __init__(self, llm: Optional[LLMClient] = None):
        super().__init__()
        self._llm = llm

    @property
    def llm(self) -> LLMClient:
        return self._llm or get_llm_client()

    def _validate_input(self, input_data: str) -> None:
        super()._validate_input(input_data)
        if not input_data.strip():
            raise ValueError(f"{self.name}: description is empty")

    def _process(self, description: str) -> SentimentResult:
        data = self.llm.extract_json(
            system_prompt=SYSTEM_PROMPT,
            user_prompt=description,
            max_tokens=settings.SENTIMENT_MAX_TOKENS,
        )
        return parse_sentiment(data)


def parse_sentiment(data: dict) -> SentimentResult:
    """Builds a SentimentResult from the model's JSON answer"""
    label = SentimentLabel.NEUTRAL
    raw_label = data.get("sentiment")
    if isinstance(raw_label, str):
        for candidate in SentimentLabel:
            if candidate.value.lower() == raw_label.strip().lower():
                label = candidate
                break

    raw_score = data.get("score")
    if isinstance(raw_score, bool) or not isinstance(raw_score, (int, float, str)):
        score = 0.5
    else:
        try:
            score = float(raw_score)
        except ValueError:
            score = 0.5
    if score != score:  # NaN
        score = 0.5

    return SentimentResult(sentiment=label, score=max(0.0, min(1.0, score)))
