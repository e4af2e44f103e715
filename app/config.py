"""
VentureScope settings

All values come from the .env file or the environment.
Usage:
    from app.config import settings
    model = settings.OPENAI_MODEL
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore unrelated variables in .env
    )

    # === Environment ===
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # === LLM (OpenAI-compatible API) ===
    OPENAI_API_KEY: str = ""
    OPENAI_BASE_URL: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_TIMEOUT: int = 60
    SENTIMENT_MAX_TOKENS: int = 200
    SUGGESTIONS_MAX_TOKENS: int = 800

    # === API (used by the Streamlit UI and the CLI) ===
    API_BASE_URL: str = "http://localhost:8000/api"
    API_TIMEOUT: int = 120


# singleton
settings = Settings()
