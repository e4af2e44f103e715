"""
Improvement Agent
Asks the language model for suggestions that could raise the success probability.
"""

from typing import Optional

from .base import BaseAgent
from app.config import settings
from app.llm import LLMClient, get_llm_client


SYSTEM_PROMPT = "You are a startup business consultant providing actionable advice."

# Used when the model answers without a usable suggestion list
DEFAULT_SUGGESTIONS = [
    "Expand your team to cover critical skill gaps",
    "Increase market research to better understand customer needs",
    "Develop a stronger go-to-market strategy",
    "Build strategic partnerships to accelerate growth",
]

MAX_SUGGESTIONS = 6


class ImprovementInput:
    """Improvement Agent input"""
    def __init__(
        self,
        startup_name: str,
        team_size: int,
        funding_amount: float,
        market_category: str,
        description: str,
        success_probability: float,
        sentiment: str,
    ):
        self.startup_name = startup_name
        self.team_size = team_size
        self.funding_amount = funding_amount
        self.market_category = market_category
        self.description = description
        self.success_probability = success_probability
        self.sentiment = sentiment


class ImprovementAgent(BaseAgent[ImprovementInput, list[str]]):
    """
    Improvement suggestion Agent

    Requests 4-6 concise, actionable suggestions.
    Raises LLMError when the model cannot be reached.
    """

    name = "ImprovementAgent"

    def __init__(self, llm: Optional[LLMClient] = None):
        super().__init__()
        self._llm = llm

    @property
    def llm(self) -> LLMClient:
        return self._llm or get_llm_client()

    def _process(self, input_data: ImprovementInput) -> list[str]:
        data = self.llm.extract_json(
            system_prompt=SYSTEM_PROMPT,
            user_prompt=build_prompt(input_data),
            max_tokens=settings.SUGGESTIONS_MAX_TOKENS,
        )

        raw = data.get("suggestions")
        if not isinstance(raw, list):
            raw = []

        suggestions = [s.strip() for s in raw if isinstance(s, str) and s.strip()]
        if not suggestions:
            self.logger.warning("Model returned no suggestions, using defaults")
            return list(DEFAULT_SUGGESTIONS)

        return suggestions[:MAX_SUGGESTIONS]


def build_prompt(data: ImprovementInput) -> str:
    """Formats the user prompt"""
    return f"""You are a startup consultant AI. Based on the following startup data, provide 4-6 specific, actionable improvement suggestions to increase their success probability. Be concise and practical.

Startup: {data.startup_name}
Team Size: {data.team_size}
Funding: ${data.funding_amount / 1_000_000:.2f}M
Market Category: {data.market_category}
Current Success Probability: {round(data.success_probability)}%
Description Sentiment: {data.sentiment}
Description: {data.description}

Respond with JSON in this format: {{ "suggestions": ["suggestion 1", "suggestion 2", ...] }}"""
