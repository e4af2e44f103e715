"""
VentureScope test fixtures
"""

import sys
sys.path.insert(0, ".")

from typing import Optional

import pytest

from app.llm import LLMClient, LLMError, set_llm_client
from app.schemas import StartupProfile, PredictionRequest


class StubRandom:
    """Random source that always returns the same value"""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


class EmptyLengthRandom(StubRandom):
    """Random source whose truth value is False"""

    def __len__(self) -> int:
        return 0


class FakeLLMClient(LLMClient):
    """
    LLM client with canned JSON answers

    The answer is chosen by a keyword found in the system prompt.
    """

    def __init__(self, answers: Optional[dict[str, dict]] = None):
        super().__init__(api_key="test-key", model="fake-model")
        self.answers = answers or {}
        self.calls: list[tuple[str, str]] = []

    def extract_json(self, system_prompt: str, user_prompt: str, max_tokens: int = 1024) -> dict:
        self.calls.append((system_prompt, user_prompt))
        for keyword, answer in self.answers.items():
            if keyword in system_prompt:
                return answer
        raise LLMError("no canned answer")


class FailingLLMClient(LLMClient):
    """LLM client whose every request fails"""

    def __init__(self):
        super().__init__(api_key="test-key", model="fake-model")

    def extract_json(self, system_prompt: str, user_prompt: str, max_tokens: int = 1024) -> dict:
        raise LLMError("provider unavailable")


SENTIMENT_KEYWORD = "sentiment analysis expert"
SUGGESTIONS_KEYWORD = "business consultant"


@pytest.fixture
def profile() -> StartupProfile:
    return StartupProfile(
        founded_year=2024,
        team_size=25,
        market_category="AI/ML",
        location="North America",
        funding_amount=5_000_000,
    )


@pytest.fixture
def prediction_request() -> PredictionRequest:
    return PredictionRequest(
        startup_name="Acme Robotics",
        founded_year=2021,
        team_size=12,
        market_category="SaaS",
        location="Europe",
        funding_amount=2_500_000,
        description="Warehouse robots that learn new picking tasks from a single demonstration.",
    )


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient({
        SENTIMENT_KEYWORD: {"sentiment": "Positive", "score": 0.9},
        SUGGESTIONS_KEYWORD: {"suggestions": [
            "Hire a dedicated sales lead",
            "Publish customer case studies",
            "Raise a seed extension",
            "Add usage-based pricing",
        ]},
    })


@pytest.fixture
def shared_llm():
    """Installs an LLM client as the process-wide singleton for one test"""
    def install(client: LLMClient) -> LLMClient:
        set_llm_client(client)
        return client

    yield install
    set_llm_client(None)
