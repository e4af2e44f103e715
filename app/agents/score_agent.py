"""
Score Agent
Computes the success probability and the feature importances.
"""

from typing import Optional

from .base import BaseAgent
from app.schemas.startup import StartupProfile
from app.schemas.results import ScoreResult
from app.domain.scoring import ScoringEngine


class ScoreInput:
    """Score Agent input"""
    def __init__(self, profile: StartupProfile, sentiment_score: float):
        self.profile = profile
        self.sentiment_score = sentiment_score


class ScoreAgent(BaseAgent[ScoreInput, ScoreResult]):
    """
    Scoring Agent

    Uses the rule-based ScoringEngine.
    The language model is not used here.
    """

    name = "ScoreAgent"

    def __init__(self, engine: Optional[ScoringEngine] = None):
        super().__init__()
        self.engine = engine or ScoringEngine()

    def _validate_input(self, input_data: ScoreInput) -> None:
        super()._validate_input(input_data)
        if not 0.0 <= input_data.sentiment_score <= 1.0:
            raise ValueError(
                f"{self.name}: sentiment score out of range: {input_data.sentiment_score}"
            )

    def _process(self, input_data: ScoreInput) -> ScoreResult:
        return self.engine.score(
            profile=input_data.profile,
            sentiment_score=input_data.sentiment_score,
        )
