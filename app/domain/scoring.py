"""
Scoring engine
Computes the heuristic success probability and feature importances of a startup.

The clock and the random source are injectable, so the engine is a pure
function of its inputs when both are fixed.
"""

import random
from datetime import datetime
from types import MappingProxyType
from typing import Callable, Optional, Protocol

from loguru import logger

from app.schemas.startup import StartupProfile
from app.schemas.results import FeatureImportance, ScoreResult


class RandomSource(Protocol):
    """Anything with random() -> float in [0, 1)"""

    def random(self) -> float: ...


CATEGORY_MULTIPLIERS = MappingProxyType({
    "AI/ML": 1.2,
    "FinTech": 1.15,
    "HealthTech": 1.1,
    "SaaS": 1.1,
    "Software": 1.05,
    "E-commerce": 1.0,
    "EdTech": 1.0,
    "Blockchain": 0.95,
    "Mobile Apps": 0.9,
    "Gaming": 0.85,
    "Other": 0.9,
})

LOCATION_MULTIPLIERS = MappingProxyType({
    "North America": 1.1,
    "Europe": 1.05,
    "Asia": 1.0,
    "Oceania": 0.95,
    "South America": 0.9,
    "Africa": 0.85,
})

DEFAULT_MULTIPLIER = 1.0


class ScoringEngine:
    """
    Rule-based scoring engine

    Four normalized sub-scores (0-100) are combined with fixed weights,
    scaled by category/location multipliers, perturbed by +-5 points of
    noise and clamped to 5-95.
    """

    # Weights of the normalized sub-scores (sum 1.0)
    WEIGHTS = {
        "funding": 0.35,
        "team_size": 0.20,
        "age": 0.15,
        "sentiment": 0.30,
    }

    # Values at which a sub-score saturates at 100
    FUNDING_CAP = 10_000_000
    TEAM_SIZE_CAP = 50
    AGE_CAP_YEARS = 10

    NOISE_SPAN = 10.0
    MIN_PROBABILITY = 5.0
    MAX_PROBABILITY = 95.0

    MARKET_IMPORTANCE_BASE = 70.0
    MARKET_IMPORTANCE_SPAN = 20.0

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Args:
            rng: random source (defaults to a new random.Random)
            clock: returns the current datetime (defaults to datetime.now)
        """
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock or datetime.now

    def score(
        self,
        profile: StartupProfile,
        sentiment_score: float,
        current_year: Optional[int] = None,
    ) -> ScoreResult:
        """
        Computes the probability and the feature importances in one pass.

        Both values use the same current year.
        """
        year = self._resolve_year(current_year)
        probability = self.compute_success_probability(
            profile, sentiment_score, current_year=year
        )
        importance = self.compute_feature_importance(
            profile, sentiment_score, current_year=year
        )

        logger.debug(
            f"Score for {profile.market_category}/{profile.location}: {probability:.2f}"
        )
        return ScoreResult(
            success_probability=probability,
            feature_importance=importance,
        )

    def compute_success_probability(
        self,
        profile: StartupProfile,
        sentiment_score: float,
        current_year: Optional[int] = None,
        rng: Optional[RandomSource] = None,
    ) -> float:
        """
        Success probability in percent.

        Args:
            profile: validated startup profile
            sentiment_score: sentiment confidence in [0, 1]
            current_year: overrides the clock
            rng: overrides the engine's random source

        Returns:
            probability clamped to [5, 95]
        """
        rng = rng if rng is not None else self.rng
        base = self.base_score(profile, sentiment_score, current_year)
        noise = (rng.random() - 0.5) * self.NOISE_SPAN
        return max(self.MIN_PROBABILITY, min(self.MAX_PROBABILITY, base + noise))

    def base_score(
        self,
        profile: StartupProfile,
        sentiment_score: float,
        current_year: Optional[int] = None,
    ) -> float:
        """Weighted sub-scores times both multipliers, before noise and clamping"""
        scores = self.sub_scores(profile, sentiment_score, current_year)
        base = sum(scores[name] * weight for name, weight in self.WEIGHTS.items())
        return (
            base
            * category_multiplier(profile.market_category)
            * location_multiplier(profile.location)
        )

    def sub_scores(
        self,
        profile: StartupProfile,
        sentiment_score: float,
        current_year: Optional[int] = None,
    ) -> dict[str, float]:
        """Normalized sub-scores, each capped at 100"""
        company_age = self._resolve_year(current_year) - profile.founded_year

        return {
            "funding": min(profile.funding_amount / self.FUNDING_CAP, 1) * 100,
            "team_size": min(profile.team_size / self.TEAM_SIZE_CAP, 1) * 100,
            "age": min(company_age / self.AGE_CAP_YEARS, 1) * 100,
            "sentiment": sentiment_score * 100,
        }

    def compute_feature_importance(
        self,
        profile: StartupProfile,
        sentiment_score: float,
        current_year: Optional[int] = None,
        rng: Optional[RandomSource] = None,
    ) -> list[FeatureImportance]:
        """
        Feature importances sorted highest first.

        The market entry is a random weight in [70, 90). Equal importances
        keep the order funding, company age, team size, sentiment, market.
        """
        rng = rng if rng is not None else self.rng
        scores = self.sub_scores(profile, sentiment_score, current_year)

        features = [
            FeatureImportance(
                feature="funding_total_usd",
                display_name="Funding",
                importance=scores["funding"],
            ),
            FeatureImportance(
                feature="company_age",
                display_name="Company Age",
                importance=scores["age"],
            ),
            FeatureImportance(
                feature="team_size",
                display_name="Team Size",
                importance=scores["team_size"],
            ),
            FeatureImportance(
                feature="sentiment",
                display_name="Sentiment",
                importance=scores["sentiment"],
            ),
            FeatureImportance(
                feature="market_category",
                display_name="Market",
                importance=(
                    self.MARKET_IMPORTANCE_BASE
                    + rng.random() * self.MARKET_IMPORTANCE_SPAN
                ),
            ),
        ]

        # sorted() is stable, also with reverse=True
        return sorted(features, key=lambda f: f.importance, reverse=True)

    def _resolve_year(self, current_year: Optional[int]) -> int:
        if current_year is not None:
            return current_year
        return self.clock().year


def category_multiplier(market_category: str) -> float:
    """Multiplier of a market category (1.0 if unknown)"""
    return CATEGORY_MULTIPLIERS.get(market_category, DEFAULT_MULTIPLIER)


def location_multiplier(location: str) -> float:
    """Multiplier of a region (1.0 if unknown)"""
    return LOCATION_MULTIPLIERS.get(location, DEFAULT_MULTIPLIER)


_default_engine = ScoringEngine()


def compute_success_probability(
    profile: StartupProfile,
    sentiment_score: float,
    current_year: Optional[int] = None,
    rng: Optional[RandomSource] = None,
) -> float:
    """Success probability using the shared default engine"""
    return _default_engine.compute_success_probability(
        profile, sentiment_score, current_year=current_year, rng=rng
    )


def compute_feature_importance(
    profile: StartupProfile,
    sentiment_score: float,
    current_year: Optional[int] = None,
    rng: Optional[RandomSource] = None,
) -> list[FeatureImportance]:
    """Feature importances using the shared default engine"""
    return _default_engine.compute_feature_importance(
        profile, sentiment_score, current_year=current_year, rng=rng
    )
