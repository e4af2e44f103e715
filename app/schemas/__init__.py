"""
VentureScope schema package
Defines the JSON input/output schemas of every agent and endpoint.
"""

from .startup import (
    StartupProfile,
    PredictionRequest,
    MARKET_CATEGORIES,
    REGIONS,
)
from .results import (
    SentimentLabel,
    SentimentResult,
    FeatureImportance,
    ScoreResult,
    PredictionRecord,
    Prediction,
)

__all__ = [
    "StartupProfile",
    "PredictionRequest",
    "MARKET_CATEGORIES",
    "REGIONS",
    "SentimentLabel",
    "SentimentResult",
    "FeatureImportance",
    "ScoreResult",
    "PredictionRecord",
    "Prediction",
]
