"""
Result schemas
Defines the outputs of each agent and the stored prediction record.
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .startup import PredictionRequest


class SentimentLabel(str, Enum):
    """Description sentiment"""
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


class SentimentResult(BaseModel):
    """
    Sentiment Agent output
    Classification of the description plus a confidence score.
    """
    model_config = ConfigDict(use_enum_values=True)

    sentiment: SentimentLabel = Field(description="Sentiment label")
    score: float = Field(
        ge=0.0,
        le=1.0,
        description="Confidence score (0-1)",
    )

    @classmethod
    def neutral(cls) -> "SentimentResult":
        """Fallback used when the provider is unavailable"""
        return cls(sentiment=SentimentLabel.NEUTRAL, score=0.5)


class FeatureImportance(BaseModel):
    """Relative weight of one input attribute (display only)"""
    model_config = ConfigDict(populate_by_name=True)

    feature: str = Field(description="Feature identifier", examples=["funding_total_usd"])
    display_name: str = Field(alias="displayName", description="Human label", examples=["Funding"])
    importance: float = Field(ge=0.0, le=100.0, description="Importance (0-100)")


class ScoreResult(BaseModel):
    """
    Score Agent output
    Probability and feature importances computed for the same moment.
    """
    success_probability: float = Field(description="Success probability in percent (5-95)")
    feature_importance: list[FeatureImportance] = Field(
        default_factory=list,
        description="Feature importances, highest first",
    )


class PredictionRecord(PredictionRequest):
    """A complete prediction before the store assigns id and timestamp"""
    model_config = ConfigDict(use_enum_values=True)

    success_probability: float = Field(alias="successProbability")
    sentiment: SentimentLabel
    sentiment_score: float = Field(alias="sentimentScore", ge=0.0, le=1.0)
    feature_importance: list[FeatureImportance] = Field(
        alias="featureImportance",
        default_factory=list,
    )
    improvements: list[str] = Field(default_factory=list)


class Prediction(PredictionRecord):
    """
    Stored prediction
    Returned by every prediction endpoint.
    """
    id: str = Field(description="Opaque unique identifier")
    created_at: datetime = Field(
        alias="createdAt",
        default_factory=lambda: datetime.now(timezone.utc),
    )
