"""
Pipeline Orchestrator
Runs the agents in order and stores the combined result.
"""

from typing import Optional

from loguru import logger

from app.schemas.startup import PredictionRequest
from app.schemas.results import PredictionRecord, Prediction, SentimentResult
from app.agents.sentiment_agent import SentimentAgent
from app.agents.score_agent import ScoreAgent, ScoreInput
from app.agents.improvement_agent import ImprovementAgent, ImprovementInput
from app.storage.prediction_store import PredictionStore, get_prediction_store

# Used when the suggestion provider fails
FALLBACK_IMPROVEMENTS = [
    "Focus on customer acquisition and retention strategies to build a sustainable user base",
    "Optimize your product-market fit through continuous user feedback and iteration",
    "Build strategic partnerships to accelerate growth and expand market reach",
    "Develop scalable business processes to support rapid growth efficiently",
]


class PredictionPipeline:
    """
    Prediction pipeline

    Sentiment → Score → Improvements → Store

    Provider failures (sentiment, suggestions) are replaced by fixed
    fallbacks and never reach the caller. Storage errors propagate.
    """

    def __init__(
        self,
        sentiment_agent: Optional[SentimentAgent] = None,
        score_agent: Optional[ScoreAgent] = None,
        improvement_agent: Optional[ImprovementAgent] = None,
        store: Optional[PredictionStore] = None,
    ):
        self.sentiment_agent = sentiment_agent or SentimentAgent()
        self.score_agent = score_agent or ScoreAgent()
        self.improvement_agent = improvement_agent or ImprovementAgent()
        self.store = store or get_prediction_store()

        self.logger = logger.bind(component="Pipeline")

    def run(self, request: PredictionRequest) -> Prediction:
        """Runs the whole pipeline for one startup"""
        self.logger.info(f"Starting prediction for {request.startup_name!r}")

        # 1. Description sentiment
        self.logger.info("Step 1: Analyzing sentiment...")
        try:
            sentiment = self.sentiment_agent.run(request.description)
        except Exception as e:
            self.logger.warning(f"Sentiment analysis failed, using neutral fallback: {e}")
            sentiment = SentimentResult.neutral()

        # 2. Probability and feature importance
        self.logger.info("Step 2: Scoring...")
        score = self.score_agent.run(
            ScoreInput(profile=request.to_profile(), sentiment_score=sentiment.score)
        )

        # 3. Improvement suggestions
        self.logger.info("Step 3: Generating improvement suggestions...")
        try:
            improvements = self.improvement_agent.run(ImprovementInput(
                startup_name=request.startup_name,
                team_size=request.team_size,
                funding_amount=request.funding_amount,
                market_category=request.market_category,
                description=request.description,
                success_probability=score.success_probability,
                sentiment=sentiment.sentiment,
            ))
        except Exception as e:
            self.logger.warning(f"Improvement suggestions failed, using fallback: {e}")
            improvements = list(FALLBACK_IMPROVEMENTS)

        # 4. Store
        record = PredictionRecord(
            **request.model_dump(),
            success_probability=score.success_probability,
            sentiment=sentiment.sentiment,
            sentiment_score=sentiment.score,
            feature_importance=score.feature_importance,
            improvements=improvements,
        )
        prediction = self.store.create(record)

        self.logger.info(
            f"Prediction {prediction.id} done: {prediction.success_probability:.1f}% "
            f"({prediction.sentiment})"
        )
        return prediction
