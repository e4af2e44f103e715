"""
VentureScope agent package
Each agent has a single responsibility and fixed input/output schemas.
"""

from .base import BaseAgent
from .sentiment_agent import SentimentAgent
from .score_agent import ScoreAgent, ScoreInput
from .improvement_agent import ImprovementAgent, ImprovementInput

__all__ = [
    "BaseAgent",
    "SentimentAgent",
    "ScoreAgent",
    "ScoreInput",
    "ImprovementAgent",
    "ImprovementInput",
]
