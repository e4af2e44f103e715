"""
VentureScope domain package
Rule-based scoring logic. The language model is not involved in this layer.
"""

from .scoring import (
    ScoringEngine,
    CATEGORY_MULTIPLIERS,
    LOCATION_MULTIPLIERS,
    category_multiplier,
    location_multiplier,
    compute_success_probability,
    compute_feature_importance,
)

__all__ = [
    "ScoringEngine",
    "CATEGORY_MULTIPLIERS",
    "LOCATION_MULTIPLIERS",
    "category_multiplier",
    "location_multiplier",
    "compute_success_probability",
    "compute_feature_importance",
]
