"""
Storage module
"""

from .prediction_store import PredictionStore, StorageError, get_prediction_store

__all__ = [
    "PredictionStore",
    "StorageError",
    "get_prediction_store",
]
