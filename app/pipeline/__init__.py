"""
Pipeline package
"""

from .orchestrator import PredictionPipeline, FALLBACK_IMPROVEMENTS

__all__ = ["PredictionPipeline", "FALLBACK_IMPROVEMENTS"]
