"""Predictor interface and the bundled reference regressor."""

from forecaster.predictor.base import Predictor, ProgressCallback, ProgressEvent
from forecaster.predictor.linear import LinearModel, LinearWindowPredictor, huber_loss

__all__ = [
    "LinearModel",
    "LinearWindowPredictor",
    "Predictor",
    "ProgressCallback",
    "ProgressEvent",
    "huber_loss",
]
