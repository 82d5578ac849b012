"""Custom exceptions for the price forecaster.

Indicator, pattern and feature code never raises for short or flat data;
those cases degrade to sentinel values. The exceptions here cover the
outer layers: loading input, training and predicting.
"""


class ForecasterError(Exception):
    """Base exception for all forecaster errors."""


class CandleFormatError(ForecasterError):
    """Raised when a candle file row is missing fields or is not numeric."""


class InsufficientHistoryError(ForecasterError):
    """Raised when too few candles exist to build a single training window."""


class EmptyDatasetError(ForecasterError):
    """Raised when a predictor is asked to train on zero samples."""


class PredictorNotTrainedError(ForecasterError):
    """Raised when predict is called with a handle that was never built."""


class TrainingAbandonedError(ForecasterError):
    """Raised when the caller abandons an in-flight training run."""


class PipelineBusyError(ForecasterError):
    """Raised when a run is started while another run on the same pipeline is in flight."""
