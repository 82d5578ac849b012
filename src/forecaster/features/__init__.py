"""Feature normalization and sliding-window dataset construction."""

from forecaster.features.normalize import (
    min_max_scale,
    min_max_unscale,
    normalize_macro_rate,
    normalize_pattern_score,
    normalize_sentiment,
)
from forecaster.features.windows import FEATURE_COUNT, WindowedDataset, build_windows

__all__ = [
    "FEATURE_COUNT",
    "WindowedDataset",
    "build_windows",
    "min_max_scale",
    "min_max_unscale",
    "normalize_macro_rate",
    "normalize_pattern_score",
    "normalize_sentiment",
]
