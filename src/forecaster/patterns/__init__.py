"""Candlestick pattern detection and dataset enrichment."""

from forecaster.patterns.detector import detect_pattern
from forecaster.patterns.enrich import enrich_candles

__all__ = [
    "detect_pattern",
    "enrich_candles",
]
