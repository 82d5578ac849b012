"""Post-inference confidence scoring and display labels."""

from forecaster.scoring.confidence import base_confidence, score_confidence
from forecaster.scoring.labels import (
    Tone,
    confidence_tone,
    market_reasoning,
    market_status_tones,
    pattern_tone,
    sentiment_label,
    status_tone,
)

__all__ = [
    "Tone",
    "base_confidence",
    "confidence_tone",
    "market_reasoning",
    "market_status_tones",
    "pattern_tone",
    "score_confidence",
    "sentiment_label",
    "status_tone",
]
