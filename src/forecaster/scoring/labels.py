"""Display labels derived from core signals.

These mirror how the terminal colors its cards: a tone for the pattern,
the sentiment, each status label and the confidence bar.
"""

from enum import Enum

from forecaster.models import MarketStatus, PatternResult


class Tone(str, Enum):
    """Color class for a dashboard value."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    WARNING = "warning"


def sentiment_label(sentiment: float, neutral_band: float = 0.2) -> str:
    """Bullish above the band, Bearish below its negative, else Neutral."""
    if sentiment > neutral_band:
        return "Bullish"
    if sentiment < -neutral_band:
        return "Bearish"
    return "Neutral"


def pattern_tone(pattern: PatternResult) -> Tone:
    if pattern.score > 0:
        return Tone.POSITIVE
    if pattern.score < 0:
        return Tone.NEGATIVE
    return Tone.NEUTRAL


def status_tone(label: str) -> Tone:
    """Tone for a MACD or Bollinger status label.

    Bullish momentum and oversold prices read as positive; bearish
    momentum and overbought prices read as negative.
    """
    if "Bullish" in label or "Oversold" in label:
        return Tone.POSITIVE
    if "Bearish" in label or "Overbought" in label:
        return Tone.NEGATIVE
    return Tone.NEUTRAL


def market_status_tones(status: MarketStatus) -> dict[str, Tone]:
    return {
        "macd": status_tone(status.macd_status),
        "bb": status_tone(status.bb_status),
    }


def confidence_tone(
    confidence: float, positive_above: float = 75.0, warning_above: float = 50.0
) -> Tone:
    """Tone for the confidence bar: positive above 75, warning above 50."""
    if confidence > positive_above:
        return Tone.POSITIVE
    if confidence > warning_above:
        return Tone.WARNING
    return Tone.NEGATIVE


def market_reasoning(reasoning: str, status: MarketStatus) -> str:
    """Append the Bollinger status to a forecast rationale."""
    return f"{reasoning} Market is currently {status.bb_status}."
