"""Shared data models for the price forecaster.

Candles are plain floats: the values feed min/max scaling and a numpy
regressor, so there is no fixed-point arithmetic anywhere in the pipeline.
"""

from dataclasses import dataclass
from enum import Enum

#: An indicator value per candle; None marks the warm-up window.
IndicatorSeries = list[float | None]

#: One 7-wide model input row (see forecaster.features.windows).
FeatureVector = tuple[float, float, float, float, float, float, float]


class Direction(str, Enum):
    """Forecast direction relative to the last known close."""

    BULLISH = "bullish"
    BEARISH = "bearish"


class PatternName(str, Enum):
    """Candlestick pattern labels produced by the pattern detector."""

    INSUFFICIENT_DATA = "Insufficient Data"
    DOJI = "Doji (Indecision)"
    HAMMER = "Hammer (Bullish)"
    SHOOTING_STAR = "Shooting Star (Bearish)"
    BULLISH_ENGULFING = "Bullish Engulfing"
    BEARISH_ENGULFING = "Bearish Engulfing"
    STRONG_BULLISH_MOMENTUM = "Strong Bullish Momentum"
    STRONG_BEARISH_MOMENTUM = "Strong Bearish Momentum"
    STANDARD_PRICE_ACTION = "Standard Price Action"


@dataclass(frozen=True)
class Candle:
    """A single OHLCV observation. ``label`` is the date or time string."""

    label: str
    open: float
    high: float
    low: float
    close: float
    volume: float


@dataclass(frozen=True)
class PatternResult:
    """Classified candlestick pattern with a signed strength in [-1, 1]."""

    name: PatternName
    score: float


@dataclass(frozen=True)
class EnrichedCandle(Candle):
    """Candle plus the pattern detected on it and its predecessor."""

    pattern_name: PatternName = PatternName.INSUFFICIENT_DATA
    pattern_score: float = 0.0

    @property
    def pattern(self) -> PatternResult:
        return PatternResult(name=self.pattern_name, score=self.pattern_score)


@dataclass(frozen=True)
class MarketStatus:
    """Human-readable momentum and volatility labels for display."""

    macd_status: str
    bb_status: str


@dataclass(frozen=True)
class ConfidenceResult:
    """Scored forecast: de-scaled target, confidence in [10, 98], rationale."""

    target_price: float
    confidence: int
    reasoning: str
    direction: Direction
