"""Attach a candlestick pattern to every candle in a history."""

from collections.abc import Sequence

from forecaster.logging import get_logger
from forecaster.models import Candle, EnrichedCandle
from forecaster.patterns.detector import detect_pattern

logger = get_logger(__name__)


def enrich_candles(candles: Sequence[Candle]) -> list[EnrichedCandle]:
    """Classify each candle against its predecessor.

    Uses a trailing two-candle window clamped at the start of history, so
    the first candle always carries "Insufficient Data". The input
    candles are not modified; new EnrichedCandle objects are returned.

    Args:
        candles: Chronological candles.

    Returns:
        EnrichedCandle list, same length and order as ``candles``.
    """
    logger.debug("enriching_candles", count=len(candles))

    enriched: list[EnrichedCandle] = []
    for i, candle in enumerate(candles):
        window = candles[max(0, i - 1) : i + 1]
        pattern = detect_pattern(window)
        enriched.append(
            EnrichedCandle(
                label=candle.label,
                open=candle.open,
                high=candle.high,
                low=candle.low,
                close=candle.close,
                volume=candle.volume,
                pattern_name=pattern.name,
                pattern_score=pattern.score,
            )
        )
    return enriched
