"""Candlestick pattern classification.

Looks at the latest candle and its immediate predecessor only. Rules are
evaluated in a fixed priority order and the first match wins, so a tiny
body is always a Doji even if it would also engulf the previous candle.
"""

from collections.abc import Sequence

from forecaster.models import Candle, PatternName, PatternResult

#: Body at or below this share of the range is indecision.
DOJI_BODY_RATIO = 0.05
#: A rejection wick must be at least this multiple of the body.
WICK_BODY_MULTIPLE = 2.0
#: The opposite wick must be at most this multiple of the body.
OPPOSITE_WICK_MAX = 0.2
#: Body at or above this share of the range is a marubozu.
MARUBOZU_BODY_RATIO = 0.9

INSUFFICIENT_DATA = PatternResult(name=PatternName.INSUFFICIENT_DATA, score=0.0)


def detect_pattern(candles: Sequence[Candle]) -> PatternResult:
    """Classify the last candle of ``candles`` into a named pattern.

    Priority order:
        1. Doji                 0.0
        2. Hammer              +0.8
        3. Shooting Star       -0.8
        4. Bullish Engulfing   +1.0
        5. Bearish Engulfing   -1.0
        6. Strong momentum     +/-0.6 by direction
        7. Standard Price Action 0.0

    Args:
        candles: Chronological candles; only the last two are read.

    Returns:
        PatternResult. "Insufficient Data" with score 0 when fewer than two
        candles are given.
    """
    if len(candles) < 2:
        return INSUFFICIENT_DATA

    current = candles[-1]
    previous = candles[-2]

    body = abs(current.open - current.close)
    total_range = (current.high - current.low) or 1.0
    is_bullish = current.close > current.open

    if is_bullish:
        upper_wick = current.high - current.close
        lower_wick = current.open - current.low
    else:
        upper_wick = current.high - current.open
        lower_wick = current.close - current.low

    prev_is_bullish = previous.close > previous.open

    if body <= total_range * DOJI_BODY_RATIO:
        return PatternResult(name=PatternName.DOJI, score=0.0)

    if lower_wick >= body * WICK_BODY_MULTIPLE and upper_wick <= body * OPPOSITE_WICK_MAX:
        return PatternResult(name=PatternName.HAMMER, score=0.8)

    if upper_wick >= body * WICK_BODY_MULTIPLE and lower_wick <= body * OPPOSITE_WICK_MAX:
        return PatternResult(name=PatternName.SHOOTING_STAR, score=-0.8)

    if (
        is_bullish
        and not prev_is_bullish
        and current.close > previous.open
        and current.open < previous.close
    ):
        return PatternResult(name=PatternName.BULLISH_ENGULFING, score=1.0)

    if (
        not is_bullish
        and prev_is_bullish
        and current.open > previous.close
        and current.close < previous.open
    ):
        return PatternResult(name=PatternName.BEARISH_ENGULFING, score=-1.0)

    if body >= total_range * MARUBOZU_BODY_RATIO:
        if is_bullish:
            return PatternResult(name=PatternName.STRONG_BULLISH_MOMENTUM, score=0.6)
        return PatternResult(name=PatternName.STRONG_BEARISH_MOMENTUM, score=-0.6)

    return PatternResult(name=PatternName.STANDARD_PRICE_ACTION, score=0.0)
