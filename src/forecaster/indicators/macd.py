"""MACD momentum indicator.

The signal line is an EMA of the MACD line, but the MACD line itself has
a warm-up gap. The signal EMA is therefore computed over the compacted
(gap-free) MACD values and mapped back onto the price timeline by offset:
compact index ``c`` sits at price index ``first_defined + c``.
"""

from collections.abc import Sequence

from forecaster.indicators.models import MACDResult
from forecaster.indicators.moving_average import ema
from forecaster.models import IndicatorSeries


def macd(
    prices: Sequence[float],
    fast: int = 12,
    slow: int = 26,
    signal: int = 9,
) -> MACDResult:
    """Compute MACD line, signal line and histogram.

    macd_line = EMA(fast) - EMA(slow), defined from index ``slow - 1``.
    signal_line = EMA(signal) of macd_line, defined from
    ``slow - 1 + signal - 1``.
    histogram = macd_line - signal_line where both are defined.

    Args:
        prices: Close prices, oldest first.
        fast: Fast EMA period. Default 12.
        slow: Slow EMA period. Default 26.
        signal: Signal EMA period. Default 9.

    Returns:
        MACDResult with three series the same length as ``prices``.
    """
    n = len(prices)
    fast_ema = ema(prices, fast)
    slow_ema = ema(prices, slow)

    macd_line: IndicatorSeries = [None] * n
    for i in range(n):
        f, s = fast_ema[i], slow_ema[i]
        if f is not None and s is not None:
            macd_line[i] = f - s

    signal_line: IndicatorSeries = [None] * n
    histogram: IndicatorSeries = [None] * n

    defined = [i for i, value in enumerate(macd_line) if value is not None]
    if not defined:
        return MACDResult(macd_line=macd_line, signal_line=signal_line, histogram=histogram)

    first_defined = defined[0]
    compact = [value for value in macd_line if value is not None]
    compact_signal = ema(compact, signal)

    for c, value in enumerate(compact_signal):
        if value is None:
            continue
        idx = first_defined + c
        signal_line[idx] = value
        histogram[idx] = macd_line[idx] - value

    return MACDResult(macd_line=macd_line, signal_line=signal_line, histogram=histogram)
