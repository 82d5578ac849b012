"""Moving averages and rolling standard deviation over a price series.

All functions return a series the same length as the input. Slots without
enough history hold None; they are never filled with 0.
"""

import math
from collections.abc import Sequence

from forecaster.models import IndicatorSeries


def sma(series: Sequence[float], period: int) -> IndicatorSeries:
    """Simple moving average of each trailing window of ``period`` values.

    Args:
        series: Ordered values (oldest first).
        period: Window length.

    Returns:
        Series with None before index ``period - 1``.
    """
    result: IndicatorSeries = [None] * len(series)
    if period < 1:
        return result

    for i in range(period - 1, len(series)):
        window = series[i - period + 1 : i + 1]
        result[i] = sum(window) / period
    return result


def ema(series: Sequence[float], period: int) -> IndicatorSeries:
    """Exponential moving average seeded with the SMA of the first ``period`` values.

    Formula:
        k = 2 / (period + 1)
        ema[period - 1] = mean(series[:period])
        ema[i] = series[i] * k + ema[i - 1] * (1 - k)

    Unlike a first-value seed, this keeps the first ``period - 1`` slots
    absent so the warm-up is visible to callers.

    Args:
        series: Ordered values (oldest first).
        period: Smoothing span.

    Returns:
        Series with None before index ``period - 1``. All None when the
        input is shorter than ``period``.
    """
    result: IndicatorSeries = [None] * len(series)
    if period < 1 or len(series) < period:
        return result

    k = 2 / (period + 1)
    result[period - 1] = sum(series[:period]) / period
    for i in range(period, len(series)):
        result[i] = series[i] * k + result[i - 1] * (1 - k)
    return result


def std_dev(
    series: Sequence[float],
    period: int,
    mean_series: Sequence[float | None],
) -> IndicatorSeries:
    """Population standard deviation of each trailing window around a given mean.

    The mean is taken from ``mean_series`` rather than recomputed, so
    Bollinger Bands can share one SMA pass between the middle band and
    the deviation.

    Args:
        series: Ordered values (oldest first).
        period: Window length.
        mean_series: Per-index mean, typically ``sma(series, period)``.

    Returns:
        Series with None wherever the window is short or the mean is absent.
    """
    result: IndicatorSeries = [None] * len(series)
    if period < 1:
        return result

    for i in range(period - 1, len(series)):
        mean = mean_series[i]
        if mean is None:
            continue
        window = series[i - period + 1 : i + 1]
        variance = sum((value - mean) ** 2 for value in window) / period
        result[i] = math.sqrt(variance)
    return result
