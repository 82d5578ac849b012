"""Bollinger Bands volatility envelope."""

from collections.abc import Sequence

from forecaster.indicators.models import BollingerBands
from forecaster.indicators.moving_average import sma, std_dev
from forecaster.models import IndicatorSeries


def bollinger_bands(
    prices: Sequence[float], period: int = 20, k: float = 2.0
) -> BollingerBands:
    """Compute upper, middle and lower bands.

    middle = SMA(period); upper/lower = middle +/- k * StdDev(period),
    where the deviation is measured around that same middle band.
    All three are absent together until ``period - 1``.

    Args:
        prices: Close prices, oldest first.
        period: SMA and deviation window. Default 20.
        k: Band width in standard deviations. Default 2.

    Returns:
        BollingerBands with three index-aligned series.
    """
    middle = sma(prices, period)
    deviation = std_dev(prices, period, middle)

    upper: IndicatorSeries = [None] * len(prices)
    lower: IndicatorSeries = [None] * len(prices)
    for i, (mid, dev) in enumerate(zip(middle, deviation)):
        if mid is None or dev is None:
            continue
        upper[i] = mid + dev * k
        lower[i] = mid - dev * k

    return BollingerBands(upper=upper, middle=middle, lower=lower)
