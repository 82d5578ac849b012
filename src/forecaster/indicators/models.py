"""Multi-series indicator results.

Every series is index-aligned with the price list it was computed from.
"""

from dataclasses import dataclass

from forecaster.models import IndicatorSeries


@dataclass(frozen=True)
class BollingerBands:
    """Volatility envelope around the simple moving average."""

    upper: IndicatorSeries
    middle: IndicatorSeries
    lower: IndicatorSeries


@dataclass(frozen=True)
class MACDResult:
    """MACD line, its signal EMA and the histogram between them."""

    macd_line: IndicatorSeries
    signal_line: IndicatorSeries
    histogram: IndicatorSeries
