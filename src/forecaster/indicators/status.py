"""Market status summary for display.

Reads the tail of the MACD and Bollinger series and reports a momentum
label and a volatility label. Nothing here feeds the model.
"""

from collections.abc import Sequence

from forecaster.config import IndicatorSettings
from forecaster.indicators.bands import bollinger_bands
from forecaster.indicators.macd import macd
from forecaster.models import MarketStatus

INSUFFICIENT_DATA = "Insufficient Data"

MACD_BULLISH_CROSS = "Bullish Cross (Buy)"
MACD_BEARISH_CROSS = "Bearish Cross (Sell)"
MACD_BULLISH_MOMENTUM = "Bullish Momentum"
MACD_BEARISH_MOMENTUM = "Bearish Momentum"
MACD_NEUTRAL = "Neutral"

BB_OVERBOUGHT = "Overbought (Upper Band)"
BB_OVERSOLD = "Oversold (Lower Band)"
BB_IN_RANGE = "In Range"


def _classify_macd(
    prev_macd: float | None,
    prev_signal: float | None,
    last_macd: float | None,
    last_signal: float | None,
) -> str:
    if last_macd is None or last_signal is None:
        return MACD_NEUTRAL

    if prev_macd is not None and prev_signal is not None:
        if prev_macd < prev_signal and last_macd > last_signal:
            return MACD_BULLISH_CROSS
        if prev_macd > prev_signal and last_macd < last_signal:
            return MACD_BEARISH_CROSS

    if last_macd > last_signal:
        return MACD_BULLISH_MOMENTUM
    if last_macd < last_signal:
        return MACD_BEARISH_MOMENTUM
    return MACD_NEUTRAL


def _classify_bands(
    last_price: float, upper: float | None, lower: float | None
) -> str:
    if upper is not None and last_price >= upper:
        return BB_OVERBOUGHT
    if lower is not None and last_price <= lower:
        return BB_OVERSOLD
    return BB_IN_RANGE


def market_status(
    prices: Sequence[float], settings: IndicatorSettings | None = None
) -> MarketStatus:
    """Summarize MACD momentum and Bollinger position from the full price history.

    With fewer than ``settings.market_status_min_points`` prices (35 by
    default, the MACD plus signal warm-up) both labels are
    "Insufficient Data".

    Args:
        prices: Close prices, oldest first.
        settings: Indicator periods. Defaults to standard values.

    Returns:
        MarketStatus with independent MACD and Bollinger labels.
    """
    if settings is None:
        settings = IndicatorSettings()

    if len(prices) < settings.market_status_min_points:
        return MarketStatus(macd_status=INSUFFICIENT_DATA, bb_status=INSUFFICIENT_DATA)

    macd_data = macd(
        prices,
        fast=settings.macd_fast,
        slow=settings.macd_slow,
        signal=settings.macd_signal,
    )
    bands = bollinger_bands(
        prices, period=settings.bollinger_period, k=settings.bollinger_k
    )

    macd_status = _classify_macd(
        prev_macd=macd_data.macd_line[-2],
        prev_signal=macd_data.signal_line[-2],
        last_macd=macd_data.macd_line[-1],
        last_signal=macd_data.signal_line[-1],
    )
    bb_status = _classify_bands(prices[-1], bands.upper[-1], bands.lower[-1])

    return MarketStatus(macd_status=macd_status, bb_status=bb_status)
