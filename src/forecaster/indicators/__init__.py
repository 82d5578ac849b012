"""Technical indicator library.

Stateless functions over a close-price series: moving averages, standard
deviation, Bollinger Bands, MACD and RSI, plus the display-only market status
summary built on top of them.
"""

from forecaster.indicators.bands import bollinger_bands
from forecaster.indicators.macd import macd
from forecaster.indicators.models import BollingerBands, MACDResult
from forecaster.indicators.moving_average import ema, sma, std_dev
from forecaster.indicators.rsi import rsi
from forecaster.indicators.status import market_status

__all__ = [
    "BollingerBands",
    "MACDResult",
    "bollinger_bands",
    "ema",
    "macd",
    "market_status",
    "rsi",
    "sma",
    "std_dev",
]
