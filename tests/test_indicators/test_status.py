"""Tests for the market status summary."""

from forecaster.config import IndicatorSettings
from forecaster.indicators.status import (
    BB_IN_RANGE,
    BB_OVERBOUGHT,
    BB_OVERSOLD,
    INSUFFICIENT_DATA,
    MACD_BEARISH_CROSS,
    MACD_BEARISH_MOMENTUM,
    MACD_BULLISH_CROSS,
    MACD_BULLISH_MOMENTUM,
    MACD_NEUTRAL,
    _classify_bands,
    _classify_macd,
    market_status,
)
from forecaster.models import Candle


class TestMarketStatus:
    """Tests for market_status on full price histories."""

    def test_insufficient_data_below_35(self) -> None:
        status = market_status([100.0 + i for i in range(34)])

        assert status.macd_status == INSUFFICIENT_DATA
        assert status.bb_status == INSUFFICIENT_DATA

    def test_empty_prices(self) -> None:
        status = market_status([])
        assert status.macd_status == INSUFFICIENT_DATA

    def test_uptrend_reports_status(self, uptrend_candles: list[Candle]) -> None:
        """40 uptrend candles are enough for a real status."""
        status = market_status([c.close for c in uptrend_candles])

        assert status.macd_status != INSUFFICIENT_DATA
        assert status.bb_status != INSUFFICIENT_DATA
        assert status.macd_status in {
            MACD_BULLISH_CROSS,
            MACD_BEARISH_CROSS,
            MACD_BULLISH_MOMENTUM,
            MACD_BEARISH_MOMENTUM,
            MACD_NEUTRAL,
        }

    def test_linear_uptrend_stays_in_range(self, uptrend_candles: list[Candle]) -> None:
        """A steady trend sits inside the bands (upper is ~2 above last close)."""
        status = market_status([c.close for c in uptrend_candles])
        assert status.bb_status == BB_IN_RANGE

    def test_spike_is_overbought(self) -> None:
        prices = [100.0] * 39 + [120.0]
        assert market_status(prices).bb_status == BB_OVERBOUGHT

    def test_drop_is_oversold(self) -> None:
        prices = [100.0] * 39 + [80.0]
        assert market_status(prices).bb_status == BB_OVERSOLD

    def test_custom_min_points(self) -> None:
        """The threshold comes from settings."""
        settings = IndicatorSettings(market_status_min_points=50)
        status = market_status([100.0 + i for i in range(40)], settings)
        assert status.macd_status == INSUFFICIENT_DATA

    def test_threshold_follows_longer_macd_periods(self) -> None:
        """slow=30, signal=9: 38 prices are still warming up."""
        settings = IndicatorSettings(macd_slow=30, macd_signal=9)
        status = market_status([100.0 + i for i in range(38)], settings)

        assert status.macd_status == INSUFFICIENT_DATA
        assert status.bb_status == INSUFFICIENT_DATA

    def test_longer_macd_periods_report_once_warm(self) -> None:
        settings = IndicatorSettings(macd_slow=30, macd_signal=9)
        status = market_status([100.0 + i for i in range(39)], settings)
        assert status.macd_status != INSUFFICIENT_DATA


class TestClassifyMacd:
    """Tests for crossover and momentum labelling."""

    def test_bullish_cross(self) -> None:
        assert _classify_macd(-0.1, 0.0, 0.2, 0.1) == MACD_BULLISH_CROSS

    def test_bearish_cross(self) -> None:
        assert _classify_macd(0.2, 0.1, -0.1, 0.0) == MACD_BEARISH_CROSS

    def test_bullish_momentum_without_cross(self) -> None:
        assert _classify_macd(0.3, 0.1, 0.4, 0.2) == MACD_BULLISH_MOMENTUM

    def test_bearish_momentum_without_cross(self) -> None:
        assert _classify_macd(-0.3, -0.1, -0.4, -0.2) == MACD_BEARISH_MOMENTUM

    def test_equal_lines_neutral(self) -> None:
        assert _classify_macd(0.1, 0.1, 0.1, 0.1) == MACD_NEUTRAL

    def test_absent_last_values_neutral(self) -> None:
        assert _classify_macd(None, None, None, None) == MACD_NEUTRAL

    def test_absent_previous_falls_back_to_momentum(self) -> None:
        assert _classify_macd(0.1, None, 0.3, 0.2) == MACD_BULLISH_MOMENTUM


class TestClassifyBands:
    """Tests for band position labelling."""

    def test_at_upper_is_overbought(self) -> None:
        assert _classify_bands(110.0, 110.0, 90.0) == BB_OVERBOUGHT

    def test_at_lower_is_oversold(self) -> None:
        assert _classify_bands(90.0, 110.0, 90.0) == BB_OVERSOLD

    def test_inside_is_in_range(self) -> None:
        assert _classify_bands(100.0, 110.0, 90.0) == BB_IN_RANGE

    def test_absent_bands_in_range(self) -> None:
        assert _classify_bands(100.0, None, None) == BB_IN_RANGE
