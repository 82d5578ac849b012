"""Tests for Bollinger Bands."""

import math

import pytest

from forecaster.indicators.bands import bollinger_bands
from forecaster.indicators.moving_average import sma


class TestBollingerBands:
    """Tests for the SMA +/- k * StdDev envelope."""

    def test_constant_series_bands_collapse(self) -> None:
        """Flat prices: upper == lower == middle (SMA)."""
        prices = [100.0] * 30
        bands = bollinger_bands(prices)

        for i in range(19, 30):
            assert bands.upper[i] == bands.lower[i] == bands.middle[i] == 100.0

    def test_warm_up_absent_together(self) -> None:
        """All three bands are None before period - 1 and defined after."""
        prices = [float(i) for i in range(25)]
        bands = bollinger_bands(prices, period=20)

        for i in range(19):
            assert bands.upper[i] is None
            assert bands.middle[i] is None
            assert bands.lower[i] is None
        for i in range(19, 25):
            assert bands.upper[i] is not None
            assert bands.middle[i] is not None
            assert bands.lower[i] is not None

    def test_lengths_match_input(self) -> None:
        prices = [float(i) for i in range(33)]
        bands = bollinger_bands(prices)
        assert len(bands.upper) == len(bands.middle) == len(bands.lower) == 33

    def test_middle_is_sma(self) -> None:
        prices = [float(i % 4) for i in range(24)]
        bands = bollinger_bands(prices, period=5)
        assert bands.middle == sma(prices, 5)

    def test_known_width(self) -> None:
        """Period 3 over (1, 2, 3): middle 2, std sqrt(2/3), k = 2."""
        bands = bollinger_bands([1.0, 2.0, 3.0], period=3, k=2.0)
        width = 2.0 * math.sqrt(2 / 3)

        assert bands.middle[2] == pytest.approx(2.0)
        assert bands.upper[2] == pytest.approx(2.0 + width)
        assert bands.lower[2] == pytest.approx(2.0 - width)

    def test_custom_multiplier_scales_width(self) -> None:
        """Doubling k doubles the distance from the middle band."""
        prices = [1.0, 3.0, 2.0, 5.0, 4.0, 6.0]
        narrow = bollinger_bands(prices, period=4, k=1.0)
        wide = bollinger_bands(prices, period=4, k=2.0)

        for i in range(3, 6):
            assert wide.upper[i] - wide.middle[i] == pytest.approx(
                2 * (narrow.upper[i] - narrow.middle[i])
            )

    def test_short_series_all_absent(self) -> None:
        bands = bollinger_bands([1.0, 2.0], period=20)
        assert bands.upper == [None, None]
        assert bands.lower == [None, None]
