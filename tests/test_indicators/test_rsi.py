"""Tests for the simple RSI over the latest closes."""

import pytest

from forecaster.indicators.rsi import rsi


def _ten_up_four_down() -> list[float]:
    """15 prices: ten +1 moves then four -1 moves."""
    rising = [100.0 + i for i in range(11)]
    return rising + [109.0, 108.0, 107.0, 106.0]


class TestRsi:
    """Tests for rsi values and sentinels."""

    def test_known_value(self) -> None:
        """gains 10, losses 4: rs 2.5, RSI 100 - 100 / 3.5 = 71.4."""
        assert rsi(_ten_up_four_down()) == 71.4

    def test_short_input_returns_none(self) -> None:
        assert rsi([100.0 + i for i in range(14)]) is None
        assert rsi([]) is None

    def test_zero_losses_use_unit_divisor(self) -> None:
        """No losses: average loss counts as 1, so +1 steps give rs 1 and RSI 50."""
        assert rsi([100.0 + i for i in range(15)]) == 50.0
        assert rsi([100.0 + 2 * i for i in range(15)]) == 66.7

    def test_flat_prices(self) -> None:
        assert rsi([50.0] * 15) == 0.0

    def test_only_latest_closes_used(self) -> None:
        """Older history does not change the value."""
        history = [500.0, 20.0, 300.0] + _ten_up_four_down()
        assert rsi(history) == 71.4

    def test_all_losses(self) -> None:
        assert rsi([200.0 - i for i in range(15)]) == 0.0

    def test_custom_period(self) -> None:
        """period 2 over 101 -> 103 -> 102: gains 2, losses 1, rs 2, RSI 66.7."""
        assert rsi([90.0, 101.0, 103.0, 102.0], period=2) == 66.7

    def test_invalid_period(self) -> None:
        with pytest.raises(ValueError):
            rsi([1.0, 2.0], period=0)
