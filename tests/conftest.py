"""Shared test fixtures for the price forecaster."""

import pytest

from forecaster.config import AppSettings, FeatureSettings, TrainingSettings
from forecaster.models import Candle


def _make_uptrend(count: int, start: float = 100.0, step: float = 1.0) -> list[Candle]:
    """Daily candles with a steady uptrend and varying volume."""
    candles = []
    for i in range(count):
        close = start + i * step
        candles.append(
            Candle(
                label=f"day-{i + 1:03d}",
                open=close - 0.5 * step,
                high=close + 0.3 * step,
                low=close - 0.8 * step,
                close=close,
                volume=1000.0 + 50.0 * (i % 7),
            )
        )
    return candles


@pytest.fixture
def uptrend_candles() -> list[Candle]:
    """40 synthetic daily candles with a clear uptrend."""
    return _make_uptrend(40)


@pytest.fixture
def long_uptrend_candles() -> list[Candle]:
    """80 synthetic daily candles with a clear uptrend."""
    return _make_uptrend(80)


@pytest.fixture
def app_settings() -> AppSettings:
    """AppSettings with a short, deterministic training run."""
    return AppSettings(
        log_level="DEBUG",
        features=FeatureSettings(time_steps=10),
        training=TrainingSettings(epochs=5, batch_size=8, learning_rate=0.01, seed=7),
    )
