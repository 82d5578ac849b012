"""Relative Strength Index over the most recent closes.

A simple (non-smoothed) RSI: gains and losses are summed over the last
``period`` price changes and averaged by ``period``. When there were no
losses the average loss is taken as 1 rather than 0, so a steady climb
reads as a finite value instead of 100.
"""

from collections.abc import Sequence


def rsi(prices: Sequence[float], period: int = 14) -> float | None:
    """RSI of the last ``period + 1`` closes, rounded to one decimal.

    Args:
        prices: Close prices, oldest first.
        period: Number of price changes to look at.

    Returns:
        RSI in [0, 100], or None when fewer than ``period + 1`` prices exist.
    """
    if period < 1:
        raise ValueError(f"period must be >= 1, got {period}")
    if len(prices) < period + 1:
        return None

    recent = prices[-(period + 1):]
    gains = 0.0
    losses = 0.0
    for prev, curr in zip(recent, recent[1:]):
        change = curr - prev
        if change > 0:
            gains += change
        else:
            losses -= change

    avg_gain = gains / period
    avg_loss = (losses / period) or 1.0
    rs = avg_gain / avg_loss
    return round(100 - 100 / (1 + rs), 1)
