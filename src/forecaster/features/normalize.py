"""Min/max scaling helpers for feature construction.

A zero-width range divides by 1 instead of 0, so a flat series maps to 0
rather than faulting.
"""


def safe_span(low: float, high: float) -> float:
    """Width of ``[low, high]``, or 1 when the range is degenerate."""
    return (high - low) or 1.0


def min_max_scale(value: float, low: float, high: float) -> float:
    """Scale ``value`` into [0, 1] relative to ``[low, high]``.

    Formula: (value - low) / (high - low), with a divisor of 1 when
    high == low.
    """
    return (value - low) / safe_span(low, high)


def min_max_unscale(normalized: float, low: float, high: float) -> float:
    """Invert :func:`min_max_scale`.

    Formula: normalized * (high - low) + low. When the range is degenerate
    this returns ``low`` for a normalized value of 0, matching the scaling
    side.
    """
    return normalized * (high - low) + low


def normalize_sentiment(sentiment: float) -> float:
    """Map a sentiment score in [-1, 1] to [0, 1] via (s + 1) / 2."""
    return (sentiment + 1) / 2


def normalize_pattern_score(score: float) -> float:
    """Map a pattern score in [-1, 1] to [0, 1] via (p + 1) / 2."""
    return (score + 1) / 2


def normalize_macro_rate(rate: float, range_low: float, range_high: float) -> float:
    """Scale a macro rate against a fixed operating range.

    The range is a configured assumption (USD/INR roughly 70-90 by default),
    not derived from data, so values outside it fall outside [0, 1].
    """
    return (rate - range_low) / safe_span(range_low, range_high)
