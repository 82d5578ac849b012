"""Sliding-window feature builder.

Turns an enriched candle history plus the sentiment and macro scalars into
fixed-length windows of 7-wide feature vectors and next-close targets.

Feature order per candle:
    0 price           min/max scaled close
    1 volume          min/max scaled volume
    2 pattern         (pattern_score + 1) / 2
    3 sentiment       (sentiment + 1) / 2, constant across the dataset
    4 macro           macro rate over its fixed operating range, constant
    5 macd_histogram  min/max scaled over defined histogram values
    6 bb_position     (close - lower) / (upper - lower), 0.5 if undefined

Known limitation: the close, volume and histogram bounds are taken over
the entire history, including candles after any given training window.
This leaks a little future information into training-time scaling. It is
kept so the de-scaled forecast matches the scaling used in training; a
walk-forward evaluation would need a rolling scaler instead.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from forecaster.config import FeatureSettings, IndicatorSettings
from forecaster.features.normalize import (
    min_max_scale,
    min_max_unscale,
    normalize_macro_rate,
    normalize_pattern_score,
    normalize_sentiment,
)
from forecaster.indicators.bands import bollinger_bands
from forecaster.indicators.macd import macd
from forecaster.logging import get_logger
from forecaster.models import EnrichedCandle, FeatureVector

logger = get_logger(__name__)

FEATURE_COUNT = 7

#: Histogram bounds when the MACD never leaves warm-up.
_DEFAULT_HIST_RANGE = (-1.0, 1.0)

#: Bollinger position when the bands are absent or zero-width.
_NEUTRAL_BB_POSITION = 0.5

Window = list[FeatureVector]


@dataclass
class WindowedDataset:
    """Model-ready windows plus the bounds needed to invert price scaling."""

    samples: list[Window]
    targets: list[float]
    min_close: float
    max_close: float
    latest_window: Window | None
    time_steps: int
    feature_count: int = FEATURE_COUNT

    def __len__(self) -> int:
        return len(self.samples)

    def normalize_close(self, price: float) -> float:
        return min_max_scale(price, self.min_close, self.max_close)

    def denormalize_close(self, normalized: float) -> float:
        return min_max_unscale(normalized, self.min_close, self.max_close)

    @property
    def last_close(self) -> float | None:
        """Last close of the inference window, de-scaled back to a price."""
        if not self.latest_window:
            return None
        return self.denormalize_close(self.latest_window[-1][0])


def build_windows(
    candles: Sequence[EnrichedCandle],
    sentiment: float,
    macro_rate: float,
    time_steps: int | None = None,
    feature_settings: FeatureSettings | None = None,
    indicator_settings: IndicatorSettings | None = None,
) -> WindowedDataset:
    """Build sliding windows and targets from an enriched candle history.

    Windows start at every index ``i`` from 0 to ``len - time_steps - 1``;
    the target of window ``i`` is the normalized close at ``i + time_steps``.
    The latest window covers the final ``time_steps`` candles and has no
    target; it is the input for inference.

    Args:
        candles: Enriched candles, oldest first.
        sentiment: News sentiment in roughly [-1, 1].
        macro_rate: Macro currency rate (e.g. USD/INR).
        time_steps: Window length. Defaults to ``feature_settings.time_steps``.
        feature_settings: Window length and macro operating range.
        indicator_settings: MACD and Bollinger periods.

    Returns:
        WindowedDataset with ``max(0, len - time_steps)`` samples.

    Raises:
        ValueError: If ``time_steps`` is less than 1.
    """
    if feature_settings is None:
        feature_settings = FeatureSettings()
    if indicator_settings is None:
        indicator_settings = IndicatorSettings()
    if time_steps is None:
        time_steps = feature_settings.time_steps
    if time_steps < 1:
        raise ValueError(f"time_steps must be >= 1, got {time_steps}")

    closes = [c.close for c in candles]
    volumes = [c.volume for c in candles]
    patterns = [c.pattern_score for c in candles]

    if not closes:
        return WindowedDataset(
            samples=[],
            targets=[],
            min_close=0.0,
            max_close=0.0,
            latest_window=None,
            time_steps=time_steps,
        )

    histogram = macd(
        closes,
        fast=indicator_settings.macd_fast,
        slow=indicator_settings.macd_slow,
        signal=indicator_settings.macd_signal,
    ).histogram
    bands = bollinger_bands(
        closes,
        period=indicator_settings.bollinger_period,
        k=indicator_settings.bollinger_k,
    )

    min_close, max_close = min(closes), max(closes)
    min_vol, max_vol = min(volumes), max(volumes)

    defined_hist = [h for h in histogram if h is not None]
    if defined_hist:
        min_hist, max_hist = min(defined_hist), max(defined_hist)
    else:
        min_hist, max_hist = _DEFAULT_HIST_RANGE

    norm_sentiment = normalize_sentiment(sentiment)
    norm_macro = normalize_macro_rate(
        macro_rate,
        feature_settings.macro_range_low,
        feature_settings.macro_range_high,
    )

    def feature_row(idx: int) -> FeatureVector:
        raw_hist = histogram[idx]
        if raw_hist is None:
            raw_hist = 0.0  # neutral during MACD warm-up

        upper, lower = bands.upper[idx], bands.lower[idx]
        bb_position = _NEUTRAL_BB_POSITION
        if upper is not None and lower is not None and upper != lower:
            bb_position = (closes[idx] - lower) / (upper - lower)

        return (
            min_max_scale(closes[idx], min_close, max_close),
            min_max_scale(volumes[idx], min_vol, max_vol),
            normalize_pattern_score(patterns[idx]),
            norm_sentiment,
            norm_macro,
            min_max_scale(raw_hist, min_hist, max_hist),
            bb_position,
        )

    rows = [feature_row(i) for i in range(len(closes))]

    samples: list[Window] = []
    targets: list[float] = []
    for i in range(len(closes) - time_steps):
        samples.append(rows[i : i + time_steps])
        targets.append(min_max_scale(closes[i + time_steps], min_close, max_close))

    latest_window = rows[-time_steps:] if len(rows) >= time_steps else None

    logger.debug(
        "feature_windows_built",
        candles=len(closes),
        samples=len(samples),
        time_steps=time_steps,
        min_close=min_close,
        max_close=max_close,
    )

    return WindowedDataset(
        samples=samples,
        targets=targets,
        min_close=min_close,
        max_close=max_close,
        latest_window=latest_window,
        time_steps=time_steps,
    )
