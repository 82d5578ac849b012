"""Confidence scoring for a raw predictor output.

Starts from the predictor's training loss and adjusts for agreement with
the latest candlestick pattern and with news sentiment.

Adjustments (default settings):
    base         max(40, 95 - loss * 1000)
    pattern      +8 when direction matches the pattern sign,
                 -10 when bullish against a bearish pattern
    sentiment    +5 when direction matches sentiment beyond +/-0.2
    clamp        [10, 98]

The pattern penalty is one-sided: a bearish forecast against a bullish
pattern gets no penalty, only a missed bonus.
"""

import math

from forecaster.config import ScoringSettings
from forecaster.features.windows import WindowedDataset
from forecaster.models import ConfidenceResult, Direction, PatternResult


def base_confidence(final_loss: float, settings: ScoringSettings) -> float:
    """Loss-driven starting confidence, floored at ``settings.base_floor``.

    A NaN or infinite loss counts as the worst case.
    """
    if not math.isfinite(final_loss):
        return settings.base_floor
    return max(
        settings.base_floor,
        settings.base_confidence - final_loss * settings.loss_multiplier,
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _reasoning(
    direction: Direction,
    target_price: float,
    confidence: float,
    pattern: PatternResult,
    settings: ScoringSettings,
) -> str:
    price = f"{settings.currency_symbol}{target_price:.2f}"
    if direction is Direction.BULLISH:
        text = f"Targeting upward move to {price}."
    else:
        text = f"Projecting downward correction to {price}."

    if confidence > settings.high_conviction_above:
        pattern_name = getattr(pattern.name, "value", pattern.name)
        text += f" High conviction alignment between MACD momentum and {pattern_name}."
    elif confidence < settings.low_conviction_below:
        text += " Low conviction due to conflicting signals in the feature matrix."
    return text


def score_confidence(
    normalized_prediction: float,
    dataset: WindowedDataset,
    final_loss: float,
    pattern: PatternResult,
    sentiment: float,
    settings: ScoringSettings | None = None,
) -> ConfidenceResult:
    """Turn a normalized prediction into a target price and confidence.

    Args:
        normalized_prediction: Predictor output on the close-price scale [0, 1].
        dataset: Windows the predictor was trained on; supplies the close
            bounds and the last known price.
        final_loss: Training loss after the last epoch.
        pattern: Pattern detected on the latest candle.
        sentiment: News sentiment in roughly [-1, 1].
        settings: Scoring constants. Defaults to standard values.

    Returns:
        ConfidenceResult with confidence clamped to [min, max] and rounded.

    Raises:
        ValueError: If the dataset has no inference window.
    """
    if settings is None:
        settings = ScoringSettings()

    last_price = dataset.last_close
    if last_price is None:
        raise ValueError("dataset has no inference window to compare against")

    predicted_price = dataset.denormalize_close(normalized_prediction)
    confidence = base_confidence(final_loss, settings)

    is_bullish = predicted_price > last_price
    direction = Direction.BULLISH if is_bullish else Direction.BEARISH

    if is_bullish and pattern.score > 0:
        confidence += settings.pattern_agreement_bonus
    if not is_bullish and pattern.score < 0:
        confidence += settings.pattern_agreement_bonus
    if is_bullish and pattern.score < 0:
        confidence -= settings.pattern_conflict_penalty

    band = settings.sentiment_neutral_band
    if is_bullish and sentiment > band:
        confidence += settings.sentiment_agreement_bonus
    if not is_bullish and sentiment < -band:
        confidence += settings.sentiment_agreement_bonus

    confidence = min(settings.max_confidence, max(settings.min_confidence, confidence))

    return ConfidenceResult(
        target_price=round(predicted_price, 2),
        confidence=_round_half_up(confidence),
        reasoning=_reasoning(direction, predicted_price, confidence, pattern, settings),
        direction=direction,
    )
