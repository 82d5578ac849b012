"""Entry point for the price forecaster.

Loads candles from ``INPUT_CANDLES_PATH``, runs one forecast with the
bundled linear predictor and logs the result. Sentiment and macro rate
come from ``INPUT_SENTIMENT`` / ``INPUT_MACRO_RATE`` when set and
otherwise fall back to the configured defaults.

Component wiring order:
1. AppSettings (configuration)
2. Logging setup
3. Candle loading
4. ForecastPipeline with LinearWindowPredictor
"""

import asyncio

from forecaster.config import AppSettings
from forecaster.logging import get_logger, setup_logging
from forecaster.loader import load_candles
from forecaster.pipeline import ForecastPipeline
from forecaster.predictor.linear import LinearWindowPredictor
from forecaster.scoring.labels import (
    confidence_tone,
    market_status_tones,
    pattern_tone,
    sentiment_label,
)


async def run() -> None:
    """Run a single forecast from the configured candle file."""
    settings = AppSettings()

    setup_logging(settings.log_level, settings.log_format)
    logger = get_logger("forecaster.main")

    candles = load_candles(settings.inputs.candles_path)

    pipeline = ForecastPipeline(
        settings=settings,
        predictor=LinearWindowPredictor(settings.training),
    )
    result = await pipeline.run(
        candles,
        sentiment=settings.inputs.sentiment,
        macro_rate=settings.inputs.macro_rate,
        on_progress=lambda event: logger.info(
            "training_epoch", percent=event.percent, loss=round(event.loss, 5)
        ),
    )

    latest = result.candles[-1]
    tones = market_status_tones(result.market_status)
    logger.info(
        "forecast_summary",
        last_label=latest.label,
        last_close=latest.close,
        pattern=result.latest_pattern.name.value,
        pattern_tone=pattern_tone(result.latest_pattern).value,
        sentiment=sentiment_label(result.sentiment, settings.scoring.sentiment_neutral_band),
        macro_rate=result.macro_rate,
        macd_status=result.market_status.macd_status,
        macd_tone=tones["macd"].value,
        bb_status=result.market_status.bb_status,
        bb_tone=tones["bb"].value,
        rsi=result.rsi if result.rsi is not None else "--",
        target_price=result.forecast.target_price,
        confidence=result.forecast.confidence,
        confidence_tone=confidence_tone(result.forecast.confidence).value,
        reasoning=result.reasoning,
    )


def main() -> None:
    """Synchronous entry point."""
    asyncio.run(run())


if __name__ == "__main__":
    main()
