"""Forecast pipeline -- wires the core stages into one run.

Each run:
  1. ENRICH: attach a candlestick pattern to every candle
  2. STATUS: summarize MACD / Bollinger state and RSI for display
  3. WINDOWS: build normalized sliding windows and targets
  4. TRAIN: build and fit the predictor (the only await point)
  5. PREDICT: run the latest window through the model
  6. SCORE: de-scale and attach confidence and rationale

Nothing is cached between runs; every call recomputes from the candles.
A pipeline runs one forecast at a time. The run is registered as soon as
``run()`` is called, so ``abandon()`` reaches it even before the returned
coroutine has started executing.
"""

from __future__ import annotations

import time
from collections.abc import Coroutine, Sequence
from dataclasses import dataclass
from typing import Any

from forecaster.config import AppSettings
from forecaster.exceptions import (
    InsufficientHistoryError,
    PipelineBusyError,
    TrainingAbandonedError,
)
from forecaster.features.windows import WindowedDataset, build_windows
from forecaster.indicators.rsi import rsi
from forecaster.indicators.status import market_status
from forecaster.logging import get_logger, run_context
from forecaster.models import (
    Candle,
    ConfidenceResult,
    EnrichedCandle,
    MarketStatus,
    PatternResult,
)
from forecaster.patterns.detector import INSUFFICIENT_DATA
from forecaster.patterns.enrich import enrich_candles
from forecaster.predictor.base import Predictor, ProgressCallback, ProgressEvent
from forecaster.predictor.linear import LinearWindowPredictor
from forecaster.scoring.confidence import score_confidence
from forecaster.scoring.labels import market_reasoning

logger = get_logger(__name__)


@dataclass
class ForecastResult:
    """Everything the presentation layer needs from one run."""

    candles: list[EnrichedCandle]
    latest_pattern: PatternResult
    market_status: MarketStatus
    rsi: float | None  # None when history is shorter than rsi_period + 1
    dataset: WindowedDataset
    sentiment: float
    macro_rate: float
    final_loss: float
    forecast: ConfidenceResult
    reasoning: str  # forecast rationale plus the Bollinger status


@dataclass
class _RunControl:
    """Abandon token owned by a single run."""

    abandon_requested: bool = False


class ForecastPipeline:
    """Runs enrichment, feature building, training, prediction and scoring.

    Args:
        settings: Application-wide settings.
        predictor: Trainable regressor. Defaults to LinearWindowPredictor
            configured from ``settings.training``.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        predictor: Predictor | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._predictor = predictor or LinearWindowPredictor(self._settings.training)
        self._active: _RunControl | None = None

    @property
    def is_running(self) -> bool:
        """Whether a run has been started and has not finished yet."""
        return self._active is not None

    def abandon(self) -> bool:
        """Ask the current run to stop at its next progress event.

        Returns:
            True if a run was in flight and will be abandoned, False if the
            pipeline was idle (the request is dropped).
        """
        if self._active is None:
            logger.info("training_abandon_ignored", reason="no_run_in_flight")
            return False
        logger.info("training_abandon_requested")
        self._active.abandon_requested = True
        return True

    def _progress_relay(
        self, control: _RunControl, on_progress: ProgressCallback | None
    ) -> ProgressCallback:
        def relay(event: ProgressEvent) -> None:
            if control.abandon_requested:
                raise TrainingAbandonedError(
                    f"training abandoned at epoch {event.epoch}/{event.total_epochs}"
                )
            logger.debug(
                "training_progress",
                epoch=event.epoch,
                total_epochs=event.total_epochs,
                percent=event.percent,
                loss=round(event.loss, 5),
            )
            if on_progress is not None:
                on_progress(event)

        return relay

    def run(
        self,
        candles: Sequence[Candle],
        sentiment: float | None = None,
        macro_rate: float | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> Coroutine[Any, Any, ForecastResult]:
        """Produce a forecast for the candle after the last one given.

        The run is registered immediately; await (or schedule) the returned
        coroutine to execute it.

        Args:
            candles: Chronological OHLCV candles.
            sentiment: News sentiment in [-1, 1]; None uses the configured default.
            macro_rate: Macro currency rate; None uses the configured default.
            on_progress: Called with a ProgressEvent after every training epoch.

        Returns:
            Coroutine resolving to a ForecastResult with enriched candles,
            status and scored forecast.

        Raises:
            PipelineBusyError: If another run on this pipeline has not finished.
            InsufficientHistoryError: (when awaited) If there are not more
                candles than ``time_steps``.
            TrainingAbandonedError: (when awaited) If abandon() was called
                before training finished.
        """
        if self._active is not None:
            raise PipelineBusyError("a forecast run is already in flight on this pipeline")
        control = _RunControl()
        self._active = control
        return self._execute(control, candles, sentiment, macro_rate, on_progress)

    async def _execute(
        self,
        control: _RunControl,
        candles: Sequence[Candle],
        sentiment: float | None,
        macro_rate: float | None,
        on_progress: ProgressCallback | None,
    ) -> ForecastResult:
        try:
            with run_context():
                return await self._run(control, candles, sentiment, macro_rate, on_progress)
        finally:
            if self._active is control:
                self._active = None

    async def _run(
        self,
        control: _RunControl,
        candles: Sequence[Candle],
        sentiment: float | None,
        macro_rate: float | None,
        on_progress: ProgressCallback | None,
    ) -> ForecastResult:
        inputs = self._settings.inputs
        if sentiment is None:
            sentiment = inputs.default_sentiment
            logger.info("sentiment_defaulted", sentiment=sentiment)
        if macro_rate is None:
            macro_rate = inputs.default_macro_rate
            logger.info("macro_rate_defaulted", macro_rate=macro_rate)

        start_time = time.monotonic()
        logger.info("forecast_starting", candles=len(candles))

        enriched = enrich_candles(candles)
        latest_pattern = enriched[-1].pattern if enriched else INSUFFICIENT_DATA

        closes = [c.close for c in enriched]
        status = market_status(closes, self._settings.indicators)
        latest_rsi = rsi(closes, self._settings.indicators.rsi_period)

        dataset = build_windows(
            enriched,
            sentiment=sentiment,
            macro_rate=macro_rate,
            feature_settings=self._settings.features,
            indicator_settings=self._settings.indicators,
        )
        if len(dataset) == 0 or dataset.latest_window is None:
            logger.warning(
                "insufficient_history",
                candles=len(candles),
                time_steps=dataset.time_steps,
            )
            raise InsufficientHistoryError(
                f"need more than {dataset.time_steps} candles, got {len(candles)}"
            )

        handle = self._predictor.build(dataset.time_steps, dataset.feature_count)
        final_loss = await self._predictor.train(
            handle,
            dataset.samples,
            dataset.targets,
            self._progress_relay(control, on_progress),
        )

        normalized = self._predictor.predict(handle, dataset.latest_window)
        forecast = score_confidence(
            normalized,
            dataset,
            final_loss=final_loss,
            pattern=latest_pattern,
            sentiment=sentiment,
            settings=self._settings.scoring,
        )

        logger.info(
            "forecast_complete",
            target_price=forecast.target_price,
            confidence=forecast.confidence,
            direction=forecast.direction.value,
            pattern=latest_pattern.name.value,
            macd_status=status.macd_status,
            bb_status=status.bb_status,
            rsi=latest_rsi,
            final_loss=round(final_loss, 6),
            elapsed_seconds=round(time.monotonic() - start_time, 2),
        )

        return ForecastResult(
            candles=enriched,
            latest_pattern=latest_pattern,
            market_status=status,
            rsi=latest_rsi,
            dataset=dataset,
            sentiment=sentiment,
            macro_rate=macro_rate,
            final_loss=final_loss,
            forecast=forecast,
            reasoning=market_reasoning(forecast.reasoning, status),
        )
