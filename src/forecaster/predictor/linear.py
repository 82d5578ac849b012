"""Reference predictor: linear regression over the flattened window.

Each window of ``time_steps`` x ``feature_count`` values is flattened into
one row and fitted with mini-batch gradient descent on the Huber loss,
using Adam updates. It is small enough to train in-process and stands in
for a heavier sequence model behind the same Predictor interface.
"""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from forecaster.config import TrainingSettings
from forecaster.exceptions import EmptyDatasetError, PredictorNotTrainedError
from forecaster.logging import get_logger
from forecaster.models import FeatureVector
from forecaster.predictor.base import Predictor, ProgressCallback, ProgressEvent

logger = get_logger(__name__)

_ADAM_BETA1 = 0.9
_ADAM_BETA2 = 0.999
_ADAM_EPS = 1e-8


@dataclass
class LinearModel:
    """Weights and optimizer state for one window shape."""

    time_steps: int
    feature_count: int
    weights: np.ndarray
    bias: float = 0.0
    steps: int = 0
    m_b: float = 0.0
    v_b: float = 0.0
    m_w: np.ndarray = field(init=False)
    v_w: np.ndarray = field(init=False)

    def __post_init__(self) -> None:
        self.m_w = np.zeros_like(self.weights)
        self.v_w = np.zeros_like(self.weights)

    @property
    def input_size(self) -> int:
        return self.time_steps * self.feature_count


def huber_loss(errors: np.ndarray, delta: float) -> float:
    """Mean Huber loss: quadratic inside ``delta``, linear outside."""
    abs_err = np.abs(errors)
    quadratic = 0.5 * errors**2
    linear = delta * (abs_err - 0.5 * delta)
    return float(np.mean(np.where(abs_err <= delta, quadratic, linear)))


class LinearWindowPredictor(Predictor):
    """Huber-loss linear regressor trained with Adam.

    Args:
        settings: Epochs, batch size, learning rate, Huber delta and seed.
    """

    def __init__(self, settings: TrainingSettings | None = None) -> None:
        self._settings = settings or TrainingSettings()

    def build(self, time_steps: int, feature_count: int) -> LinearModel:
        logger.info(
            "predictor_built",
            model="linear",
            time_steps=time_steps,
            feature_count=feature_count,
        )
        return LinearModel(
            time_steps=time_steps,
            feature_count=feature_count,
            weights=np.zeros(time_steps * feature_count),
        )

    def _flatten(self, model: LinearModel, samples: Sequence[Any]) -> np.ndarray:
        x = np.asarray(samples, dtype=float)
        return x.reshape(len(x), model.input_size)

    def _adam_step(self, model: LinearModel, grad_w: np.ndarray, grad_b: float) -> None:
        lr = self._settings.learning_rate
        model.steps += 1
        t = model.steps

        model.m_w = _ADAM_BETA1 * model.m_w + (1 - _ADAM_BETA1) * grad_w
        model.v_w = _ADAM_BETA2 * model.v_w + (1 - _ADAM_BETA2) * grad_w**2
        model.m_b = _ADAM_BETA1 * model.m_b + (1 - _ADAM_BETA1) * grad_b
        model.v_b = _ADAM_BETA2 * model.v_b + (1 - _ADAM_BETA2) * grad_b**2

        m_w_hat = model.m_w / (1 - _ADAM_BETA1**t)
        v_w_hat = model.v_w / (1 - _ADAM_BETA2**t)
        m_b_hat = model.m_b / (1 - _ADAM_BETA1**t)
        v_b_hat = model.v_b / (1 - _ADAM_BETA2**t)

        model.weights = model.weights - lr * m_w_hat / (np.sqrt(v_w_hat) + _ADAM_EPS)
        model.bias = model.bias - lr * m_b_hat / (np.sqrt(v_b_hat) + _ADAM_EPS)

    async def train(
        self,
        handle: Any,
        samples: Sequence[Sequence[FeatureVector]],
        targets: Sequence[float],
        on_progress: ProgressCallback | None = None,
    ) -> float:
        if not isinstance(handle, LinearModel):
            raise PredictorNotTrainedError("handle was not built by LinearWindowPredictor")
        if len(samples) == 0:
            raise EmptyDatasetError("cannot train on an empty dataset")

        x = self._flatten(handle, samples)
        y = np.asarray(targets, dtype=float)

        epochs = self._settings.epochs
        batch_size = max(1, self._settings.batch_size)
        delta = self._settings.huber_delta
        rng = np.random.default_rng(self._settings.seed)

        # Start from the mean target so early epochs are not dominated by bias.
        if handle.steps == 0:
            handle.bias = float(np.mean(y))

        loss = huber_loss(x @ handle.weights + handle.bias - y, delta)
        for epoch in range(epochs):
            order = rng.permutation(len(x))
            for start in range(0, len(x), batch_size):
                idx = order[start : start + batch_size]
                xb, yb = x[idx], y[idx]
                errors = xb @ handle.weights + handle.bias - yb
                grad = np.clip(errors, -delta, delta) / len(idx)
                self._adam_step(handle, xb.T @ grad, float(grad.sum()))

            loss = huber_loss(x @ handle.weights + handle.bias - y, delta)
            if on_progress is not None:
                on_progress(ProgressEvent(epoch=epoch + 1, total_epochs=epochs, loss=loss))
            await asyncio.sleep(0)

        logger.info("predictor_trained", model="linear", epochs=epochs, final_loss=loss)
        return loss

    def predict(self, handle: Any, window: Sequence[FeatureVector]) -> float:
        if not isinstance(handle, LinearModel):
            raise PredictorNotTrainedError("handle was not built by LinearWindowPredictor")
        row = np.asarray(window, dtype=float).reshape(handle.input_size)
        return float(row @ handle.weights + handle.bias)
