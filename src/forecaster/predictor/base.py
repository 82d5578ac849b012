"""Abstract predictor interface.

The forecast pipeline depends only on this contract: build a model for a
window shape, train it asynchronously with per-epoch progress, and predict
a normalized close for one window. Any regressor (the bundled linear one,
or an external deep-learning model) can be plugged in.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from forecaster.models import FeatureVector


@dataclass(frozen=True)
class ProgressEvent:
    """Training progress reported after each epoch."""

    epoch: int  # 1-based
    total_epochs: int
    loss: float

    @property
    def fraction(self) -> float:
        return self.epoch / self.total_epochs

    @property
    def percent(self) -> int:
        return round(self.fraction * 100)


ProgressCallback = Callable[[ProgressEvent], None]


class Predictor(ABC):
    """Abstract base class for trainable regressors."""

    @abstractmethod
    def build(self, time_steps: int, feature_count: int) -> Any:
        """Create an untrained model for windows of the given shape.

        Returns:
            An opaque model handle passed back to train and predict.
        """
        ...

    @abstractmethod
    async def train(
        self,
        handle: Any,
        samples: Sequence[Sequence[FeatureVector]],
        targets: Sequence[float],
        on_progress: ProgressCallback | None = None,
    ) -> float:
        """Fit the model and return the final training loss.

        Implementations must yield to the event loop between epochs so a
        caller can cancel or abandon training between progress events.

        Raises:
            EmptyDatasetError: If ``samples`` is empty.
        """
        ...

    @abstractmethod
    def predict(self, handle: Any, window: Sequence[FeatureVector]) -> float:
        """Predict the normalized next close for one window.

        Raises:
            PredictorNotTrainedError: If ``handle`` was not built by this predictor.
        """
        ...
