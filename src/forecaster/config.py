"""Configuration system using pydantic-settings with environment variable loading."""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IndicatorSettings(BaseSettings):
    """Indicator periods used for features and market status.

    ``market_status_min_points`` defaults to ``macd_slow + macd_signal``
    (the MACD plus signal warm-up). It may be raised but never set below
    that warm-up, otherwise the status would read the signal line before
    it exists.
    """

    model_config = SettingsConfigDict(env_prefix="INDICATOR_")

    bollinger_period: int = 20
    bollinger_k: float = 2.0
    macd_fast: int = 12
    macd_slow: int = 26
    macd_signal: int = 9
    rsi_period: int = 14
    market_status_min_points: int | None = None

    @model_validator(mode="after")
    def _check_min_points(self) -> "IndicatorSettings":
        warm_up = self.macd_slow + self.macd_signal
        if self.market_status_min_points is None:
            self.market_status_min_points = warm_up
        elif self.market_status_min_points < warm_up:
            raise ValueError(
                f"market_status_min_points={self.market_status_min_points} is below "
                f"the MACD warm-up of {warm_up} (macd_slow + macd_signal)"
            )
        return self


class FeatureSettings(BaseSettings):
    """Sliding-window feature construction.

    The macro rate is scaled against a fixed operating range rather than
    the observed data. Defaults assume USD/INR trades roughly 70-90.
    """

    model_config = SettingsConfigDict(env_prefix="FEATURE_")

    time_steps: int = 10  # past candles per model input
    macro_range_low: float = 70.0
    macro_range_high: float = 90.0


class InputSettings(BaseSettings):
    """Fallbacks for context signals plus the local candle source."""

    model_config = SettingsConfigDict(env_prefix="INPUT_")

    default_sentiment: float = 0.15  # neutral drift when no headlines scored
    default_macro_rate: float = 83.0
    candles_path: str = "data/candles.json"
    sentiment: float | None = None  # None = use default_sentiment
    macro_rate: float | None = None  # None = use default_macro_rate


class ScoringSettings(BaseSettings):
    """Confidence heuristic constants."""

    model_config = SettingsConfigDict(env_prefix="SCORING_")

    base_confidence: float = 95.0
    base_floor: float = 40.0
    loss_multiplier: float = 1000.0
    pattern_agreement_bonus: float = 8.0
    pattern_conflict_penalty: float = 10.0
    sentiment_agreement_bonus: float = 5.0
    sentiment_neutral_band: float = 0.2
    min_confidence: float = 10.0
    max_confidence: float = 98.0
    high_conviction_above: float = 80.0
    low_conviction_below: float = 50.0
    currency_symbol: str = "₹"


class TrainingSettings(BaseSettings):
    """Reference predictor training parameters."""

    model_config = SettingsConfigDict(env_prefix="TRAINING_")

    epochs: int = 40
    batch_size: int = 32
    learning_rate: float = 0.01
    huber_delta: float = 1.0
    seed: int = 42


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    log_format: str = "console"  # "json" or "console"
    indicators: IndicatorSettings = IndicatorSettings()
    features: FeatureSettings = FeatureSettings()
    inputs: InputSettings = InputSettings()
    scoring: ScoringSettings = ScoringSettings()
    training: TrainingSettings = TrainingSettings()
