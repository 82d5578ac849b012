"""Price forecaster: technical indicators, candlestick patterns, sliding-window
features and confidence scoring around a pluggable trainable predictor."""
