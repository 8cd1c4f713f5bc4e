"""Signal classification and aggregation."""

from .aggregator import BUY_COUNT_THRESHOLD, SELL_COUNT_THRESHOLD, aggregate
from .classifier import (
    EMA_FAST_PERIOD,
    EMA_SLOW_PERIOD,
    MIN_BARS,
    RSI_BUY_CEILING,
    RSI_FALLBACK,
    RSI_NEUTRAL,
    RSI_PERIOD,
    classify,
    classify_bars,
)

__all__ = [
    "BUY_COUNT_THRESHOLD",
    "EMA_FAST_PERIOD",
    "EMA_SLOW_PERIOD",
    "MIN_BARS",
    "RSI_BUY_CEILING",
    "RSI_FALLBACK",
    "RSI_NEUTRAL",
    "RSI_PERIOD",
    "SELL_COUNT_THRESHOLD",
    "aggregate",
    "classify",
    "classify_bars",
]
