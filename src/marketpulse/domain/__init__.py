"""Domain models and bar-series helpers."""

from .bars import OHLCV_COLUMNS, bars_from_records, empty_bars, validate_bars
from .models import (
    Bar,
    MonitorContext,
    Recommendation,
    SentimentSnapshot,
    Signal,
    SignalReading,
    Watchlist,
)

__all__ = [
    "OHLCV_COLUMNS",
    "Bar",
    "MonitorContext",
    "Recommendation",
    "SentimentSnapshot",
    "Signal",
    "SignalReading",
    "Watchlist",
    "bars_from_records",
    "empty_bars",
    "validate_bars",
]
