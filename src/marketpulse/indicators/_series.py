"""Shared input coercion for indicator calculators."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pandas as pd

from marketpulse.errors import InvalidInput


def as_close_series(closes: pd.Series | Sequence[float], name: str = "close") -> pd.Series:
    """Return ``closes`` as a float Series, rejecting empty or non-finite input."""
    if isinstance(closes, pd.Series):
        series = closes
    else:
        series = pd.Series(list(closes), dtype="object")
    if series.empty:
        raise InvalidInput(f"{name} series must not be empty")
    try:
        numeric = pd.to_numeric(series, errors="raise").astype("float64")
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"{name} series must be numeric: {exc}") from exc
    if not np.isfinite(numeric.to_numpy()).all():
        raise InvalidInput(f"{name} series must not contain NaN or infinite values")
    return numeric


def check_period(period: int) -> int:
    if isinstance(period, bool) or not isinstance(period, int | np.integer):
        raise InvalidInput(f"period must be an integer, got {period!r}")
    if period < 1:
        raise InvalidInput("period must be >= 1")
    return int(period)


def as_bar_frame(bars: pd.DataFrame, columns: Sequence[str]) -> pd.DataFrame:
    """Return ``columns`` of ``bars`` as floats, rejecting malformed values.

    Price columns must be finite and positive; ``volume`` must be finite and
    non-negative.
    """
    missing = [column for column in columns if column not in bars.columns]
    if missing:
        raise InvalidInput(f"bars missing required columns {missing}")
    if bars.empty:
        return bars[list(columns)].astype("float64")
    try:
        frame = bars[list(columns)].apply(pd.to_numeric, errors="raise").astype("float64")
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"bars must be numeric: {exc}") from exc

    price_columns = [column for column in columns if column != "volume"]
    prices = frame[price_columns].to_numpy()
    if not np.isfinite(prices).all():
        raise InvalidInput("bar prices must be finite")
    if (prices <= 0).any():
        raise InvalidInput("bar prices must be positive")
    if "volume" in frame.columns:
        volume = frame["volume"].to_numpy()
        if not np.isfinite(volume).all() or (volume < 0).any():
            raise InvalidInput("bar volume must be finite and non-negative")
    return frame
