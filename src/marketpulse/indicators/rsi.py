"""Relative Strength Index with Wilder smoothing."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pandas as pd

from marketpulse.indicators._series import as_close_series, check_period

DEFAULT_RSI_PERIOD = 14


def rsi(closes: pd.Series | Sequence[float], period: int = DEFAULT_RSI_PERIOD) -> pd.Series:
    """Return RSI values aligned to ``closes``.

    Indices before ``period`` have no value and hold ``NaN``. When the series
    has ``period`` closes or fewer, every index stays ``NaN``. The first value
    is seeded from plain averages of the gains and losses over deltas
    ``1..period``; later values use Wilder smoothing. A zero average loss
    gives 100.
    """
    series = as_close_series(closes)
    window = check_period(period)
    values = series.to_numpy()
    result = np.full(len(values), np.nan)
    if len(values) <= window:
        return pd.Series(result, index=series.index, name=f"rsi_{window}")

    deltas = np.diff(values)
    seed = deltas[:window]
    avg_gain = float(seed[seed > 0].sum()) / window
    avg_loss = float(-seed[seed < 0].sum()) / window
    result[window] = _relative_strength(avg_gain, avg_loss)

    for i in range(window + 1, len(values)):
        delta = values[i] - values[i - 1]
        up = max(delta, 0.0)
        down = max(-delta, 0.0)
        avg_gain = (avg_gain * (window - 1) + up) / window
        avg_loss = (avg_loss * (window - 1) + down) / window
        result[i] = _relative_strength(avg_gain, avg_loss)

    return pd.Series(result, index=series.index, name=f"rsi_{window}")


def latest_rsi(series: pd.Series) -> float | None:
    """Return the last RSI value, or ``None`` when it is undefined."""
    if series.empty:
        return None
    value = series.iloc[-1]
    if pd.isna(value):
        return None
    return float(value)


def _relative_strength(avg_gain: float, avg_loss: float) -> float:
    if avg_loss == 0:
        return 100.0
    return 100.0 - 100.0 / (1.0 + avg_gain / avg_loss)
