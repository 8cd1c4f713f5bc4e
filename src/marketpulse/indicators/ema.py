"""Exponential moving average seeded at the first close."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from marketpulse.indicators._series import as_close_series, check_period


def ema(closes: pd.Series | Sequence[float], period: int) -> pd.Series:
    """Return the EMA of ``closes`` aligned to the input.

    ``E[0]`` is the first close and ``E[i] = C[i] * k + E[i-1] * (1 - k)``
    with ``k = 2 / (period + 1)``. This is ``ewm(span=period, adjust=False)``;
    there is no simple-moving-average warmup.
    """
    series = as_close_series(closes)
    span = check_period(period)
    return series.ewm(span=span, adjust=False).mean().rename(f"ema_{span}")
