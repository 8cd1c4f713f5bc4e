"""Whole-window volume-weighted average price."""

from __future__ import annotations

import pandas as pd

from marketpulse.errors import InvalidInput
from marketpulse.indicators._series import as_bar_frame


def typical_price(bars: pd.DataFrame) -> pd.Series:
    """Return ``(high + low + close) / 3`` per bar."""
    frame = as_bar_frame(bars, ("high", "low", "close"))
    return ((frame["high"] + frame["low"] + frame["close"]) / 3.0).rename("typical_price")


def vwap(bars: pd.DataFrame) -> float:
    """Volume-weighted typical price over every supplied bar.

    Falls back to the latest close when total volume is zero.
    """
    frame = as_bar_frame(bars, ("high", "low", "close", "volume"))
    if frame.empty:
        raise InvalidInput("vwap requires at least one bar")
    volume = frame["volume"]
    total_volume = float(volume.sum())
    if total_volume == 0:
        return float(frame["close"].iloc[-1])
    weighted = float((typical_price(frame) * volume).sum())
    return weighted / total_volume
