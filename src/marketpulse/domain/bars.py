"""Bar series construction and validation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import asdict
from typing import Any

import numpy as np
import pandas as pd

from marketpulse.domain.models import Bar
from marketpulse.errors import InvalidInput

OHLCV_COLUMNS = ["open", "high", "low", "close", "volume"]
PRICE_COLUMNS = ["open", "high", "low", "close"]


def bars_from_records(
    records: Iterable[Bar | Mapping[str, Any]],
    symbol: str = "",
) -> pd.DataFrame:
    """Build a validated bar frame from ``Bar`` objects or mappings with a ``time`` key."""
    rows: list[dict[str, Any]] = []
    for record in records:
        row = asdict(record) if isinstance(record, Bar) else dict(record)
        if "time" not in row:
            raise InvalidInput(f"{symbol or 'bars'}: record missing 'time'")
        rows.append(row)
    if not rows:
        return empty_bars()
    frame = pd.DataFrame(rows)
    try:
        frame.index = pd.DatetimeIndex(pd.to_datetime(frame.pop("time")), name="date")
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"{symbol or 'bars'}: unparseable bar time: {exc}") from exc
    return validate_bars(frame, symbol)


def empty_bars() -> pd.DataFrame:
    """Return a zero-length bar frame with the standard columns."""
    return pd.DataFrame(
        {column: pd.Series(dtype="float64") for column in OHLCV_COLUMNS},
        index=pd.DatetimeIndex([], name="date"),
    )


def validate_bars(frame: pd.DataFrame, symbol: str = "") -> pd.DataFrame:
    """Check the bar-series contract and return a float-typed copy.

    Raises ``InvalidInput`` for missing columns, non-numeric or non-positive
    prices, negative volume, and timestamps that are not strictly increasing.
    """
    label = symbol or "bars"
    missing = [column for column in OHLCV_COLUMNS if column not in frame.columns]
    if missing:
        raise InvalidInput(f"{label}: missing required columns {missing}")

    validated = frame[OHLCV_COLUMNS].copy()
    try:
        validated = validated.apply(pd.to_numeric, errors="raise").astype("float64")
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"{label}: non-numeric OHLCV value: {exc}") from exc

    prices = validated[PRICE_COLUMNS].to_numpy()
    if not np.isfinite(prices).all():
        raise InvalidInput(f"{label}: prices must be finite")
    if (prices <= 0).any():
        raise InvalidInput(f"{label}: prices must be positive")
    volume = validated["volume"].to_numpy()
    if not np.isfinite(volume).all() or (volume < 0).any():
        raise InvalidInput(f"{label}: volume must be finite and non-negative")

    index = validated.index
    if len(index) > 1 and not (index.is_monotonic_increasing and index.is_unique):
        raise InvalidInput(f"{label}: bar times must be strictly increasing")
    return validated
