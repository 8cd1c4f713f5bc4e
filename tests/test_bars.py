from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from marketpulse.domain.bars import OHLCV_COLUMNS, bars_from_records, empty_bars, validate_bars
from marketpulse.domain.models import Bar
from marketpulse.errors import InvalidInput


def test_bars_from_records_builds_indexed_frame() -> None:
    bars = bars_from_records(
        [
            Bar(time=date(2025, 1, 2), open=10, high=11, low=9, close=10.5, volume=1000),
            Bar(time=date(2025, 1, 3), open=10.5, high=12, low=10, close=11.5, volume=1200),
        ],
        symbol="AAPL",
    )

    assert list(bars.columns) == OHLCV_COLUMNS
    assert isinstance(bars.index, pd.DatetimeIndex)
    assert float(bars["close"].iloc[-1]) == 11.5


def test_bars_from_records_accepts_mappings() -> None:
    bars = bars_from_records(
        [{"time": "2025-01-02", "open": 1, "high": 2, "low": 1, "close": 2, "volume": 0}]
    )

    assert len(bars) == 1
    assert bars["volume"].dtype == "float64"


def test_bars_from_records_empty_gives_empty_frame() -> None:
    bars = bars_from_records([])

    assert bars.empty
    assert list(bars.columns) == OHLCV_COLUMNS


def test_record_without_time_is_rejected() -> None:
    with pytest.raises(InvalidInput, match="time"):
        bars_from_records([{"open": 1, "high": 1, "low": 1, "close": 1, "volume": 1}])


def _frame(dates: list[str], **overrides: list[object]) -> pd.DataFrame:
    columns: dict[str, list[object]] = {
        "open": [10.0] * len(dates),
        "high": [11.0] * len(dates),
        "low": [9.0] * len(dates),
        "close": [10.0] * len(dates),
        "volume": [100.0] * len(dates),
    }
    columns.update(overrides)
    return pd.DataFrame(columns, index=pd.to_datetime(dates))


def test_duplicate_timestamps_are_rejected() -> None:
    with pytest.raises(InvalidInput, match="strictly increasing"):
        validate_bars(_frame(["2025-01-02", "2025-01-02"]), "AAPL")


def test_backwards_timestamps_are_rejected() -> None:
    with pytest.raises(InvalidInput, match="strictly increasing"):
        validate_bars(_frame(["2025-01-03", "2025-01-02"]), "AAPL")


def test_negative_volume_is_rejected() -> None:
    with pytest.raises(InvalidInput, match="volume"):
        validate_bars(_frame(["2025-01-02", "2025-01-03"], volume=[100.0, -1.0]))


def test_non_numeric_price_is_rejected() -> None:
    with pytest.raises(InvalidInput, match="non-numeric"):
        validate_bars(_frame(["2025-01-02", "2025-01-03"], close=[10.0, "ten"]))


def test_nan_price_is_rejected() -> None:
    with pytest.raises(InvalidInput, match="finite"):
        validate_bars(_frame(["2025-01-02", "2025-01-03"], close=[10.0, float("nan")]))


def test_non_positive_price_is_rejected() -> None:
    with pytest.raises(InvalidInput, match="positive"):
        validate_bars(_frame(["2025-01-02"], low=[0.0]))


def test_missing_column_is_rejected() -> None:
    frame = _frame(["2025-01-02"]).drop(columns=["volume"])

    with pytest.raises(InvalidInput, match="missing required columns"):
        validate_bars(frame, "AAPL")


def test_validate_returns_copy() -> None:
    frame = _frame(["2025-01-02", "2025-01-03"])

    validated = validate_bars(frame)
    validated.loc[validated.index[0], "close"] = 99.0

    assert float(frame["close"].iloc[0]) == 10.0
    assert empty_bars().empty
