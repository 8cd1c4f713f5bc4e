"""CSV-backed market data provider."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from marketpulse.domain.bars import OHLCV_COLUMNS, validate_bars
from marketpulse.errors import DataProviderError


class CsvDataProvider:
    """Load daily OHLCV bars from local CSV files.

    In walk-forward mode every ``get_bars`` call reveals one more bar, so
    repeated evaluations see a growing series.
    """

    date_column_candidates = ("date", "datetime", "timestamp", "time")

    def __init__(
        self,
        data_dir: str,
        walk_forward: bool = False,
        warmup_bars: int = 1,
    ) -> None:
        self.data_dir = Path(data_dir)
        self.walk_forward = walk_forward
        self.warmup_bars = max(1, warmup_bars)
        self._bars_cache: dict[str, pd.DataFrame] = {}
        self._cursor_by_symbol: dict[str, int] = {}

    def get_bars(self, symbol: str) -> pd.DataFrame:
        bars = self._load_bars(symbol)
        if not self.walk_forward:
            return bars.copy()

        cursor = self._cursor_by_symbol.get(symbol)
        if cursor is None:
            cursor = min(self.warmup_bars, len(bars))
        end = max(1, min(cursor, len(bars)))
        self._cursor_by_symbol[symbol] = min(cursor + 1, len(bars))
        return bars.iloc[:end].copy()

    def walk_forward_total_steps(self, symbols: list[str]) -> int:
        """Return the number of calls needed to reveal every symbol's full history."""
        if not self.walk_forward:
            return 1
        step_counts: list[int] = []
        for symbol in symbols:
            bars = self._load_bars(symbol)
            initial_window = min(self.warmup_bars, len(bars))
            step_counts.append(max(1, len(bars) - initial_window + 1))
        return max(step_counts, default=1)

    def _load_bars(self, symbol: str) -> pd.DataFrame:
        cached = self._bars_cache.get(symbol)
        if cached is not None:
            return cached

        path = self._resolve_path(symbol)
        if path is None:
            raise DataProviderError(f"No CSV found for {symbol} under {self.data_dir}")
        try:
            frame = pd.read_csv(path)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
            raise DataProviderError(f"Could not read {path}: {exc}") from exc
        normalized = self._normalize_csv(frame, symbol)
        self._bars_cache[symbol] = normalized
        return normalized

    def _resolve_path(self, symbol: str) -> Path | None:
        market, bare_symbol = self._split_market_symbol(symbol)
        symbol_upper = bare_symbol.upper()
        symbol_lower = bare_symbol.lower()
        candidates: list[Path] = []
        if market is not None:
            for market_dir in (market.upper(), market.lower()):
                candidates.extend(
                    [
                        self.data_dir / market_dir / f"{symbol_upper}.csv",
                        self.data_dir / market_dir / f"{symbol_lower}.csv",
                    ]
                )
        candidates.extend(
            [
                self.data_dir / f"{symbol_upper}.csv",
                self.data_dir / f"{symbol_lower}.csv",
            ]
        )
        for candidate in dict.fromkeys(candidates):
            if candidate.exists():
                return candidate
        return None

    @staticmethod
    def _split_market_symbol(symbol: str) -> tuple[str | None, str]:
        value = symbol.strip()
        if ":" not in value:
            return None, value
        market, bare_symbol = value.split(":", 1)
        market = market.strip()
        bare_symbol = bare_symbol.strip()
        if not market or not bare_symbol:
            return None, value
        return market, bare_symbol

    def _normalize_csv(self, frame: pd.DataFrame, symbol: str) -> pd.DataFrame:
        lower_to_original = {str(column).strip().lower(): column for column in frame.columns}
        date_column = self._pick_date_column(lower_to_original, symbol)
        rename_map = self._build_ohlcv_rename_map(lower_to_original, symbol)
        normalized = frame.rename(columns=rename_map)
        try:
            dates = pd.to_datetime(normalized[date_column], utc=False)
        except (TypeError, ValueError) as exc:
            raise DataProviderError(f"{symbol}: unparseable date in CSV: {exc}") from exc
        normalized.index = pd.DatetimeIndex(dates, name="date")
        normalized = normalized.sort_index()
        normalized["volume"] = pd.to_numeric(normalized["volume"], errors="coerce").fillna(0.0)
        if normalized.empty:
            raise DataProviderError(f"{symbol}: CSV has no rows")
        return validate_bars(normalized[OHLCV_COLUMNS], symbol)

    def _pick_date_column(self, lower_to_original: dict[str, str], symbol: str) -> str:
        for candidate in self.date_column_candidates:
            if candidate in lower_to_original:
                return lower_to_original[candidate]
        candidates = ", ".join(self.date_column_candidates)
        raise DataProviderError(f"{symbol}: CSV missing date column. Expected one of: {candidates}")

    @staticmethod
    def _build_ohlcv_rename_map(
        lower_to_original: dict[str, str],
        symbol: str,
    ) -> dict[str, str]:
        rename_map: dict[str, str] = {}
        for name in OHLCV_COLUMNS:
            source = lower_to_original.get(name)
            if source is None:
                raise DataProviderError(f"{symbol}: CSV missing required column '{name}'")
            rename_map[source] = name
        return rename_map
