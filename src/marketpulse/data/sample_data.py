"""Embedded sample dataset used when no real bar source is configured."""

from __future__ import annotations

import zlib
from datetime import date

import numpy as np
import pandas as pd

from marketpulse.domain.bars import validate_bars

DEFAULT_SAMPLE_BARS = 120
DEFAULT_SAMPLE_END = date(2024, 12, 31)


class SampleDataProvider:
    """Deterministic daily bars generated per symbol.

    Each symbol gets its own seeded random walk over business days, so the
    same symbol always yields the same series across runs and processes.
    """

    def __init__(self, bars: int = DEFAULT_SAMPLE_BARS, end: date | None = None) -> None:
        if bars <= 0:
            raise ValueError("bars must be positive")
        self.bars = bars
        self.end = end or DEFAULT_SAMPLE_END
        self._bars_cache: dict[str, pd.DataFrame] = {}

    def get_bars(self, symbol: str) -> pd.DataFrame:
        key = symbol.strip().upper()
        cached = self._bars_cache.get(key)
        if cached is None:
            cached = self._generate(key)
            self._bars_cache[key] = cached
        return cached.copy()

    def _generate(self, symbol: str) -> pd.DataFrame:
        seed = zlib.crc32(symbol.encode("utf-8"))
        rng = np.random.default_rng(seed)
        index = pd.bdate_range(end=pd.Timestamp(self.end), periods=self.bars, name="date")

        start_price = 20.0 + (seed % 480)
        drift = rng.normal(0.0004, 0.0006)
        returns = rng.normal(drift, 0.018, size=self.bars)
        close = start_price * np.exp(np.cumsum(returns))
        open_ = np.concatenate(([start_price], close[:-1])) * (1 + rng.normal(0, 0.003, self.bars))
        spread = np.abs(rng.normal(0, 0.01, self.bars)) * close
        high = np.maximum(open_, close) + spread
        low = np.maximum(np.minimum(open_, close) - spread, 0.01)
        volume = rng.integers(500_000, 5_000_000, size=self.bars).astype("float64")

        frame = pd.DataFrame(
            {
                "open": np.round(open_, 2),
                "high": np.round(high, 2),
                "low": np.round(low, 2),
                "close": np.round(close, 2),
                "volume": volume,
            },
            index=index,
        )
        return validate_bars(frame, symbol)
