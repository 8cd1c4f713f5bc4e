"""Core signal and watchlist domain models."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from datetime import date
from enum import StrEnum

from marketpulse.errors import InvalidInput


class Signal(StrEnum):
    """Per-symbol trading signal."""

    BUY = "buy"
    SELL = "sell"
    HOLD = "hold"


class Recommendation(StrEnum):
    """Portfolio-level actions surfaced from a sentiment snapshot."""

    SHOW_BUY = "show-buy"
    SHOW_SELL = "show-sell"
    NEITHER = "neither"


@dataclass(frozen=True)
class Bar:
    """One daily OHLCV observation."""

    time: str | date
    open: float
    high: float
    low: float
    close: float
    volume: float


@dataclass(frozen=True)
class SignalReading:
    """Signal for one symbol plus the indicator values it was derived from."""

    symbol: str
    signal: Signal
    bars: int = 0
    close: float | None = None
    ema_fast: float | None = None
    ema_slow: float | None = None
    rsi: float | None = None
    vwap: float | None = None


@dataclass(frozen=True)
class SentimentSnapshot:
    """Watchlist-wide signals and the aggregate buy/sell decision."""

    readings: Mapping[str, SignalReading]
    buy_count: int
    sell_count: int
    anchor: str | None
    anchor_signal: Signal | None
    show_buy: bool
    show_sell: bool

    @property
    def signals(self) -> dict[str, Signal]:
        return {symbol: reading.signal for symbol, reading in self.readings.items()}

    @property
    def actions(self) -> tuple[Recommendation, ...]:
        actions: list[Recommendation] = []
        if self.show_buy:
            actions.append(Recommendation.SHOW_BUY)
        if self.show_sell:
            actions.append(Recommendation.SHOW_SELL)
        return tuple(actions) or (Recommendation.NEITHER,)


@dataclass(frozen=True)
class Watchlist:
    """Ordered set of watched symbols with a designated anchor.

    The anchor defaults to the first entry when none is set explicitly. An
    explicit anchor must be one of the watched symbols.
    """

    symbols: tuple[str, ...] = ()
    explicit_anchor: str | None = None

    def __post_init__(self) -> None:
        if self.explicit_anchor is not None and self.explicit_anchor not in self.symbols:
            raise InvalidInput(
                f"anchor '{self.explicit_anchor}' must be one of the watched symbols"
            )

    @classmethod
    def of(cls, symbols: Iterable[str], anchor: str | None = None) -> Watchlist:
        deduped: list[str] = []
        for symbol in symbols:
            normalized = symbol.strip().upper()
            if normalized and normalized not in deduped:
                deduped.append(normalized)
        normalized_anchor = anchor.strip().upper() if anchor and anchor.strip() else None
        return cls(symbols=tuple(deduped), explicit_anchor=normalized_anchor)

    @property
    def anchor(self) -> str | None:
        if self.explicit_anchor:
            return self.explicit_anchor
        return self.symbols[0] if self.symbols else None

    def add(self, symbol: str) -> Watchlist:
        normalized = symbol.strip().upper()
        if not normalized or normalized in self.symbols:
            return self
        return replace(self, symbols=(*self.symbols, normalized))

    def remove(self, symbol: str) -> Watchlist:
        normalized = symbol.strip().upper()
        remaining = tuple(item for item in self.symbols if item != normalized)
        anchor = None if self.explicit_anchor == normalized else self.explicit_anchor
        return Watchlist(symbols=remaining, explicit_anchor=anchor)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and symbol.strip().upper() in self.symbols

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)


@dataclass(frozen=True)
class MonitorContext:
    """Explicit evaluation state threaded through each refresh."""

    watchlist: Watchlist = field(default_factory=Watchlist)
    snapshot: SentimentSnapshot | None = None
    passes: int = 0
