"""Watchlist-level aggregation of per-symbol signals."""

from __future__ import annotations

from collections.abc import Mapping

from marketpulse.domain.models import SentimentSnapshot, Signal, SignalReading
from marketpulse.errors import InvalidInput

BUY_COUNT_THRESHOLD = 3
SELL_COUNT_THRESHOLD = 3


def aggregate(
    signals: Mapping[str, Signal | SignalReading],
    anchor: str | None,
) -> SentimentSnapshot:
    """Count buy/sell signals and decide which actions to surface.

    Show-buy only needs enough buy signals. Show-sell additionally needs the
    anchor symbol itself to be a sell. The two flags are independent and can
    both be set.
    """
    readings = {symbol: _as_reading(symbol, value) for symbol, value in signals.items()}
    buy_count = sum(1 for reading in readings.values() if reading.signal is Signal.BUY)
    sell_count = sum(1 for reading in readings.values() if reading.signal is Signal.SELL)
    anchor_reading = readings.get(anchor) if anchor is not None else None
    anchor_signal = anchor_reading.signal if anchor_reading is not None else None

    return SentimentSnapshot(
        readings=readings,
        buy_count=buy_count,
        sell_count=sell_count,
        anchor=anchor,
        anchor_signal=anchor_signal,
        show_buy=buy_count >= BUY_COUNT_THRESHOLD,
        show_sell=anchor_signal is Signal.SELL and sell_count >= SELL_COUNT_THRESHOLD,
    )


def _as_reading(symbol: str, value: Signal | SignalReading) -> SignalReading:
    if isinstance(value, SignalReading):
        return value
    try:
        signal = Signal(value)
    except ValueError as exc:
        raise InvalidInput(f"{symbol}: unknown signal {value!r}") from exc
    return SignalReading(symbol=symbol, signal=signal)
