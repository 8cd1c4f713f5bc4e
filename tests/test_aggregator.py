from __future__ import annotations

import pytest

from marketpulse.domain.models import Recommendation, Signal, SignalReading
from marketpulse.errors import InvalidInput
from marketpulse.signals.aggregator import aggregate

BUY = Signal.BUY
SELL = Signal.SELL
HOLD = Signal.HOLD


def test_three_buys_show_buy() -> None:
    snapshot = aggregate({"A": BUY, "B": BUY, "C": BUY, "D": HOLD}, anchor="A")

    assert snapshot.buy_count == 3
    assert snapshot.show_buy is True
    assert snapshot.show_sell is False
    assert snapshot.actions == (Recommendation.SHOW_BUY,)


def test_anchor_selling_with_three_sells_shows_sell() -> None:
    snapshot = aggregate({"A": SELL, "B": SELL, "C": SELL, "D": BUY}, anchor="A")

    assert snapshot.sell_count == 3
    assert snapshot.anchor_signal is SELL
    assert snapshot.show_sell is True
    assert snapshot.show_buy is False


def test_sell_needs_anchor_to_be_selling() -> None:
    snapshot = aggregate({"A": HOLD, "B": SELL, "C": SELL, "D": SELL}, anchor="A")

    assert snapshot.sell_count == 3
    assert snapshot.show_sell is False
    assert snapshot.actions == (Recommendation.NEITHER,)


def test_buy_rule_ignores_anchor() -> None:
    snapshot = aggregate({"A": SELL, "B": BUY, "C": BUY, "D": BUY}, anchor="A")

    assert snapshot.show_buy is True
    assert snapshot.show_sell is False


def test_buy_and_sell_can_both_show() -> None:
    signals = {"A": SELL, "B": SELL, "C": SELL, "D": BUY, "E": BUY, "F": BUY}

    snapshot = aggregate(signals, anchor="A")

    assert snapshot.show_buy is True
    assert snapshot.show_sell is True
    assert snapshot.actions == (Recommendation.SHOW_BUY, Recommendation.SHOW_SELL)


def test_two_buys_are_not_enough() -> None:
    snapshot = aggregate({"A": BUY, "B": BUY, "C": HOLD}, anchor="A")

    assert snapshot.show_buy is False


def test_anchor_missing_from_signals_never_shows_sell() -> None:
    snapshot = aggregate({"B": SELL, "C": SELL, "D": SELL}, anchor="A")

    assert snapshot.anchor_signal is None
    assert snapshot.show_sell is False


def test_accepts_readings_and_exposes_signal_map() -> None:
    readings = {
        "A": SignalReading(symbol="A", signal=BUY, bars=30, close=10.0),
        "B": SignalReading(symbol="B", signal=HOLD),
    }

    snapshot = aggregate(readings, anchor="A")

    assert snapshot.readings["A"].close == 10.0
    assert snapshot.signals == {"A": BUY, "B": HOLD}


def test_empty_watchlist_shows_nothing() -> None:
    snapshot = aggregate({}, anchor=None)

    assert snapshot.buy_count == 0
    assert snapshot.sell_count == 0
    assert snapshot.actions == (Recommendation.NEITHER,)


def test_accepts_signal_strings() -> None:
    snapshot = aggregate({"A": "sell", "B": "sell", "C": "sell"}, anchor="A")

    assert snapshot.show_sell is True


def test_unknown_signal_is_rejected() -> None:
    with pytest.raises(InvalidInput, match="B: unknown signal 'strong-buy'"):
        aggregate({"A": BUY, "B": "strong-buy"}, anchor="A")
