"""On-demand watchlist evaluation.

Everything here is a pure function of its arguments. Re-evaluation cadence
belongs to the caller (see ``marketpulse.runtime``).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace

import pandas as pd

from marketpulse.domain.bars import empty_bars
from marketpulse.domain.models import MonitorContext, SentimentSnapshot, SignalReading, Watchlist
from marketpulse.signals.aggregator import aggregate
from marketpulse.signals.classifier import classify_bars

logger = logging.getLogger(__name__)

BarStore = Mapping[str, pd.DataFrame]


def evaluate(watchlist: Watchlist, bar_store: BarStore) -> SentimentSnapshot:
    """Classify every watched symbol and aggregate around the watchlist anchor."""
    readings: dict[str, SignalReading] = {}
    for symbol in watchlist:
        bars = bar_store.get(symbol)
        if bars is None:
            logger.debug("no bars for %s; evaluating as empty series", symbol)
            bars = empty_bars()
        readings[symbol] = classify_bars(bars, symbol)
    return aggregate(readings, watchlist.anchor)


def refresh(context: MonitorContext, bar_store: BarStore) -> MonitorContext:
    """Return a new context carrying a freshly computed snapshot."""
    snapshot = evaluate(context.watchlist, bar_store)
    return replace(context, snapshot=snapshot, passes=context.passes + 1)


def with_watchlist(context: MonitorContext, watchlist: Watchlist) -> MonitorContext:
    """Swap the watched symbols and drop the now-stale snapshot."""
    if watchlist == context.watchlist:
        return context
    return replace(context, watchlist=watchlist, snapshot=None)
