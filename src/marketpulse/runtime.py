"""Runtime wiring and the periodic re-evaluation loop."""

from __future__ import annotations

from time import sleep

import pandas as pd

from marketpulse.config import Settings
from marketpulse.data.base import MarketDataProvider
from marketpulse.data.csv_data import CsvDataProvider
from marketpulse.data.sample_data import SampleDataProvider
from marketpulse.domain.models import MonitorContext
from marketpulse.errors import MarketPulseError
from marketpulse.evaluation import refresh
from marketpulse.logging.logger import HumanLogger


def run(settings: Settings) -> int:
    """Evaluate the watchlist once per interval until the pass limit or Ctrl-C.

    Walk-forward CSV replays also stop once every symbol's history is revealed.
    """
    human_logger = HumanLogger(level=settings.log_level)
    data_provider = build_data_provider(settings)
    context = MonitorContext(watchlist=settings.watchlist())
    human_logger.run_started(
        list(context.watchlist.symbols),
        context.watchlist.anchor,
        settings.data_source,
    )

    try:
        pass_limit = resolve_pass_limit(settings, data_provider, list(context.watchlist.symbols))
        while True:
            context = execute_pass(context, data_provider, human_logger)
            if pass_limit is not None and context.passes >= pass_limit:
                break
            sleep(float(settings.interval_seconds))
    except KeyboardInterrupt:
        return 0
    except MarketPulseError as exc:
        human_logger.error(str(exc))
        return 1
    return 0


def resolve_pass_limit(
    settings: Settings,
    data_provider: MarketDataProvider,
    symbols: list[str],
) -> int | None:
    """Return how many passes to run, or ``None`` to run until interrupted."""
    pass_limit = None if settings.should_run_continuously() else settings.max_passes
    if isinstance(data_provider, CsvDataProvider) and data_provider.walk_forward:
        replay_steps = data_provider.walk_forward_total_steps(symbols)
        pass_limit = replay_steps if pass_limit is None else min(pass_limit, replay_steps)
    return pass_limit


def execute_pass(
    context: MonitorContext,
    data_provider: MarketDataProvider,
    human_logger: HumanLogger,
) -> MonitorContext:
    """Snapshot bars, refresh the sentiment snapshot, and log it."""
    bars_by_symbol = build_bars_by_symbol(list(context.watchlist.symbols), data_provider)
    updated = refresh(context, bars_by_symbol)
    snapshot = updated.snapshot
    if snapshot is not None:
        for reading in snapshot.readings.values():
            human_logger.signal(reading)
        human_logger.sentiment(snapshot, pass_number=updated.passes)
    return updated


def build_bars_by_symbol(
    symbols: list[str],
    data_provider: MarketDataProvider,
) -> dict[str, pd.DataFrame]:
    """Fetch a bar snapshot for every symbol."""
    bars_by_symbol: dict[str, pd.DataFrame] = {}
    for symbol in symbols:
        bars_by_symbol[symbol] = data_provider.get_bars(symbol)
    return bars_by_symbol


def build_data_provider(settings: Settings) -> MarketDataProvider:
    """Select the bar source from settings."""
    if settings.data_source == "csv":
        return CsvDataProvider(
            data_dir=settings.historical_data_dir,
            walk_forward=settings.walk_forward,
            warmup_bars=settings.warmup_bars,
        )
    return SampleDataProvider(bars=settings.sample_bars)
