"""Command-line interface for the watchlist monitor."""

from __future__ import annotations

import argparse
import sys

from marketpulse.config import DATA_SOURCES, Settings, parse_symbols
from marketpulse.runtime import run


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        description="Indicator-driven buy/sell/hold signals for a stock watchlist"
    )
    parser.add_argument("--symbols", type=str, help="Comma-separated watchlist symbols")
    parser.add_argument("--anchor", type=str, help="Anchor symbol gating the sell rule")
    parser.add_argument("--data-source", choices=list(DATA_SOURCES), help="Bar source")
    parser.add_argument("--historical-dir", type=str, help="CSV historical data directory")
    parser.add_argument(
        "--walk-forward",
        action="store_true",
        help="Reveal one more CSV bar per pass",
    )
    parser.add_argument("--warmup-bars", type=int, help="Initial walk-forward window")
    parser.add_argument("--max-passes", type=int, help="Stop after this many evaluations")
    parser.add_argument(
        "--interval-seconds", type=int, help="Seconds between watchlist evaluations"
    )
    parser.add_argument("--log-level", type=str, help="Logging level (INFO, DEBUG, ...)")
    return parser


def apply_cli_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Apply CLI values onto environment-derived settings."""
    overrides: dict[str, object] = {}
    if args.symbols:
        overrides["symbols"] = parse_symbols(args.symbols, settings.symbols)
    if args.anchor:
        overrides["anchor"] = args.anchor.strip().upper()
    if args.data_source:
        overrides["data_source"] = args.data_source
    if args.historical_dir:
        overrides["historical_data_dir"] = args.historical_dir
    if args.walk_forward:
        overrides["walk_forward"] = True
    if args.warmup_bars is not None:
        overrides["warmup_bars"] = args.warmup_bars
    if args.max_passes is not None:
        overrides["max_passes"] = args.max_passes
    if args.interval_seconds is not None:
        overrides["interval_seconds"] = args.interval_seconds
    if args.log_level:
        overrides["log_level"] = args.log_level.strip().upper()
    return settings.with_overrides(**overrides)


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = apply_cli_overrides(Settings.from_env(), args)
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        return 2
    return run(settings)


if __name__ == "__main__":
    sys.exit(main())
