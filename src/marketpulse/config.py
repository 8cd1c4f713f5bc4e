"""Environment and CLI runtime configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Self

from dotenv import load_dotenv

from marketpulse.domain.models import Watchlist
from marketpulse.errors import ConfigError

DEFAULT_WATCHLIST = ["AAPL", "MSFT", "GOOGL", "AMZN", "TSLA"]
DATA_SOURCES = ("sample", "csv")


def parse_bool(value: str | None, default: bool) -> bool:
    """Parse truthy environment strings."""
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def parse_optional_positive_int(value: str | None, *, field_name: str) -> int | None:
    """Parse optional positive integer values from env strings."""
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    try:
        parsed = int(text)
    except ValueError as exc:
        raise ConfigError(f"{field_name} must be an integer") from exc
    if parsed <= 0:
        raise ConfigError(f"{field_name} must be positive")
    return parsed


def parse_int(value: str | None, default: int, *, field_name: str) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ConfigError(f"{field_name} must be an integer") from exc


def parse_symbols(value: str | None, default: list[str] | None = None) -> list[str]:
    """Parse comma-separated symbols."""
    fallback = default or DEFAULT_WATCHLIST
    if not value:
        return list(fallback)
    symbols = [item.strip().upper() for item in value.split(",") if item.strip()]
    return dedupe_symbols(symbols) or list(fallback)


def dedupe_symbols(symbols: list[str]) -> list[str]:
    """Remove duplicate symbols while preserving order."""
    deduped: list[str] = []
    seen: set[str] = set()
    for symbol in symbols:
        if symbol in seen:
            continue
        seen.add(symbol)
        deduped.append(symbol)
    return deduped


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""

    symbols: list[str] = field(default_factory=lambda: list(DEFAULT_WATCHLIST))
    anchor: str = ""
    data_source: str = "sample"
    historical_data_dir: str = "historical_data"
    walk_forward: bool = False
    warmup_bars: int = 30
    sample_bars: int = 120
    interval_seconds: int = 30
    max_passes: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Self:
        """Create settings from environment variables."""
        load_dotenv()
        raw = cls(
            symbols=parse_symbols(os.getenv("SYMBOLS")),
            anchor=str(os.getenv("ANCHOR_SYMBOL", "")).strip().upper(),
            data_source=str(os.getenv("DATA_SOURCE", "sample")).strip().lower(),
            historical_data_dir=str(os.getenv("HISTORICAL_DATA_DIR", "historical_data")).strip(),
            walk_forward=parse_bool(os.getenv("WALK_FORWARD"), False),
            warmup_bars=parse_int(os.getenv("WARMUP_BARS"), 30, field_name="warmup_bars"),
            sample_bars=parse_int(os.getenv("SAMPLE_BARS"), 120, field_name="sample_bars"),
            interval_seconds=parse_int(
                os.getenv("INTERVAL_SECONDS"), 30, field_name="interval_seconds"
            ),
            max_passes=parse_optional_positive_int(
                os.getenv("MAX_PASSES"),
                field_name="max_passes",
            ),
            log_level=str(os.getenv("LOG_LEVEL", "INFO")).strip().upper(),
        )
        return raw.validate()

    def with_overrides(self, **kwargs: object) -> Self:
        """Return a new settings object with updated values."""
        updated = replace(self, **kwargs)
        return updated.validate()

    def watchlist(self) -> Watchlist:
        """Build the watchlist, anchored on ``anchor`` or the first symbol."""
        return Watchlist.of(self.symbols, anchor=self.anchor or None)

    def should_run_continuously(self) -> bool:
        return self.max_passes is None

    def validate(self) -> Self:
        """Validate settings fields."""
        if not self.symbols:
            raise ConfigError("symbols must not be empty")
        if self.anchor and self.anchor.upper() not in {s.upper() for s in self.symbols}:
            raise ConfigError(f"anchor '{self.anchor}' must be one of the watched symbols")
        if self.data_source not in DATA_SOURCES:
            raise ConfigError(f"data_source must be one of {', '.join(DATA_SOURCES)}")
        if self.warmup_bars <= 0:
            raise ConfigError("warmup_bars must be positive")
        if self.sample_bars <= 0:
            raise ConfigError("sample_bars must be positive")
        if self.interval_seconds <= 0:
            raise ConfigError("interval_seconds must be positive")
        if self.max_passes is not None and self.max_passes <= 0:
            raise ConfigError("max_passes must be positive")
        if self.walk_forward and self.data_source != "csv":
            raise ConfigError("walk_forward requires data_source csv")
        return self
