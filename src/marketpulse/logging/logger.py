"""Concise human-readable run logger."""

from __future__ import annotations

import logging

from marketpulse.domain.models import SentimentSnapshot, SignalReading


class HumanLogger:
    """Console logger with fixed line types."""

    def __init__(self, level: str = "INFO") -> None:
        self._logger = logging.getLogger("marketpulse")
        self._logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        self._logger.propagate = False
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s | %(message)s", "%Y-%m-%d %H:%M:%S")
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)

    def run_started(self, symbols: list[str], anchor: str | None, data_source: str) -> None:
        self._logger.info(
            "start | watching %s | anchor %s | source %s",
            ",".join(symbols),
            anchor or "-",
            data_source,
        )

    def signal(self, reading: SignalReading) -> None:
        parts = [f"signal | {reading.symbol} | {reading.signal.value}"]
        if reading.close is None:
            parts.append(f"bars {reading.bars} (insufficient history)")
        else:
            parts.append(f"close ${reading.close:,.2f}")
            parts.append(f"ema9 {self._format_value(reading.ema_fast)}")
            parts.append(f"ema21 {self._format_value(reading.ema_slow)}")
            parts.append(f"rsi {self._format_value(reading.rsi, precision=1)}")
            parts.append(f"vwap {self._format_value(reading.vwap)}")
        self._logger.info(" | ".join(parts))

    def sentiment(self, snapshot: SentimentSnapshot, pass_number: int | None = None) -> None:
        anchor_signal = snapshot.anchor_signal.value if snapshot.anchor_signal else "-"
        parts = ["sentiment"]
        if pass_number is not None:
            parts.append(f"pass {pass_number}")
        parts.extend(
            [
                f"buy {snapshot.buy_count}",
                f"sell {snapshot.sell_count}",
                f"anchor {snapshot.anchor or '-'}={anchor_signal}",
                f"actions {','.join(action.value for action in snapshot.actions)}",
            ]
        )
        self._logger.info(" | ".join(parts))

    def error(self, message: str) -> None:
        self._logger.error("error | %s", message)

    @staticmethod
    def _format_value(value: float | None, precision: int = 2) -> str:
        if value is None:
            return "n/a"
        return f"{value:,.{max(0, precision)}f}"
