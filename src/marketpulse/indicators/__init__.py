"""Indicator calculators over bar series."""

from .ema import ema
from .rsi import DEFAULT_RSI_PERIOD, latest_rsi, rsi
from .vwap import typical_price, vwap

__all__ = ["DEFAULT_RSI_PERIOD", "ema", "latest_rsi", "rsi", "typical_price", "vwap"]
