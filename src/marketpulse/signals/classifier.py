"""Per-symbol buy/sell/hold classification from EMA, RSI and VWAP."""

from __future__ import annotations

import math

import pandas as pd

from marketpulse.domain.bars import validate_bars
from marketpulse.domain.models import Signal, SignalReading
from marketpulse.indicators.ema import ema
from marketpulse.indicators.rsi import latest_rsi, rsi
from marketpulse.indicators.vwap import vwap

EMA_FAST_PERIOD = 9
EMA_SLOW_PERIOD = 21
RSI_PERIOD = 14
RSI_NEUTRAL = 50.0
RSI_BUY_CEILING = 65.0
RSI_FALLBACK = 50.0
MIN_BARS = 2


def classify(
    price: float,
    ema_fast: float,
    ema_slow: float,
    rsi_value: float | None,
    vwap_value: float,
) -> Signal:
    """Classify the latest indicator readings for one symbol.

    Buy needs price above both EMAs and VWAP with RSI in ``(50, 65]``. Sell
    needs price below both EMAs and VWAP with RSI under 50. An undefined RSI
    counts as 50.
    """
    current_rsi = resolve_rsi(rsi_value)
    if (
        price > ema_fast
        and price > ema_slow
        and RSI_NEUTRAL < current_rsi <= RSI_BUY_CEILING
        and price > vwap_value
    ):
        return Signal.BUY
    if (
        price < ema_fast
        and price < ema_slow
        and current_rsi < RSI_NEUTRAL
        and price < vwap_value
    ):
        return Signal.SELL
    return Signal.HOLD


def resolve_rsi(value: float | None) -> float:
    if value is None or math.isnan(value):
        return RSI_FALLBACK
    return float(value)


def classify_bars(bars: pd.DataFrame, symbol: str = "") -> SignalReading:
    """Compute indicators over ``bars`` and classify the latest bar."""
    bar_count = len(bars)
    if bar_count < MIN_BARS:
        return SignalReading(symbol=symbol, signal=Signal.HOLD, bars=bar_count)

    frame = validate_bars(bars, symbol)
    closes = frame["close"]
    price = float(closes.iloc[-1])
    ema_fast = float(ema(closes, EMA_FAST_PERIOD).iloc[-1])
    ema_slow = float(ema(closes, EMA_SLOW_PERIOD).iloc[-1])
    rsi_value = latest_rsi(rsi(closes, RSI_PERIOD))
    vwap_value = vwap(frame)

    return SignalReading(
        symbol=symbol,
        signal=classify(price, ema_fast, ema_slow, rsi_value, vwap_value),
        bars=bar_count,
        close=price,
        ema_fast=ema_fast,
        ema_slow=ema_slow,
        rsi=rsi_value,
        vwap=vwap_value,
    )
