# -*- coding: utf-8 -*-
"""stock_ta stateful -- overlap indicators.

Each section follows the pattern:
  1. State dataclass
  2. params / init / update / output_names helpers
  3. STATEFUL_REGISTRY["<kind>"] = StatefulIndicator(...)

Registered kinds
----------------
sma, kama
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from decimal import Decimal, Overflow
from typing import Any, Deque, Dict, List, Optional, Sequence, Tuple

from stock_ta.exceptions import ParameterError
from stock_ta.maps import DEFAULTS
from stock_ta.results import KamaResult, SmaResult
from stock_ta.validation import validate_kama, validate_sma

from ._base import (
    _param,
    _as_int,
    StatefulIndicator,
    STATEFUL_REGISTRY,
)


# ===========================================================================
# SMA  -- Simple Moving Average, with optional error statistics
# ===========================================================================
# sma  = mean(close) over the last `lookback_period` bars
# mad  = mean(|close - sma|)
# mse  = mean((close - sma)^2)
# mape = mean(|close - sma| / close)      None if any close in window is 0

@dataclass
class SMAState:
    lookback_period: int
    extended: bool
    window: Deque[Decimal] = field(default_factory=deque)


def _sma_params(kwargs: Dict[str, Any]) -> Dict[str, Any]:
    defaults = DEFAULTS["sma"]
    lookback = _param(kwargs, "lookback_period", defaults["lookback_period"])
    if lookback is None:
        raise ParameterError("lookback_period", None, "Lookback period is required for SMA.")
    return {
        "lookback_period": _as_int("lookback_period", lookback),
        "extended": bool(_param(kwargs, "extended", defaults["extended"])),
    }


def _sma_validate(quotes: Sequence, params: Dict[str, Any]) -> int:
    return validate_sma(quotes, params["lookback_period"])


def _sma_init(params: Dict[str, Any]) -> SMAState:
    n = params["lookback_period"]
    return SMAState(lookback_period=n, extended=params["extended"], window=deque(maxlen=n))


def _sma_update(
    state: SMAState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[Decimal]], SMAState]:
    state.window.append(bar["close"])
    n = state.lookback_period
    if len(state.window) < n:
        return [None, None, None, None], state

    sma = sum(state.window) / n
    if not state.extended:
        return [sma, None, None, None], state

    deviations = [abs(c - sma) for c in state.window]
    mad = sum(deviations) / n
    mse = sum(d * d for d in deviations) / n
    if any(c == 0 for c in state.window):
        mape = None
    else:
        mape = sum(d / c for d, c in zip(deviations, state.window)) / n
    return [sma, mad, mse, mape], state


def _sma_output_names(params: Dict[str, Any]) -> List[str]:
    n = params["lookback_period"]
    return [f"SMA_{n}", f"SMAmad_{n}", f"SMAmse_{n}", f"SMAmape_{n}"]


STATEFUL_REGISTRY["sma"] = StatefulIndicator(
    kind="sma",
    inputs=("close",),
    params=_sma_params,
    validate=_sma_validate,
    init=_sma_init,
    update=_sma_update,
    output_names=_sma_output_names,
    result_type=SmaResult,
)


# ===========================================================================
# KAMA  -- Kaufman Adaptive MA
# ===========================================================================
# Defaults: er_period=10, fast_period=2, slow_period=30
# Seed value = raw close at bar `er_period` (1-based).  After the seed:
#   er   = abs(close - close[er_period ago]) / sum(abs(close[i]-close[i-1])) over er_period
#   sc   = er*(fr-sr) + sr                 fr=2/(fast+1), sr=2/(slow+1)
#   kama = prior + sc^2 * (close - prior)
# Flatline window (volatility == 0): kama = close.
# A decimal Overflow nulls the bar and sets `overflow`.  A None prior keeps
# producing None until a flatline window re-seeds kama with the close.

@dataclass
class KAMAState:
    er_period: int
    sc_fast: Decimal
    sc_slow: Decimal
    # last er_period + 1 closes, oldest first
    closes: Deque[Decimal] = field(default_factory=deque)
    prior_kama: Optional[Decimal] = None
    count: int = 0
    overflow: bool = False


def _kama_params(kwargs: Dict[str, Any]) -> Dict[str, Any]:
    defaults = DEFAULTS["kama"]
    return {
        key: _as_int(key, _param(kwargs, key, defaults[key]))
        for key in ("er_period", "fast_period", "slow_period")
    }


def _kama_validate(quotes: Sequence, params: Dict[str, Any]) -> int:
    return validate_kama(
        quotes, params["er_period"], params["fast_period"], params["slow_period"]
    )


def _kama_init(params: Dict[str, Any]) -> KAMAState:
    er_period = params["er_period"]
    return KAMAState(
        er_period=er_period,
        sc_fast=Decimal(2) / (params["fast_period"] + 1),
        sc_slow=Decimal(2) / (params["slow_period"] + 1),
        closes=deque(maxlen=er_period + 1),
    )


def kama_step(
    prior: Optional[Decimal], closes: Sequence[Decimal],
    sc_fast: Decimal, sc_slow: Decimal,
) -> Optional[Decimal]:
    """Next KAMA from the *prior* value and the last ``er_period + 1`` closes.

    May raise ``decimal.Overflow`` under a context that traps it.
    """
    close = closes[-1]
    change = abs(close - closes[0])
    volatility = sum(abs(closes[p] - closes[p - 1]) for p in range(1, len(closes)))

    if volatility == 0:
        return close
    if prior is None:
        return None

    er = change / volatility
    sc = er * (sc_fast - sc_slow) + sc_slow  # squared below
    return prior + sc * sc * (close - prior)


def _kama_update(
    state: KAMAState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[Decimal]], KAMAState]:
    close = bar["close"]
    state.closes.append(close)
    state.count += 1

    if state.count < state.er_period:
        return [None], state

    if state.count == state.er_period:
        state.prior_kama = close
        return [close], state

    try:
        kama = kama_step(state.prior_kama, state.closes, state.sc_fast, state.sc_slow)
    except Overflow:
        kama = None
        state.overflow = True

    state.prior_kama = kama
    return [kama], state


def _kama_output_names(params: Dict[str, Any]) -> List[str]:
    return [f"KAMA_{params['er_period']}_{params['fast_period']}_{params['slow_period']}"]


STATEFUL_REGISTRY["kama"] = StatefulIndicator(
    kind="kama",
    inputs=("close",),
    params=_kama_params,
    validate=_kama_validate,
    init=_kama_init,
    update=_kama_update,
    output_names=_kama_output_names,
    result_type=KamaResult,
)
