# -*- coding: utf-8 -*-
"""stock_ta stateful -- trend indicators.

Registered kinds
----------------
psar
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any, Deque, Dict, List, Optional, Sequence, Tuple

from stock_ta.maps import DEFAULTS
from stock_ta.results import ParabolicSarResult, align
from stock_ta.validation import validate_psar

from ._base import (
    _param,
    _as_decimal,
    StatefulIndicator,
    STATEFUL_REGISTRY,
    roll,
)


# ===========================================================================
# PSAR  -- Parabolic Stop and Reverse
# ===========================================================================
# Defaults: acceleration_step=0.02, max_acceleration_factor=0.2
# Bar 0 seeds the state (rising guess, ep=high, sar=low) and outputs None.
# Rising:  sar = prior + af * (ep - prior)
#          low < sar  -> reversal: output ep, flip, af = step, ep = low
#          otherwise  -> sar <= min of last two lows; new high moves ep, af += step
# Falling is the mirror image.  The first trend is a guess, so every bar up
# to and including the first reversal is cleared afterwards.

@dataclass
class PsarState:
    step: Decimal
    max_af: Decimal
    af: Decimal
    rising: bool = True
    ep: Optional[Decimal] = None
    prior_sar: Optional[Decimal] = None
    # highs / lows of the two preceding bars
    highs: Deque[Decimal] = field(default_factory=lambda: deque(maxlen=2))
    lows: Deque[Decimal] = field(default_factory=lambda: deque(maxlen=2))


def _psar_params(kwargs: Dict[str, Any]) -> Dict[str, Any]:
    defaults = DEFAULTS["psar"]
    return {
        key: _as_decimal(key, _param(kwargs, key, defaults[key]))
        for key in ("acceleration_step", "max_acceleration_factor")
    }


def _psar_validate(quotes: Sequence, params: Dict[str, Any]) -> int:
    return validate_psar(
        quotes, params["acceleration_step"], params["max_acceleration_factor"]
    )


def _psar_init(params: Dict[str, Any]) -> PsarState:
    step = params["acceleration_step"]
    return PsarState(step=step, max_af=params["max_acceleration_factor"], af=step)


def _psar_update(
    state: PsarState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[Any]], PsarState]:
    high, low = bar["high"], bar["low"]

    # First bar: seed only
    if state.ep is None:
        state.ep = high
        state.prior_sar = low
        state.highs.append(high)
        state.lows.append(low)
        return [None, None], state

    clamp = len(state.lows) == 2

    if state.rising:
        sar = state.prior_sar + state.af * (state.ep - state.prior_sar)
        reverse = low < sar
        if reverse:
            sar = state.ep
            state.rising = False
            state.af = state.step
            state.ep = low
        else:
            if clamp:
                sar = min(sar, *state.lows)
            if high > state.ep:
                state.ep = high
                state.af = min(state.af + state.step, state.max_af)
    else:
        sar = state.prior_sar - state.af * (state.prior_sar - state.ep)
        reverse = high > sar
        if reverse:
            sar = state.ep
            state.rising = True
            state.af = state.step
            state.ep = high
        else:
            if clamp:
                sar = max(sar, *state.highs)
            if low < state.ep:
                state.ep = low
                state.af = min(state.af + state.step, state.max_af)

    state.prior_sar = sar
    state.highs.append(high)
    state.lows.append(low)
    return [sar, reverse], state


def psar_forward(quotes: Sequence, params: Dict[str, Any]) -> List[ParabolicSarResult]:
    """Raw PSAR records, before the initial-trend correction."""
    rows, _ = roll("psar", quotes, params)
    return align(quotes, rows, ParabolicSarResult)


def psar_clear_initial_trend(results: Sequence[ParabolicSarResult]) -> List[ParabolicSarResult]:
    """Clear ``sar`` / ``is_reversal`` up to and including the first reversal.

    Returns a new list; records without any reversal are returned as-is.
    """
    first = next((i for i, r in enumerate(results) if r.is_reversal), None)
    if first is None:
        return list(results)
    cleared = [replace(r, sar=None, is_reversal=None) for r in results[: first + 1]]
    return cleared + list(results[first + 1:])


def _psar_output_names(params: Dict[str, Any]) -> List[str]:
    props = f"_{params['acceleration_step']}_{params['max_acceleration_factor']}"
    return [f"PSAR{props}", f"PSARr{props}"]


STATEFUL_REGISTRY["psar"] = StatefulIndicator(
    kind="psar",
    inputs=("high", "low"),
    params=_psar_params,
    validate=_psar_validate,
    init=_psar_init,
    update=_psar_update,
    output_names=_psar_output_names,
    result_type=ParabolicSarResult,
    finalize=psar_clear_initial_trend,
)
