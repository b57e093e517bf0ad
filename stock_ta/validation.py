# -*- coding: utf-8 -*-
"""Parameter and history checks, run before any computation.

Each ``validate_<kind>`` raises ``ParameterError`` or
``InsufficientHistoryError`` and otherwise returns the minimum history
it enforced.  Nothing here touches the quotes beyond counting them.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Sized

from stock_ta.exceptions import InsufficientHistoryError, ParameterError
from stock_ta.maps import SMOOTHING_RECOMMENDED_EXTRA


def _positive(name: str, value, indicator: str) -> None:
    if value <= 0:
        raise ParameterError(name, value, f"{name} must be greater than 0 for {indicator}.")


def _history(quotes: Sized, required: int, indicator: str,
             recommended: int = None, lookback: int = None) -> int:
    provided = len(quotes)
    if provided < required:
        raise InsufficientHistoryError(
            indicator, provided, required,
            recommended=recommended, lookback=lookback,
        )
    return required


def kama_min_history(er_period: int) -> int:
    return max(2 * er_period, er_period + 100)


def validate_sma(quotes: Sized, lookback_period: int) -> int:
    _positive("lookback_period", lookback_period, "SMA")
    return _history(quotes, lookback_period, "SMA")


def validate_kama(quotes: Sized, er_period: int, fast_period: int, slow_period: int) -> int:
    _positive("er_period", er_period, "KAMA")
    _positive("fast_period", fast_period, "KAMA")
    if slow_period <= fast_period:
        raise ParameterError(
            "slow_period", slow_period,
            "Slow EMA period must be greater than Fast EMA period for KAMA.",
        )
    return _history(
        quotes, kama_min_history(er_period), "KAMA",
        recommended=er_period + SMOOTHING_RECOMMENDED_EXTRA,
        lookback=er_period,
    )


def validate_psar(quotes: Sized, acceleration_step: Decimal,
                  max_acceleration_factor: Decimal) -> int:
    _positive("acceleration_step", acceleration_step, "Parabolic SAR")
    _positive("max_acceleration_factor", max_acceleration_factor, "Parabolic SAR")
    if acceleration_step > max_acceleration_factor:
        raise ParameterError(
            "acceleration_step", acceleration_step,
            "Acceleration Step must be smaller than Max Acceleration Factor for Parabolic SAR.",
        )
    return _history(quotes, 2, "Parabolic SAR")
