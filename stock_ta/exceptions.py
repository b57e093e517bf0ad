# -*- coding: utf-8 -*-
"""Typed failures raised at the indicator call boundary."""
from __future__ import annotations

from typing import Optional


class IndicatorError(ValueError):
    """Base class for every error raised by stock_ta."""


class ParameterError(IndicatorError):
    """An indicator parameter is outside its documented domain."""

    def __init__(self, name: str, value, message: str):
        self.name = name
        self.value = value
        super().__init__(f"{message} ({name}={value!r})")


class InsufficientHistoryError(IndicatorError):
    """Fewer quotes than the indicator needs."""

    def __init__(self, indicator: str, provided: int, required: int,
                 recommended: Optional[int] = None, lookback: Optional[int] = None):
        self.indicator = indicator
        self.provided = provided
        self.required = required
        self.recommended = recommended

        message = (
            f"Insufficient history provided for {indicator}.  "
            f"You provided {provided} periods of history when at least {required} is required."
        )
        if recommended is not None:
            message += (
                f"  Since this uses a smoothing technique, for a lookback of {lookback}, "
                f"we recommend you use at least {recommended} data points prior to the "
                "intended usage date for maximum precision."
            )
        super().__init__(message)


class BadQuoteError(IndicatorError):
    """Quotes could not be prepared (duplicate dates, missing columns)."""


class IndicatorOverflowWarning(RuntimeWarning):
    """One or more periods were set to None after a decimal overflow."""
