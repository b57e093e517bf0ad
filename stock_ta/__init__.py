# -*- coding: utf-8 -*-
"""stock_ta – decimal technical indicators over ordered price quotes."""
from importlib.metadata import PackageNotFoundError, version as _version

try:
    version = _version("stock_ta")
except PackageNotFoundError:    # running from a source checkout
    version = "0.0.0"

from stock_ta.maps import Category, DEFAULTS, DECIMAL_CONTEXT
from stock_ta.exceptions import (
    BadQuoteError,
    IndicatorError,
    IndicatorOverflowWarning,
    InsufficientHistoryError,
    ParameterError,
)
from stock_ta.quotes import Quote, prepare_quotes, quotes_from_frame
from stock_ta.results import (
    IndicatorResults,
    KamaResult,
    ParabolicSarResult,
    SmaResult,
)
from stock_ta.stateful import *
from stock_ta.stateful import __all__ as stateful_all

# Flat Structure. Supports ta.kama() or ta.overlap.kama()
from stock_ta.overlap import *
from stock_ta.trend import *
from stock_ta.overlap import __all__ as overlap_all
from stock_ta.trend import __all__ as trend_all

# Enable "ta" DataFrame Extension
from stock_ta.core import AnalysisIndicators

__all__ = [
    "version",
    "Category",
    "DEFAULTS",
    "DECIMAL_CONTEXT",
    "BadQuoteError",
    "IndicatorError",
    "IndicatorOverflowWarning",
    "InsufficientHistoryError",
    "ParameterError",
    "Quote",
    "prepare_quotes",
    "quotes_from_frame",
    "IndicatorResults",
    "KamaResult",
    "ParabolicSarResult",
    "SmaResult",
    "AnalysisIndicators",
]

__all__ += overlap_all + trend_all + stateful_all
