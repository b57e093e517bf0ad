# -*- coding: utf-8 -*-
"""stock_ta.stateful – init/update indicator engine.

Category modules populate STATEFUL_REGISTRY at import time.  This
package re-exports it plus the shared base API.
"""
from __future__ import annotations

# Base API (always available)
from ._base import (
    StatefulIndicator,
    STATEFUL_REGISTRY,
    OVERFLOW_MESSAGE,
    get_indicator,
    roll,
    run,
    resolve_output_names,
    stateful_supported_kinds,
)

# ---------------------------------------------------------------------------
# Category modules – each populates the shared registry on import
# ---------------------------------------------------------------------------
from . import _overlap  # noqa: F401  sma, kama
from . import _trend    # noqa: F401  psar

from ._overlap import KAMAState, SMAState, kama_step
from ._trend import PsarState, psar_forward, psar_clear_initial_trend

__all__ = [
    # base
    "StatefulIndicator",
    "STATEFUL_REGISTRY",
    "OVERFLOW_MESSAGE",
    "get_indicator",
    "roll",
    "run",
    "resolve_output_names",
    "stateful_supported_kinds",
    # states / passes
    "KAMAState",
    "SMAState",
    "PsarState",
    "kama_step",
    "psar_forward",
    "psar_clear_initial_trend",
]
