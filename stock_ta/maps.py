# -*- coding: utf-8 -*-
from decimal import Context, DivisionByZero, InvalidOperation, Overflow

# Fixed-point decimal range: 28 significant digits, |x| < 10**29.
DECIMAL_CONTEXT = Context(
    prec=28, Emax=28, Emin=-28,
    traps=[Overflow, DivisionByZero, InvalidOperation],
)

# Indicator Categories
Category = {
    "overlap": ["kama", "sma"],
    "trend": ["psar"],
}

# Keyword defaults per indicator kind
DEFAULTS = {
    "sma": {"lookback_period": None, "extended": False},
    "kama": {"er_period": 10, "fast_period": 2, "slow_period": 30},
    "psar": {"acceleration_step": "0.02", "max_acceleration_factor": "0.2"},
}

# Extra history recommended for smoothing indicators, beyond the lookback
SMOOTHING_RECOMMENDED_EXTRA = 250

QUOTE_COLUMNS = ("open", "high", "low", "close", "volume")
