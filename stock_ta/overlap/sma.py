# -*- coding: utf-8 -*-
from stock_ta._typing import Int
from stock_ta.quotes import QuotesLike
from stock_ta.results import IndicatorResults
from stock_ta.stateful import run


def sma(quotes: QuotesLike, lookback_period: Int = None, extended: bool = None) -> IndicatorResults:
    """Simple Moving Average (SMA)

    Arithmetic mean of the close over the last ```lookback_period``` bars.

    Parameters:
        quotes (Sequence[Quote] | DataFrame): OHLCV history
        lookback_period (int): Window size (> 0). Required.
        extended (bool): Also compute MAD, MSE and MAPE. Default: ```False```

    Returns:
        (IndicatorResults): one ```SmaResult``` per quote
    """
    return run("sma", quotes, lookback_period=lookback_period, extended=extended)
