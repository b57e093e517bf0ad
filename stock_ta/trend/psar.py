# -*- coding: utf-8 -*-
from stock_ta._typing import IntFloat
from stock_ta.quotes import QuotesLike
from stock_ta.results import IndicatorResults
from stock_ta.stateful import run


def psar(
    quotes: QuotesLike, acceleration_step: IntFloat = None,
    max_acceleration_factor: IntFloat = None,
) -> IndicatorResults:
    """Parabolic Stop and Reverse (PSAR)

    Trailing stop that follows the trend and accelerates each time a new
    extreme is made.  When price crosses the stop the trend reverses and
    the stop jumps to the extreme of the trend that just ended.

    Sources:
        * [stockcharts](https://school.stockcharts.com/doku.php?id=technical_indicators:parabolic_sar)

    Parameters:
        quotes (Sequence[Quote] | DataFrame): OHLCV history
        acceleration_step (float): AF increment (> 0). Default: ```0.02```
        max_acceleration_factor (float): AF cap (>= step). Default: ```0.2```

    Returns:
        (IndicatorResults): one ```ParabolicSarResult``` per quote

    Note: Initial Trend
        The first trend direction is a guess.  Every period up to and
        including the first reversal has ```sar``` and ```is_reversal```
        set to None.
    """
    return run(
        "psar", quotes,
        acceleration_step=acceleration_step,
        max_acceleration_factor=max_acceleration_factor,
    )
