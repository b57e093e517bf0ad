# -*- coding: utf-8 -*-
from stock_ta._typing import Int
from stock_ta.quotes import QuotesLike
from stock_ta.results import IndicatorResults
from stock_ta.stateful import run


def kama(
    quotes: QuotesLike, er_period: Int = None,
    fast_period: Int = None, slow_period: Int = None,
) -> IndicatorResults:
    """Kaufman's Adaptive Moving Average (KAMA)

    A moving average that speeds up in trending markets and slows down in
    choppy ones.  An efficiency ratio (net change over the sum of bar to
    bar changes) blends a fast and a slow EMA smoothing constant.

    Sources:
        * [stockcharts](https://school.stockcharts.com/doku.php?id=technical_indicators:kaufman_s_adaptive_moving_average)

    Parameters:
        quotes (Sequence[Quote] | DataFrame): OHLCV history
        er_period (int): Efficiency ratio lookback (> 0). Default: ```10```
        fast_period (int): Fast EMA period (> 0). Default: ```2```
        slow_period (int): Slow EMA period (> fast_period). Default: ```30```

    Returns:
        (IndicatorResults): one ```KamaResult``` per quote

    Note: History
        At least ```max(2 * er_period, er_period + 100)``` quotes are
        required; ```er_period + 250``` are recommended since the value is
        recursive and the first ones are imprecise.

    Warning:
        Extreme price variation can overflow the decimal range.  Affected
        periods are None and ```IndicatorResults.overflow``` is True.
    """
    return run(
        "kama", quotes,
        er_period=er_period, fast_period=fast_period, slow_period=slow_period,
    )
