# -*- coding: utf-8 -*-
from decimal import Decimal, localcontext

import pytest

from stock_ta import (
    DECIMAL_CONTEXT,
    InsufficientHistoryError,
    ParabolicSarResult,
    ParameterError,
    psar,
)
from stock_ta.stateful import get_indicator, psar_clear_initial_trend, psar_forward, roll

from conftest import make_quotes

D = Decimal
PARAMS = {"acceleration_step": D("0.02"), "max_acceleration_factor": D("0.2")}

HIGHS = [10, 10.5, 10.2, 11, 11.5]
LOWS = [9.5, 9.8, 9.6, 10.2, 10.8]


def test_rising_example():
    quotes = make_quotes(HIGHS, LOWS)
    result = psar(quotes, acceleration_step=0.02, max_acceleration_factor=0.2)

    assert [r.sar for r in result] == [None, D("9.51"), D("9.5"), D("9.54"), D("9.6")]
    assert [r.is_reversal for r in result] == [None, False, False, False, False]
    for r, q in zip(result[1:], quotes[1:]):
        assert r.sar < q.low
    assert result.columns == ("PSAR_0.02_0.2", "PSARr_0.02_0.2")


def test_first_reversal_clears_initial_trend():
    quotes = make_quotes(HIGHS + [11.0, 10.0], LOWS + [9.0, 8.5])

    raw = psar_forward(quotes, PARAMS)
    assert raw[5].is_reversal is True
    assert raw[5].sar == D("11.5")
    assert raw[6].sar == D("11.5")    # clamped to the max of the two prior highs
    assert raw[6].is_reversal is False

    result = psar(quotes)
    assert [r.sar for r in result] == [None] * 6 + [D("11.5")]
    assert [r.is_reversal for r in result] == [None] * 6 + [False]


def test_clear_initial_trend_is_pure():
    records = [
        ParabolicSarResult(date=1, sar=None, is_reversal=None),
        ParabolicSarResult(date=2, sar=D(5), is_reversal=False),
        ParabolicSarResult(date=3, sar=D(6), is_reversal=True),
        ParabolicSarResult(date=4, sar=D(7), is_reversal=False),
        ParabolicSarResult(date=5, sar=D(8), is_reversal=True),
    ]
    cleared = psar_clear_initial_trend(records)

    assert records[2].sar == D(6)
    assert [r.sar for r in cleared] == [None, None, None, D(7), D(8)]
    assert [r.is_reversal for r in cleared] == [None, None, None, False, True]
    assert [r.date for r in cleared] == [1, 2, 3, 4, 5]


def test_clear_initial_trend_without_reversal():
    records = [ParabolicSarResult(date=1), ParabolicSarResult(date=2, sar=D(1), is_reversal=False)]
    assert psar_clear_initial_trend(records) == records


def test_alignment_and_initial_trend_cleared(quotes):
    result = psar(quotes)
    assert len(result) == len(quotes)
    assert [r.date for r in result] == [q.date for q in quotes]

    first = next(i for i, r in enumerate(result) if r.is_reversal is not None)
    assert first > 0
    assert all(r.sar is None and r.is_reversal is None for r in result[:first])
    assert all(r.sar is not None for r in result[first:])


def test_clamp_to_two_prior_bars(quotes):
    indicator = get_indicator("psar")
    with localcontext(DECIMAL_CONTEXT):
        state = indicator.init(PARAMS)
        for i, q in enumerate(quotes):
            was_rising = state.rising
            (sar, reverse), state = indicator.update(state, q.as_bar(), PARAMS)
            if i < 2 or reverse:
                continue
            if was_rising:
                assert sar <= min(quotes[i - 1].low, quotes[i - 2].low)
                assert sar <= q.low
            else:
                assert sar >= max(quotes[i - 1].high, quotes[i - 2].high)
                assert sar >= q.high


def test_acceleration_factor_capped():
    highs = [10 + i for i in range(40)]
    lows = [9 + i for i in range(40)]
    rows, state = roll("psar", make_quotes(highs, lows), PARAMS)

    assert state.rising
    assert state.af == D("0.2")
    assert not any(reverse for _, reverse in rows[1:])


def test_idempotent(quotes, ohlcv):
    assert psar(quotes) == psar(quotes) == psar(ohlcv)


def test_errors(quotes):
    with pytest.raises(ParameterError):
        psar(quotes, acceleration_step=0.3, max_acceleration_factor=0.2)
    with pytest.raises(ParameterError):
        psar(quotes, acceleration_step=0)
    with pytest.raises(InsufficientHistoryError):
        psar(quotes[:1])
    assert len(psar(quotes[:2])) == 2
