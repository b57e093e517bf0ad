# -*- coding: utf-8 -*-
from decimal import Decimal

import pandas as pd
import pytest

import stock_ta  # noqa: F401  registers DataFrame.ta
from stock_ta import IndicatorOverflowWarning

from conftest import make_ohlcv


def test_kama_frame(ohlcv):
    df = ohlcv.ta.kama()
    assert list(df.columns) == ["KAMA_10_2_30"]
    assert df.index.equals(ohlcv.index)
    assert df.name == "KAMA_10_2_30"
    assert df.category == "overlap"
    assert df["KAMA_10_2_30"].iloc[:9].isna().all()
    assert df["KAMA_10_2_30"].iloc[9] == ohlcv["close"].iloc[9]


def test_psar_frame(ohlcv):
    df = ohlcv.ta.psar()
    assert list(df.columns) == ["PSAR_0.02_0.2", "PSARr_0.02_0.2"]
    assert str(df["PSARr_0.02_0.2"].dtype) == "boolean"
    assert df.category == "trend"
    assert pd.isna(df["PSAR_0.02_0.2"].iloc[0])


def test_append_and_call():
    df = make_ohlcv(50, seed=3)
    out = df.ta("SMA", lookback_period=5, append=True)
    assert "SMA_5" in df.columns
    assert df["SMA_5"].equals(out["SMA_5"])
    assert "sma" in df.ta.indicators()


def test_unsorted_frame_keeps_source_order():
    df = make_ohlcv(40, seed=5)
    shuffled = df.iloc[::-1]
    out = shuffled.ta.sma(lookback_period=3)
    assert out.index.equals(shuffled.index)
    assert out["SMA_3"].iloc[0] == pytest.approx(df["close"].iloc[-3:].mean())


def test_prefix_suffix(ohlcv):
    df = ohlcv.ta.kama(prefix="pre", suffix="post")
    assert list(df.columns) == ["pre_KAMA_10_2_30_post"]


def test_unknown_indicator(ohlcv):
    with pytest.raises(ValueError, match="Unknown indicator"):
        ohlcv.ta("macd")


def test_overflow_warning():
    closes = [100 + (i % 2) for i in range(120)]
    closes[60], closes[61] = Decimal("9E+28"), Decimal("-9E+28")
    df = pd.DataFrame(
        {"open": closes, "high": closes, "low": closes, "close": closes},
        index=pd.date_range("2024-01-01", periods=120, freq="1D"),
    )
    with pytest.warns(IndicatorOverflowWarning, match="Overflow"):
        out = df.ta.kama()
    assert pd.isna(out.iloc[61, 0])
