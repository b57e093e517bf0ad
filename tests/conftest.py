# -*- coding: utf-8 -*-
from decimal import Decimal
from typing import List, Sequence

import numpy as np
import pandas as pd
import pytest

from stock_ta import Quote


def make_ohlcv(rows: int, seed: int) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    idx = pd.date_range("2025-01-01", periods=rows, freq="1D")
    base = 100 + rng.standard_normal(rows).cumsum()
    close = base + rng.normal(0, 0.2, rows)
    open_ = base + rng.normal(0, 0.2, rows)
    high = np.maximum(open_, close) + rng.random(rows) * 0.5
    low = np.minimum(open_, close) - rng.random(rows) * 0.5
    volume = rng.integers(100, 1000, rows)
    return pd.DataFrame(
        {
            "open": open_.round(4),
            "high": high.round(4),
            "low": low.round(4),
            "close": close.round(4),
            "volume": volume,
        },
        index=idx,
    )


def make_quotes(highs: Sequence, lows: Sequence, closes: Sequence = None) -> List[Quote]:
    """Daily quotes from explicit highs / lows (close defaults to the midpoint)."""
    dates = pd.date_range("2024-01-01", periods=len(highs), freq="1D")
    quotes = []
    for i, (h, l) in enumerate(zip(highs, lows)):
        h, l = Decimal(str(h)), Decimal(str(l))
        c = Decimal(str(closes[i])) if closes is not None else (h + l) / 2
        quotes.append(Quote(date=dates[i], open=c, high=h, low=l, close=c, volume=1000))
    return quotes


def quotes_from_closes(closes: Sequence) -> List[Quote]:
    return make_quotes(closes, closes, closes)


@pytest.fixture(scope="session")
def ohlcv() -> pd.DataFrame:
    return make_ohlcv(300, seed=7)


@pytest.fixture(scope="session")
def quotes(ohlcv) -> List[Quote]:
    return [
        Quote(date=ts, open=r.open, high=r.high, low=r.low, close=r.close, volume=r.volume)
        for ts, r in ohlcv.iterrows()
    ]
