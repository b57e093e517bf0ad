# -*- coding: utf-8 -*-
"""``DataFrame.ta`` extension.

    df.ta.kama(er_period=10, append=True)
    df.ta("psar", acceleration_step=0.02)

Results come back as float DataFrames indexed like the source frame.
Overflow diagnostics are re-emitted as ``IndicatorOverflowWarning``.
"""
from __future__ import annotations

import warnings
from typing import List

from pandas import DataFrame
from pandas.api.extensions import register_dataframe_accessor

from stock_ta._typing import DictLike, Int, IntFloat
from stock_ta.exceptions import IndicatorOverflowWarning
from stock_ta.maps import Category
from stock_ta.results import IndicatorResults
from stock_ta.stateful import resolve_output_names, run, stateful_supported_kinds


@register_dataframe_accessor("ta")
class AnalysisIndicators:
    """Indicator shortcuts on an OHLCV DataFrame."""

    def __init__(self, pandas_obj: DataFrame):
        self._df = pandas_obj

    def __call__(self, kind: str, **kwargs: DictLike) -> DataFrame:
        kind = kind.lower()
        if kind not in stateful_supported_kinds():
            raise ValueError(f"Unknown indicator '{kind}'. Try one of: {self.indicators()}")
        return getattr(self, kind)(**kwargs)

    @property
    def categories(self) -> List[str]:
        return list(Category.keys())

    def indicators(self) -> List[str]:
        return stateful_supported_kinds()

    def _dates(self):
        date_cols = [c for c in self._df.columns if str(c).lower() == "date"]
        return self._df[date_cols[0]] if date_cols else self._df.index

    def _post(self, result: IndicatorResults, append: bool, options: DictLike) -> DataFrame:
        for message in result.warnings:
            warnings.warn(message, IndicatorOverflowWarning, stacklevel=3)

        frame = result.to_frame()
        names, err = resolve_output_names(list(frame.columns), options)
        if err:
            raise ValueError(err)
        frame.columns = names

        dates = self._dates()
        frame = frame.reindex(dates)
        frame.index = self._df.index
        frame.name = names[0] if len(names) == 1 else result.kind.upper()
        frame.category = next(
            (c for c, kinds in Category.items() if result.kind in kinds), None
        )

        if append:
            for col in frame.columns:
                self._df[col] = frame[col].to_numpy()
        return frame

    def kama(self, er_period: Int = None, fast_period: Int = None,
             slow_period: Int = None, append: bool = False, **kwargs: DictLike) -> DataFrame:
        result = run(
            "kama", self._df,
            er_period=er_period, fast_period=fast_period, slow_period=slow_period,
        )
        return self._post(result, append, kwargs)

    def psar(self, acceleration_step: IntFloat = None,
             max_acceleration_factor: IntFloat = None,
             append: bool = False, **kwargs: DictLike) -> DataFrame:
        result = run(
            "psar", self._df,
            acceleration_step=acceleration_step,
            max_acceleration_factor=max_acceleration_factor,
        )
        return self._post(result, append, kwargs)

    def sma(self, lookback_period: Int = None, extended: bool = None,
            append: bool = False, **kwargs: DictLike) -> DataFrame:
        result = run("sma", self._df, lookback_period=lookback_period, extended=extended)
        return self._post(result, append, kwargs)
