# -*- coding: utf-8 -*-
"""Per-period result records and the container returned to callers."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, List, Optional, Tuple, Type

from numpy import nan
from pandas import DataFrame, Index, Series


@dataclass(frozen=True)
class SmaResult:
    date: Any
    sma: Optional[Decimal] = None
    mad: Optional[Decimal] = None
    mse: Optional[Decimal] = None
    mape: Optional[Decimal] = None


@dataclass(frozen=True)
class KamaResult:
    date: Any
    kama: Optional[Decimal] = None


@dataclass(frozen=True)
class ParabolicSarResult:
    date: Any
    sar: Optional[Decimal] = None
    is_reversal: Optional[bool] = None


def value_fields(result_type: Type) -> Tuple[str, ...]:
    """Field names of *result_type* other than ``date``."""
    return tuple(f.name for f in fields(result_type) if f.name != "date")


def align(quotes: Sequence, rows: Sequence[Sequence[Any]], result_type: Type) -> List[Any]:
    """One *result_type* record per quote, in quote order.

    *rows* holds the roll's outputs, one list per quote.  A missing row
    (shorter *rows*) yields an all-None record.
    """
    names = value_fields(result_type)
    records = []
    for i, quote in enumerate(quotes):
        row = rows[i] if i < len(rows) else ()
        values = dict(zip(names, row))
        records.append(result_type(date=quote.date, **values))
    return records


def _column(values: List[Any]) -> Series:
    present = [v for v in values if v is not None]
    if present and all(isinstance(v, bool) for v in present):
        return Series(values, dtype="boolean")
    return Series([nan if v is None else float(v) for v in values], dtype="float64")


@dataclass(frozen=True)
class IndicatorResults(Sequence):
    """Aligned results of one indicator call.

    ``overflow`` is True when at least one period was set to None after a
    decimal overflow; ``warnings`` then carries a message describing it.
    """
    kind: str
    results: Tuple[Any, ...]
    columns: Tuple[str, ...] = ()
    overflow: bool = False
    warnings: Tuple[str, ...] = ()

    def __getitem__(self, index):
        return self.results[index]

    def __len__(self) -> int:
        return len(self.results)

    @property
    def dates(self) -> List[Any]:
        return [r.date for r in self.results]

    def to_frame(self) -> DataFrame:
        """Results as a float DataFrame indexed by date (None -> NaN)."""
        names = value_fields(type(self.results[0])) if self.results else ()
        columns = self.columns or names
        data = {
            col: _column([getattr(r, name) for r in self.results]).values
            for col, name in zip(columns, names)
        }
        df = DataFrame(data, index=Index(self.dates, name="date"))
        df.name = columns[0] if len(columns) == 1 else self.kind.upper()
        return df
