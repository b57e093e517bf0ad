# -*- coding: utf-8 -*-
"""Quote record and series preparation.

Every indicator accepts either a sequence of ``Quote`` or an OHLCV
``pandas.DataFrame``.  ``prepare_quotes`` turns both into a tuple of
quotes ordered by date, which is the only shape the engine works on.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Sequence, Tuple, Union

from pandas import DataFrame, isna

from stock_ta.exceptions import BadQuoteError
from stock_ta.maps import QUOTE_COLUMNS


def to_decimal(value: Any) -> Decimal:
    """Exact-as-printed Decimal for int / float / str / numpy scalars."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if hasattr(value, "item"):          # numpy scalar
        value = value.item()
    try:
        result = Decimal(str(value))
    except InvalidOperation:
        raise BadQuoteError(f"Not a number: {value!r}") from None
    if not result.is_finite():
        raise BadQuoteError(f"Not a finite number: {value!r}")
    return result


@dataclass(frozen=True)
class Quote:
    """One period of price history."""
    date: Any
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal = Decimal(0)

    def __post_init__(self):
        # frozen: coerce through object.__setattr__
        for name in QUOTE_COLUMNS:
            object.__setattr__(self, name, to_decimal(getattr(self, name)))

    def as_bar(self) -> dict:
        return {
            "date": self.date,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }


QuotesLike = Union[Sequence[Quote], DataFrame]


def quotes_from_frame(df: DataFrame) -> Tuple[Quote, ...]:
    """Build quotes from an OHLCV DataFrame.

    Column names are matched case-insensitively.  The date comes from a
    ``date`` column when present, otherwise from the index.  ``volume``
    is optional and defaults to 0.
    """
    columns = {str(c).lower(): c for c in df.columns}
    missing = [c for c in ("open", "high", "low", "close") if c not in columns]
    if missing:
        raise BadQuoteError(f"DataFrame is missing column(s): {', '.join(missing)}")

    dates = df[columns["date"]] if "date" in columns else df.index
    volume = df[columns["volume"]] if "volume" in columns else None

    quotes = []
    for i, date in enumerate(dates):
        vol = 0 if volume is None or isna(volume.iloc[i]) else volume.iloc[i]
        quotes.append(Quote(
            date=date,
            open=df[columns["open"]].iloc[i],
            high=df[columns["high"]].iloc[i],
            low=df[columns["low"]].iloc[i],
            close=df[columns["close"]].iloc[i],
            volume=vol,
        ))
    return tuple(quotes)


def prepare_quotes(quotes: Union[QuotesLike, Iterable[Quote]]) -> Tuple[Quote, ...]:
    """Return *quotes* sorted by date; duplicate dates are rejected."""
    if isinstance(quotes, DataFrame):
        quotes = quotes_from_frame(quotes)
    if quotes is None:
        raise BadQuoteError("No quotes provided.")

    ordered = sorted(quotes, key=lambda q: q.date)
    for prev, cur in zip(ordered, ordered[1:]):
        if prev.date == cur.date:
            raise BadQuoteError(f"Duplicate date found: {cur.date}.")
    return tuple(ordered)
