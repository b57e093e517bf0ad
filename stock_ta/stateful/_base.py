# -*- coding: utf-8 -*-
"""stock_ta stateful – shared base: helpers, descriptor, registry, roll.

Category modules (``_overlap``, ``_trend``) import from here and
populate ``STATEFUL_REGISTRY`` at load time.  ``run`` is the single
entry the public indicator functions go through:

    prepare quotes -> validate -> roll init/update -> align -> post pass
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Type

from stock_ta.exceptions import ParameterError
from stock_ta.maps import DECIMAL_CONTEXT
from stock_ta.quotes import Quote, prepare_quotes, to_decimal
from stock_ta.results import IndicatorResults, align


OVERFLOW_MESSAGE = (
    "Extreme price variation caused an Overflow condition in {kind}.  "
    "Impacted {kind} values were set to None."
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _param(params: Dict[str, Any], key: str, default: Any) -> Any:
    """Pull *key* from *params*; treat None as missing → default."""
    value = params.get(key, default)
    return default if value is None else value


def _as_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ParameterError(name, value, f"{name} must be an integer.")
    if isinstance(value, float) and not value.is_integer():
        raise ParameterError(name, value, f"{name} must be an integer.")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ParameterError(name, value, f"{name} must be an integer.") from None


def _as_decimal(name: str, value: Any) -> Decimal:
    try:
        return to_decimal(value)
    except ValueError:
        raise ParameterError(name, value, f"{name} must be a number.") from None


# ---------------------------------------------------------------------------
# Indicator descriptor & registry  (populated by category modules)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StatefulIndicator:
    """Immutable descriptor for a single stateful indicator.

    ``params`` normalises raw keywords, ``validate`` checks them against
    the quotes, ``init``/``update`` are the fold, and ``finalize`` is an
    optional pass over the aligned records.
    """
    kind:         str
    inputs:       Tuple[str, ...]
    params:       Callable[[Dict[str, Any]], Dict[str, Any]]
    validate:     Callable[[Sequence[Quote], Dict[str, Any]], int]
    init:         Callable[[Dict[str, Any]], Any]
    update:       Callable[[Any, Dict[str, Any], Dict[str, Any]],
                           Tuple[List[Optional[Any]], Any]]
    output_names: Callable[[Dict[str, Any]], List[str]]
    result_type:  Type
    finalize:     Optional[Callable[[List[Any]], List[Any]]] = None


STATEFUL_REGISTRY: Dict[str, StatefulIndicator] = {}


def get_indicator(kind: str) -> StatefulIndicator:
    indicator = STATEFUL_REGISTRY.get(kind)
    if indicator is None:
        raise ValueError(f"Indicator '{kind}' not found in STATEFUL_REGISTRY")
    return indicator


# ---------------------------------------------------------------------------
# Roll
# ---------------------------------------------------------------------------

def roll(kind: str, quotes: Sequence[Quote], params: Dict[str, Any]) -> Tuple[List[List[Any]], Any]:
    """Fold the indicator's update over *quotes*.

    Returns one output list per quote and the final state.  Arithmetic
    runs under ``DECIMAL_CONTEXT``; the caller's context is untouched.
    """
    indicator = get_indicator(kind)
    rows: List[List[Any]] = []
    with localcontext(DECIMAL_CONTEXT):
        state = indicator.init(params)
        for quote in quotes:
            bar = quote.as_bar()
            out, state = indicator.update(state, bar, params)
            rows.append(out)
    return rows, state


def run(kind: str, quotes: Any, **kwargs: Any) -> IndicatorResults:
    """Prepare, validate, roll and align one indicator call."""
    indicator = get_indicator(kind)
    quotes = prepare_quotes(quotes)
    params = indicator.params(kwargs)
    indicator.validate(quotes, params)

    rows, state = roll(kind, quotes, params)
    records = align(quotes, rows, indicator.result_type)
    if indicator.finalize is not None:
        records = indicator.finalize(records)

    overflow = bool(getattr(state, "overflow", False))
    messages = (OVERFLOW_MESSAGE.format(kind=kind.upper()),) if overflow else ()
    return IndicatorResults(
        kind=kind,
        results=tuple(records),
        columns=tuple(indicator.output_names(params)),
        overflow=overflow,
        warnings=messages,
    )


# ---------------------------------------------------------------------------
# Output-name helpers
# ---------------------------------------------------------------------------

def resolve_output_names(
        base_names: List[str], options: Dict[str, Any]
) -> Tuple[Optional[List[str]], Optional[str]]:
    """Apply prefix / suffix / col_names overrides from *options*."""
    names = list(base_names)
    delimiter = options.get("delimiter", "_")
    prefix = options.get("prefix") or ""
    suffix = options.get("suffix") or ""
    if prefix:
        prefix = f"{prefix}{delimiter}"
    if suffix:
        suffix = f"{delimiter}{suffix}"
    if prefix or suffix:
        names = [f"{prefix}{n}{suffix}" for n in names]
    col_names = options.get("col_names")
    if col_names is not None:
        if not isinstance(col_names, tuple):
            col_names = (col_names,)
        if len(col_names) < len(names):
            return None, f"[!] col_names too short: {len(col_names)} < {len(names)}"
        names = list(col_names[: len(names)])
    return names, None


def stateful_supported_kinds() -> List[str]:
    """Return sorted list of supported indicator kinds."""
    return sorted(STATEFUL_REGISTRY.keys())
