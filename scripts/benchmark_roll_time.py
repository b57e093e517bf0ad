#!/usr/bin/env python3
"""Benchmark one full decimal roll per indicator.

Runs each selected kind through ``DataFrame.ta`` on synthetic OHLCV data
and reports elapsed time, so runtime can be estimated by scaling with
row count.
"""
from __future__ import annotations

import argparse
import os
import sys
from time import perf_counter
from typing import Dict, List

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pandas as pd
import stock_ta as ta


KIND_KWARGS: Dict[str, dict] = {
    "kama": {},
    "psar": {},
    "sma": {"lookback_period": 20, "extended": True},
}


def make_ohlcv(rows: int, seed: int) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    idx = pd.date_range("2025-01-01", periods=rows, freq="1min")
    base = 100 + rng.standard_normal(rows).cumsum()
    close = base + rng.normal(0, 0.2, rows)
    open_ = base + rng.normal(0, 0.2, rows)
    high = np.maximum(open_, close) + rng.random(rows) * 0.5
    low = np.minimum(open_, close) - rng.random(rows) * 0.5
    volume = rng.integers(100, 1000, rows)
    return pd.DataFrame(
        {
            "open": open_,
            "high": high,
            "low": low,
            "close": close,
            "volume": volume,
        },
        index=idx,
    )


def parse_kinds(value: str | None) -> List[str]:
    if not value:
        return ta.stateful_supported_kinds()
    return [v.strip().lower() for v in value.split(",") if v.strip()]


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=10_000)
    ap.add_argument("--seed", type=int, default=7)
    ap.add_argument("--kinds", type=str, default="", help="comma-separated kinds (default: all)")
    ap.add_argument("--runs", type=int, default=3, help="timed runs")
    args = ap.parse_args()

    df = make_ohlcv(args.rows, args.seed)
    kinds = parse_kinds(args.kinds)
    unknown = sorted(set(kinds) - set(KIND_KWARGS))
    if unknown:
        raise SystemExit(f"[X] unknown kinds: {', '.join(unknown)}")

    print(f"[i] rows: {args.rows}")
    print(f"[i] runs: {max(args.runs, 1)}")
    for kind in kinds:
        times = []
        for _ in range(max(args.runs, 1)):
            start = perf_counter()
            df.ta(kind, **KIND_KWARGS[kind])
            times.append(perf_counter() - start)

        avg = sum(times) / len(times)
        line = f"[i] {kind:<5} avg seconds: {avg:.3f}"
        if args.rows > 0:
            line += f"  (per 100k rows: {avg / args.rows * 100_000:.3f})"
        print(line)


if __name__ == "__main__":
    main()
