#!/usr/bin/env python3
"""
Small driver for the Natural type.

Subcommands:
- `factorial N`: print N! computed with limb multiplication.
- `triangular N`: sum 1..N-1 with in-place `add_mut` / `inc`.
- `bench`: time factorials with `time.perf_counter`.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.core import Natural, NaturalRange


def factorial(n: Natural) -> Natural:
    acc = Natural.one()
    for k in NaturalRange(Natural.one(), n + 1):
        acc = acc * k
    return acc


def triangular(bound: Natural) -> Natural:
    acc = Natural.zero()
    n = Natural.one()
    while n < bound:
        acc.add_mut(n)
        n.inc()
    return acc


def _cmd_factorial(args: argparse.Namespace) -> int:
    print(f"{args.n}!: {factorial(Natural.from_string(args.n))}")
    return 0


def _cmd_triangular(args: argparse.Namespace) -> int:
    print(f"sum(1..{args.n}-1): {triangular(Natural.from_string(args.n))}")
    return 0


def _cmd_bench(args: argparse.Namespace) -> int:
    n = Natural.from_u64(args.n)
    timings: List[float] = []
    for _ in range(args.repeat):
        start = time.perf_counter()
        factorial(n)
        timings.append(time.perf_counter() - start)
    best = min(timings)
    mean = sum(timings) / len(timings)
    print(f"[bench] {args.n}! x{args.repeat}: best={best:.6f}s mean={mean:.6f}s")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    p.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG shows division corrections)")
    sub = p.add_subparsers(dest="command", required=True)

    fact = sub.add_parser("factorial", help="Print N!")
    fact.add_argument("n", help="Decimal N")
    fact.set_defaults(func=_cmd_factorial)

    tri = sub.add_parser("triangular", help="Print 1 + 2 + ... + (N-1)")
    tri.add_argument("n", help="Decimal N")
    tri.set_defaults(func=_cmd_triangular)

    bench = sub.add_parser("bench", help="Time factorial computation")
    bench.add_argument("--n", type=int, default=20, help="Factorial argument (default 20)")
    bench.add_argument("--repeat", type=int, default=1000, help="Iterations (default 1000)")
    bench.set_defaults(func=_cmd_bench)

    args = p.parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))
    if args.command == "bench" and args.repeat <= 0:
        p.error("--repeat must be positive")
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
