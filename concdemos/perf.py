"""Compare the cost of summing with unbounded and with 64-bit wrapping integers."""

from __future__ import annotations

import operator
import sys
import time
from typing import Callable

SUM_LIMIT = 1_000_000

_INT64_MIN = -(1 << 63)
_INT64_SPAN = 1 << 64


def _wrap_int64(value: int) -> int:
    return (value - _INT64_MIN) % _INT64_SPAN + _INT64_MIN


def timed_sum(limit: int, adder: Callable[[int, int], int]) -> tuple[int, float]:
    """Fold ``0 .. limit-1`` with ``adder`` starting at 0; return (total, seconds)."""
    total = 0
    start = time.perf_counter()
    for term in range(limit):
        total = adder(total, term)
    return total, time.perf_counter() - start


def sum_bigint(limit: int = SUM_LIMIT) -> tuple[int, float]:
    """Sum with unbounded integers."""
    return timed_sum(limit, operator.add)


def sum_int64(limit: int = SUM_LIMIT) -> tuple[int, float]:
    """Sum with signed 64-bit wrap-around arithmetic."""
    return timed_sum(limit, lambda total, term: _wrap_int64(total + term))


def main(argv: list[str] | None = None) -> int:
    """Print the time each summation takes."""
    _, duration = sum_bigint()
    print(f"Sum using bigint: {duration:f}s")
    _, duration = sum_int64()
    print(f"Sum using int64:  {duration:f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())