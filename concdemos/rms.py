"""Root mean square of random terms and of the sequence 1..n."""

from __future__ import annotations

import math
import random
import re
import sys
from typing import Sequence

USAGE = "Usage: ./rms term_count\nwhere term_count > 0"
DEFAULT_LOWER = 10.0
DEFAULT_UPPER = 100.0

_LEADING_INTEGER = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


def _leading_integer(text: str) -> int:
    """Read the integer prefix of ``text`` with C-style base detection; 0 if none."""
    match = _LEADING_INTEGER.match(text)
    if match is None:
        return 0
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    return -value if sign == "-" else value


def parse_term_count(argv: Sequence[str]) -> int:
    """Return the positive term count given as the only argument."""
    if len(argv) != 1:
        raise ValueError(USAGE)
    count = _leading_integer(argv[0])
    if count <= 0:
        raise ValueError(USAGE)
    return count


def root_mean_square(terms: Sequence[float]) -> float:
    """Square root of the mean of the squared terms."""
    if not terms:
        raise ValueError("at least one term is required")
    return math.sqrt(sum(term * term for term in terms) / len(terms))


def random_terms(
    count: int,
    lower: float = DEFAULT_LOWER,
    upper: float = DEFAULT_UPPER,
    rng: random.Random | None = None,
) -> list[float]:
    """Draw ``count`` uniformly distributed terms between ``lower`` and ``upper``."""
    generator = rng if rng is not None else random.Random()
    return [generator.uniform(lower, upper) for _ in range(count)]


def inner_product_report(terms: Sequence[float]) -> str:
    """Report the sequence, its sum of squares, their mean and the root mean square."""
    if not terms:
        raise ValueError("at least one term is required")
    square = sum(term * term for term in terms)
    mean = square / len(terms)
    lines = ["Sequence:"]
    lines.extend(f"{term:.20g}" for term in terms)
    lines += [
        "Square:",
        f"{square:.20g}",
        "Mean:",
        f"{mean:.20g}",
        "Root mean square:",
        f"{math.sqrt(mean):.20g}",
    ]
    return "\n".join(lines) + "\n"


def transform_report(term_count: int) -> str:
    """Report the terms 1..n, their squares and their root mean square."""
    if term_count <= 0:
        raise ValueError(USAGE)
    terms = range(1, term_count + 1)
    squares = [term * term for term in terms]
    result = math.sqrt(sum(squares) / term_count)
    return (
        "Terms: " + "".join(f"{term} " for term in terms) + "\n"
        + "Squared terms: " + "".join(f"{square} " for square in squares) + "\n"
        + f"Root mean square: {result:.19g}\n"
    )


def _arguments(argv: list[str] | None) -> list[str]:
    return sys.argv[1:] if argv is None else argv


def inner_product_main(argv: list[str] | None = None) -> int:
    """Print the report for random terms, or the usage text."""
    try:
        count = parse_term_count(_arguments(argv))
    except ValueError:
        print(USAGE)
        return 0
    sys.stdout.write(inner_product_report(random_terms(count)))
    return 0


def transform_main(argv: list[str] | None = None) -> int:
    """Print the report for 1..n, or the usage text."""
    try:
        count = parse_term_count(_arguments(argv))
    except ValueError:
        print(USAGE)
        return 0
    sys.stdout.write(transform_report(count))
    return 0


if __name__ == "__main__":
    sys.exit(transform_main())