"""Basic arbitrary-precision integer arithmetic on numbers read from standard input."""

from __future__ import annotations

import re
import sys

_DECIMAL = re.compile(r"-?[0-9]+")


def parse_decimal(text: str) -> int:
    """Parse a base-10 integer; embedded whitespace is ignored."""
    compact = "".join(text.split())
    if not _DECIMAL.fullmatch(compact):
        raise ValueError(f"invalid number: {text!r}")
    return int(compact)


def operations(num1: int, num2: int) -> list[tuple[str, int]]:
    """Return (operator, result) pairs for +, -, *, floor division and modulo.

    The modulo result is always non-negative, whatever the divisor's sign.
    """
    if num2 == 0:
        raise ZeroDivisionError("division by zero")
    return [
        ("+", num1 + num2),
        ("-", num1 - num2),
        ("*", num1 * num2),
        ("/", num1 // num2),
        ("mod", num1 % abs(num2)),
    ]


def format_operations(num1: int, num2: int) -> list[str]:
    """Format each operation as ``num1 op num2 == result``."""
    return [f"{num1} {op} {num2} == {result}" for op, result in operations(num1, num2)]


def _print_lines(lines: list[str]) -> None:
    for line in lines:
        print(line)


def main(argv: list[str] | None = None) -> int:
    """Show operations on fixed numbers, then on two numbers from stdin."""
    _print_lines(format_operations(-101, 2))
    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        return 0
    try:
        num1 = parse_decimal(tokens[0])
        num2 = parse_decimal(tokens[1])
    except ValueError:
        print("invalid number", file=sys.stderr)
        return 1
    try:
        _print_lines(format_operations(num1, num2))
    except ZeroDivisionError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())