"""Inspect how large integers split into fixed-width machine limbs."""

from __future__ import annotations

import re
import sys

BITS_PER_LIMB = 64

# Factors of RSA-129 and RSA-129 itself.
RSA129_FACTOR1 = int(
    "3490529510847650949147849619903898133417764638493387843990820577"
)
RSA129_FACTOR2 = int(
    "32769132993266709549961988190834461413177642967992942539798288533"
)
RSA129 = int(
    "114381625757888867669235779976146612010218296721242362562561842935706935"
    "245733897830597123563958705058989075147599290026879543541"
)

_DIGITS = {
    2: re.compile(r"[01]+"),
    8: re.compile(r"[0-7]+"),
    10: re.compile(r"[0-9]+"),
    16: re.compile(r"[0-9a-fA-F]+"),
}


def to_limbs(value: int, bits_per_limb: int = BITS_PER_LIMB) -> list[int]:
    """Split the magnitude of ``value`` into limbs, least significant first."""
    if bits_per_limb <= 0:
        raise ValueError("bits_per_limb must be positive")
    magnitude = abs(value)
    mask = (1 << bits_per_limb) - 1
    limbs = []
    while magnitude:
        limbs.append(magnitude & mask)
        magnitude >>= bits_per_limb
    return limbs


def bit_length_in_base2(value: int) -> int:
    """Number of binary digits of ``value``'s magnitude; zero counts as one digit."""
    return max(abs(value).bit_length(), 1)


def parse_integer(text: str) -> int:
    """Parse an integer whose base follows from its prefix: 0x, 0b, 0 (octal) or decimal."""
    token = text.strip()
    negative = token.startswith("-")
    body = token[1:] if negative else token
    lowered = body.lower()
    if lowered.startswith("0x"):
        base, digits = 16, body[2:]
    elif lowered.startswith("0b"):
        base, digits = 2, body[2:]
    elif body.startswith("0") and len(body) > 1:
        base, digits = 8, body[1:]
    else:
        base, digits = 10, body
    if not _DIGITS[base].fullmatch(digits):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(digits, base)
    return -value if negative else value


def describe_small_integer(value: int, bits_per_limb: int = BITS_PER_LIMB) -> str:
    """Describe a number, its limb count and each limb's value."""
    limbs = to_limbs(value, bits_per_limb)
    lines = [f"number: {value}", f"size: {len(limbs)} limbs"]
    lines.extend(f"limb {index:3d}: {limb}" for index, limb in enumerate(limbs))
    return "\n".join(lines) + "\n"


def _summary(value: int, bits_per_limb: int) -> str:
    return f"({len(to_limbs(value, bits_per_limb))} limbs, {bit_length_in_base2(value)} bits)"


def multiplication_report(
    factor1: int, factor2: int, product: int, bits_per_limb: int = BITS_PER_LIMB
) -> str:
    """Report a verified multiplication and the limbs of each number in it."""
    if factor1 * factor2 != product:
        raise ValueError("error when multiplying large numbers")
    parts = [
        f"{bits_per_limb} bits per limb\n\n",
        f"{factor1}\n{_summary(factor1, bits_per_limb)}\n*\n",
        f"{factor2}\n{_summary(factor2, bits_per_limb)}\n==\n",
        f"{product}\n{_summary(product, bits_per_limb)}\n",
        "\n",
    ]
    for number in (factor1, factor2, product):
        limbs = to_limbs(number, bits_per_limb)
        limb_text = " | ".join(f"{limb:x}" for limb in reversed(limbs))
        parts.append(f"{number}\n==\n0x{number:x}\nlimbs:\n{limb_text}\n\n")
    return "".join(parts)


def limbs_main(argv: list[str] | None = None) -> int:
    """Print the limb report for the RSA-129 factorisation."""
    try:
        sys.stdout.write(multiplication_report(RSA129_FACTOR1, RSA129_FACTOR2, RSA129))
    except ValueError as error:
        print(error)
    return 0


def small_integers_main(argv: list[str] | None = None) -> int:
    """Describe each integer read from stdin, stopping at the first invalid one."""
    for token in sys.stdin.read().split():
        try:
            value = parse_integer(token)
        except ValueError:
            break
        sys.stdout.write(describe_small_integer(value))
    return 0


if __name__ == "__main__":
    sys.exit(limbs_main())