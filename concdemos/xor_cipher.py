"""XOR cipher demonstration: encrypt with one pad, decrypt with a right and a wrong one."""

from __future__ import annotations

import sys

DEFAULT_PLAINTEXT = "audacious"
MATCHING_PAD = "untenable"
MISMATCHED_PAD = "treasures"


def _as_bytes(value: str | bytes | bytearray) -> bytes:
    if isinstance(value, str):
        return value.encode("latin-1")
    return bytes(value)


def xor_bytes(data: str | bytes, key: str | bytes) -> bytes:
    """XOR every byte of ``data`` with the byte at the same position of ``key``.

    The key must be at least as long as the data; extra key bytes are unused.
    """
    data_bytes = _as_bytes(data)
    key_bytes = _as_bytes(key)
    if len(key_bytes) < len(data_bytes):
        raise ValueError("key is shorter than the data")
    return bytes(a ^ b for a, b in zip(data_bytes, key_bytes))


def demo_report(
    plaintext: str = DEFAULT_PLAINTEXT,
    right_key: str = MATCHING_PAD,
    wrong_key: str = MISMATCHED_PAD,
) -> str:
    """Encrypt ``plaintext`` and show decryption with the right and a wrong key."""
    ciphertext = xor_bytes(plaintext, right_key)
    right_decrypted = xor_bytes(ciphertext, right_key).decode("latin-1")
    wrong_decrypted = xor_bytes(ciphertext, wrong_key).decode("latin-1")
    lines = [
        f"plaintext = {plaintext}",
        f"right_key = {right_key}",
        f"right_decrypted = {right_decrypted}",
        f"wrong_key = {wrong_key}",
        f"wrong_decrypted = {wrong_decrypted}",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Print the demonstration report."""
    sys.stdout.write(demo_report())
    return 0


if __name__ == "__main__":
    sys.exit(main())