"""Small teaching demos: XOR cipher, big integers and limbs, summation timing, root mean square and work mapping."""

__version__ = "1.0.0"