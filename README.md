# concdemos

A set of small command-line demos for teaching. Each one shows one idea and
prints what it computes. The largest is a simulation of how work units are
shared out among workers.

The package has no dependencies beyond the Python standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `concdemos-mapping`

Reads work-unit sizes (integers) from standard input, stopping at the first
token that is not an integer. Values that are not positive are skipped. It
then compares four ways of giving those units to workers:

- **block**: each worker gets one contiguous range of units; the first
  workers take one extra unit when the count does not divide evenly.
- **cyclic**: units are dealt out in turn, like cards.
- **block-cyclic**: whole blocks of a fixed size are dealt out in turn; units
  left over after the last whole block stay with worker 0.
- **dynamic**: each unit goes to the worker with the least work so far
  (the lowest-numbered worker on ties).

For each mapping it prints which worker gets each unit, how much work each
worker ends up with, the maximum load, the speedup (total work divided by the
maximum load) and the efficiency (speedup divided by the worker count).

```
echo "1 2 3 4 5 6 7 8 9 10" | concdemos-mapping 4 2
```

The arguments are the worker count and the block size for the block-cyclic
mapping. They are used only when both are given; otherwise the defaults of
4 workers and a block size of 2 apply. Both must be positive integers, or the
command prints an error and exits with status 1.

### `concdemos-xor`

Encrypts the word "audacious" with the key "untenable" using XOR. It then
decrypts it with the right key and with the wrong key "treasures", to show
that only the right key gives back the plaintext.

### `concdemos-bignum`

Shows `+`, `-`, `*`, floor division and modulo on arbitrary-precision
integers. The modulo result is never negative. It first uses -101 and 2, then
the first two decimal numbers read from standard input:

```
echo "123456789012345678901234567890 987654321" | concdemos-bignum
```

An invalid number, or a divisor of zero, is reported on standard error and
the command exits with status 1.

### `concdemos-limbs`

Multiplies the two factors of RSA-129 and checks that the result is RSA-129.
It prints each number with its count of 64-bit limbs and its bit length, then
its hexadecimal form split into limbs, most significant first.

### `concdemos-small-integers`

Reads integers from standard input and prints each one with its 64-bit limbs,
least significant limb first. A `0x` prefix means hexadecimal, `0b` binary
and a leading `0` octal; anything else is decimal. Reading stops at the first
token that is not a valid integer.

```
echo "42 18446744073709551616" | concdemos-small-integers
```

### `concdemos-perf`

Times adding the numbers from 0 up to (but not including) one million, first
with unbounded integers and then with signed 64-bit wrap-around arithmetic.

### `concdemos-rms-inner-product` and `concdemos-rms-transform`

Both compute a root mean square. Each takes one argument, a positive term
count (a `0x` prefix reads it as hexadecimal, a leading `0` as octal):

```
concdemos-rms-inner-product 5
concdemos-rms-transform 10
```

The inner-product version draws its terms uniformly at random between 10 and
100 and prints the terms, the sum of squares, the mean and the root mean
square. The transform version uses the terms 1, 2, …, n and prints them,
their squares and the root mean square. If the argument is missing, extra or
not positive, both print a usage message.

## Library use

The same pieces can be used from Python:

```python
from concdemos.mapping import (
    MappingSimulation, block_mapping, cyclic_mapping, dynamic_mapping, evaluate,
)
from concdemos.xor_cipher import xor_bytes
from concdemos.rms import root_mean_square
from concdemos.limbs import to_limbs

block_mapping(10, 4)              # [0, 0, 0, 1, 1, 1, 2, 2, 3, 3]
dynamic_mapping([5, 1, 1, 1], 2)  # [0, 1, 1, 1]
evaluate([5, 1, 1, 1], [0, 1, 1, 1], 2).speedup

simulation = MappingSimulation([1, 2, 3, 4, 5], worker_count=2, block_size=2)
simulation.calculate()
print(simulation.report())

xor_bytes(b"audacious", b"untenable")
root_mean_square([1, 2, 3])
to_limbs(2**64 + 1)               # [1, 1]
```

`xor_bytes` raises `ValueError` if the key is shorter than the data.

## What it does not do

The mapping command is a calculation only: it works out how the units would
be shared and what speedup would follow, but it starts no workers and runs
nothing in parallel. Likewise, the 64-bit sum in `concdemos-perf` is
wrap-around arithmetic done on Python integers, not native machine integers,
so its timing compares two Python loops.