"""Compare block, cyclic, block-cyclic and dynamic mapping of work units to workers."""

from __future__ import annotations

import enum
import math
import re
import sys
from dataclasses import dataclass, field
from typing import Sequence, TextIO

DEFAULT_WORKER_COUNT = 4
DEFAULT_BLOCK_SIZE = 2

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


class MappingType(enum.Enum):
    """The mapping strategies, in the order they are reported."""

    BLOCK = "BLOCK MAPPING"
    CYCLIC = "CYCLIC MAPPING"
    BLOCK_CYCLIC = "BLOCK-CYCLIC MAPPING"
    DYNAMIC = "DYNAMIC MAPPING"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class MappingResult:
    """Outcome of one mapping: who processes each unit and how much each worker does."""

    units_workers: list[int]
    units_processed: list[int]
    maximum: int
    speedup: float
    efficiency: float


def block_start(unit_count: int, worker_count: int, worker_index: int) -> int:
    """Index of the first unit of ``worker_index``'s block under block mapping."""
    if worker_count <= 0:
        raise ValueError("worker count must be positive")
    quotient, remainder = divmod(unit_count, worker_count)
    return worker_index * quotient + min(worker_index, remainder)


def block_mapping(unit_count: int, worker_count: int) -> list[int]:
    """Give each worker one contiguous block; the first blocks take one extra unit."""
    assignment = [0] * unit_count
    for worker in range(worker_count):
        start = block_start(unit_count, worker_count, worker)
        stop = block_start(unit_count, worker_count, worker + 1)
        assignment[start:stop] = [worker] * (stop - start)
    return assignment


def cyclic_mapping(unit_count: int, worker_count: int) -> list[int]:
    """Deal the units to the workers one at a time, round robin."""
    if worker_count <= 0:
        raise ValueError("worker count must be positive")
    return [unit % worker_count for unit in range(unit_count)]


def block_cyclic_mapping(unit_count: int, worker_count: int, block_size: int) -> list[int]:
    """Deal whole blocks of ``block_size`` units round robin.

    Units left over after the last whole block stay with worker 0.
    """
    if worker_count <= 0:
        raise ValueError("worker count must be positive")
    if block_size <= 0:
        raise ValueError("block size must be positive")
    block_count = unit_count // block_size
    assignment = [0] * unit_count
    for block in range(block_count):
        start = block * block_size
        assignment[start:start + block_size] = [block % worker_count] * block_size
    return assignment


def dynamic_mapping(units: Sequence[int], worker_count: int) -> list[int]:
    """Give each unit in turn to the worker with the least work so far (lowest index on ties)."""
    if worker_count <= 0:
        raise ValueError("worker count must be positive")
    loads = [0] * worker_count
    assignment = []
    for unit in units:
        worker = min(range(worker_count), key=loads.__getitem__)
        assignment.append(worker)
        loads[worker] += unit
    return assignment


def evaluate(units: Sequence[int], assignment: Sequence[int], worker_count: int) -> MappingResult:
    """Compute per-worker load, the maximum load, speedup and efficiency of an assignment."""
    if len(assignment) != len(units):
        raise ValueError("assignment and units differ in length")
    processed = [0] * worker_count
    for unit, worker in zip(units, assignment):
        processed[worker] += unit
    serial_sum = sum(units)
    maximum = max(processed)
    if maximum:
        speedup = serial_sum / maximum
    else:
        speedup = math.nan if serial_sum == 0 else math.inf
    return MappingResult(
        units_workers=list(assignment),
        units_processed=processed,
        maximum=maximum,
        speedup=speedup,
        efficiency=speedup / worker_count,
    )


def _leading_positive(text: str) -> int | None:
    match = _LEADING_INTEGER.match(text)
    if match is None:
        return None
    value = int(match.group(1))
    return value if value > 0 else None


def parse_arguments(argv: Sequence[str]) -> tuple[int, int]:
    """Return (worker_count, block_size); defaults apply unless exactly two arguments are given."""
    if len(argv) != 2:
        return DEFAULT_WORKER_COUNT, DEFAULT_BLOCK_SIZE
    worker_count = _leading_positive(argv[0])
    if worker_count is None:
        raise ValueError("invalid worker count")
    block_size = _leading_positive(argv[1])
    if block_size is None:
        raise ValueError("invalid block size")
    return worker_count, block_size


def read_units(stream: TextIO) -> list[int]:
    """Read integers until the first non-integer; keep only the positive ones."""
    text = stream.read()
    units = []
    position = 0
    while (match := _LEADING_INTEGER.match(text, position)) is not None:
        value = int(match.group(1))
        if value > 0:
            units.append(value)
        position = match.end()
    return units


@dataclass
class MappingSimulation:
    """A set of work units distributed over workers with every mapping strategy."""

    units: list[int]
    worker_count: int = DEFAULT_WORKER_COUNT
    block_size: int = DEFAULT_BLOCK_SIZE
    results: dict[MappingType, MappingResult] = field(default_factory=dict)

    @property
    def serial_sum(self) -> int:
        return sum(self.units)

    def calculate(self) -> dict[MappingType, MappingResult]:
        """Evaluate every mapping and keep the results."""
        count = len(self.units)
        assignments = {
            MappingType.BLOCK: block_mapping(count, self.worker_count),
            MappingType.CYCLIC: cyclic_mapping(count, self.worker_count),
            MappingType.BLOCK_CYCLIC: block_cyclic_mapping(
                count, self.worker_count, self.block_size
            ),
            MappingType.DYNAMIC: dynamic_mapping(self.units, self.worker_count),
        }
        self.results = {
            kind: evaluate(self.units, assignment, self.worker_count)
            for kind, assignment in assignments.items()
        }
        return self.results

    def report(self) -> str:
        """Render the units and every mapping's results as text."""
        if not self.results:
            self.calculate()
        parts = [
            f"{len(self.units)} units\n",
            "".join(f"{unit} " for unit in self.units) + "\n",
            f"Serially processed units: {self.serial_sum}\n\n",
        ]
        for kind in MappingType:
            result = self.results[kind]
            parts += [
                f"{kind.label}\n",
                "Units-workers mapping\n",
                "".join(f"{worker} " for worker in result.units_workers) + "\n",
                "Units processed per worker\n",
                "".join(f"{load} " for load in result.units_processed) + "\n",
                f"Maximum:    {result.maximum}\n",
                f"Speedup:    {result.speedup:2.3f}\n",
                f"Efficiency: {result.efficiency:2.3f}\n",
                "\n",
            ]
        return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Read work units from stdin and print the mapping comparison."""
    arguments = sys.argv[1:] if argv is None else argv
    try:
        worker_count, block_size = parse_arguments(arguments)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    simulation = MappingSimulation(read_units(sys.stdin), worker_count, block_size)
    simulation.calculate()
    sys.stdout.write(simulation.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())