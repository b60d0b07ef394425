import io
import math
from collections import Counter

import pytest

from concdemos.mapping import (
    MappingResult,
    MappingSimulation,
    MappingType,
    block_cyclic_mapping,
    block_mapping,
    block_start,
    cyclic_mapping,
    dynamic_mapping,
    evaluate,
    main,
    parse_arguments,
    read_units,
)


def test_block_start_edges():
    assert block_start(10, 4, 0) == 0
    assert block_start(10, 4, 4) == 10


@pytest.mark.parametrize("units,workers", [(10, 4), (7, 3), (3, 5), (0, 2), (12, 4)])
def test_block_mapping_is_balanced_and_contiguous(units, workers):
    assignment = block_mapping(units, workers)
    assert len(assignment) == units
    assert assignment == sorted(assignment)
    counts = Counter(assignment)
    sizes = [counts.get(w, 0) for w in range(workers)]
    assert max(sizes, default=0) - min(sizes, default=0) <= 1
    assert sizes == sorted(sizes, reverse=True)


def test_cyclic_mapping_round_robin():
    assert cyclic_mapping(5, 2) == [0, 1, 0, 1, 0]


def test_cyclic_mapping_rejects_zero_workers():
    with pytest.raises(ValueError):
        cyclic_mapping(3, 0)


def test_block_cyclic_leftover_goes_to_worker_zero():
    assert block_cyclic_mapping(5, 4, 2) == [0, 0, 1, 1, 0]


def test_block_cyclic_blocks_are_uniform():
    assignment = block_cyclic_mapping(12, 3, 3)
    blocks = [assignment[i:i + 3] for i in range(0, 12, 3)]
    assert all(len(set(block)) == 1 for block in blocks)
    assert [block[0] for block in blocks][:3] == [0, 1, 2]


def test_block_cyclic_rejects_bad_block_size():
    with pytest.raises(ValueError):
        block_cyclic_mapping(4, 2, 0)


def test_dynamic_mapping_picks_least_loaded():
    assert dynamic_mapping([5, 1, 1, 1], 2) == [0, 1, 1, 1]


def test_dynamic_mapping_equal_units_matches_cyclic():
    assert dynamic_mapping([3] * 7, 3) == cyclic_mapping(7, 3)


def test_evaluate_invariants():
    units = [4, 8, 1, 9, 2, 7]
    result = evaluate(units, block_mapping(len(units), 3), 3)
    assert isinstance(result, MappingResult)
    assert sum(result.units_processed) == sum(units)
    assert result.maximum == max(result.units_processed)
    assert result.speedup * result.maximum == pytest.approx(sum(units))
    assert result.efficiency == pytest.approx(result.speedup / 3)


def test_evaluate_single_worker_has_speedup_one():
    result = evaluate([3, 5, 2], [0, 0, 0], 1)
    assert result.speedup == pytest.approx(1.0)
    assert result.efficiency == pytest.approx(1.0)


def test_evaluate_no_units_gives_nan():
    result = evaluate([], [], 4)
    assert result.maximum == 0
    assert list(result.units_processed) == [0, 0, 0, 0]
    assert math.isnan(result.speedup)
    assert math.isnan(result.efficiency)


def test_evaluate_length_mismatch():
    with pytest.raises(ValueError):
        evaluate([1, 2], [0], 2)


def test_parse_arguments_defaults():
    assert parse_arguments([]) == (4, 2)
    assert parse_arguments(["9"]) == (4, 2)


def test_parse_arguments_values():
    assert parse_arguments(["6", "3"]) == (6, 3)


@pytest.mark.parametrize(
    "argv,message",
    [(["0", "2"], "invalid worker count"), (["abc", "2"], "invalid worker count"),
     (["3", "-1"], "invalid block size")],
)
def test_parse_arguments_errors(argv, message):
    with pytest.raises(ValueError, match=message):
        parse_arguments(argv)


def test_read_units_keeps_positive_and_stops_at_text():
    assert read_units(io.StringIO("3 -1 0 7\n x 9")) == [3, 7]


def test_simulation_results_cover_all_types():
    simulation = MappingSimulation([1, 2, 3, 4, 5], worker_count=2, block_size=2)
    results = simulation.calculate()
    assert list(results) == list(MappingType)
    for result in results.values():
        assert sum(result.units_processed) == simulation.serial_sum


def test_report_layout():
    simulation = MappingSimulation([2, 2, 2, 2])
    text = simulation.report()
    lines = text.splitlines()
    assert lines[0] == "4 units"
    assert lines[2] == "Serially processed units: 8"
    labels = [line for line in lines if line.endswith("MAPPING")]
    assert labels == [kind.label for kind in MappingType]
    assert "BLOCK-CYCLIC MAPPING" in labels


def test_main_prints_report(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5 3 8 1"))
    assert main(["2", "1"]) == 0
    out = capsys.readouterr().out
    assert out == MappingSimulation([5, 3, 8, 1], 2, 1).report()


def test_main_invalid_arguments(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2"))
    assert main(["x", "2"]) == 1
    assert "invalid worker count" in capsys.readouterr().err