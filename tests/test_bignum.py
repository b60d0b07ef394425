import io

import pytest

from concdemos.bignum import format_operations, main, operations, parse_decimal

RSA129 = (
    "114381625757888867669235779976146612010218296721242362562561842935706935"
    "245733897830597123563958705058989075147599290026879543541"
)


def test_parse_negative():
    assert parse_decimal("-101") == -101


def test_parse_large_round_trip():
    assert str(parse_decimal(RSA129)) == RSA129


@pytest.mark.parametrize("text", ["12a", "", "-", "0x10", "1.5"])
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        parse_decimal(text)


@pytest.mark.parametrize("a,b", [(-101, 2), (7, 3), (-7, -3), (7, -3), (10**40 + 1, 97)])
def test_operation_invariants(a, b):
    results = dict(operations(a, b))
    assert results["+"] - b == a
    assert results["-"] + b == a
    assert results["*"] // b == a
    assert 0 <= results["mod"] < abs(b)
    assert (a - results["mod"]) % b == 0
    remainder = a - results["/"] * b
    assert abs(remainder) < abs(b)
    assert remainder == 0 or (remainder > 0) == (b > 0)


def test_operation_order():
    assert [op for op, _ in operations(5, 2)] == ["+", "-", "*", "/", "mod"]


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        operations(5, 0)


def test_format_matches_operations():
    lines = format_operations(-101, 2)
    expected = [f"-101 {op} 2 == {r}" for op, r in operations(-101, 2)]
    assert lines == expected


def test_main_with_two_numbers(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7 3\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == format_operations(-101, 2) + format_operations(7, 3)


def test_main_with_one_number(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == format_operations(-101, 2)


def test_main_invalid_number(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x 3\n"))
    assert main([]) == 1
    assert "invalid number" in capsys.readouterr().err