from __future__ import annotations

import math

import pytest

from linear_explorer.validation import InvalidInput, normalize_param_value, parse_finite


@pytest.mark.parametrize("raw,expected", [("3", 3.0), (" -1.5 ", -1.5), (2, 2.0), (0.25, 0.25), ("1e2", 100.0)])
def test_parse_finite_accepts_numbers(raw, expected) -> None:
    assert parse_finite(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [None, "", "   ", "abc", "nan", "inf", float("nan"), math.inf, True, [1], 10**400, "1_000", "3abc"],
)
def test_parse_finite_rejects(raw) -> None:
    with pytest.raises(InvalidInput) as info:
        parse_finite(raw, field="x")
    assert info.value.field == "x"
    assert "valid number" in info.value.message


def test_invalid_input_is_a_value_error() -> None:
    assert issubclass(InvalidInput, ValueError)


def test_normalize_clamps_and_quantizes() -> None:
    assert normalize_param_value("a", 25) == 10.0
    assert normalize_param_value("b", -99) == -10.0
    assert normalize_param_value("a", "1.26") == 1.3
    assert normalize_param_value("b", -0.01) == 0.0


def test_normalize_rejects_garbage() -> None:
    with pytest.raises(InvalidInput) as info:
        normalize_param_value("a", "steep")
    assert info.value.field == "a"


def test_normalize_unknown_param() -> None:
    with pytest.raises(KeyError):
        normalize_param_value("c", 1)
