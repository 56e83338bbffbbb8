from __future__ import annotations

import dataclasses

import pytest

from linear_explorer.function_model import FunctionModel
from linear_explorer.point_history import PointHistory, PointRecord
from linear_explorer.validation import InvalidInput


def test_record_evaluates_at_call_time() -> None:
    history = PointHistory()
    rec = history.record("3", FunctionModel(2, 1))
    assert (rec.x, rec.y) == (3.0, 7.0)
    assert rec.row() == ("3.00", "7.00")
    assert rec.display == "f(3.00) = 7.00"


def test_newest_first() -> None:
    model = FunctionModel(1, 0)
    history = PointHistory()
    for x in (1, 2, 3):
        history.record(x, model)
    assert [rec.x for rec in history.all()] == [3.0, 2.0, 1.0]
    assert history.rows()[0] == ("3.00", "3.00")


def test_records_are_not_live_bindings() -> None:
    model = FunctionModel(2, 1)
    history = PointHistory()
    history.record(3, model)
    model.set_coefficients(-5, 9)
    assert history.all()[0].y == 7.0


def test_records_are_immutable() -> None:
    rec = PointRecord(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rec.y = 5.0


def test_invalid_x_leaves_history_unchanged() -> None:
    history = PointHistory()
    history.record(1, FunctionModel())
    with pytest.raises(InvalidInput):
        history.record("twelve", FunctionModel())
    assert len(history) == 1


def test_all_is_a_read_only_view() -> None:
    history = PointHistory()
    history.record(1, FunctionModel())
    view = history.all()
    assert isinstance(view, tuple)
    history.record(2, FunctionModel())
    assert len(view) == 1


def test_clear() -> None:
    history = PointHistory()
    history.record(1, FunctionModel())
    history.clear()
    assert len(history) == 0
    assert history.rows() == []
