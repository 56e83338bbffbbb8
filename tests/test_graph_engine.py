from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from linear_explorer.function_model import FunctionModel
from linear_explorer.graph_engine import derive, integer_ticks

COEFFS = st.floats(min_value=-100, max_value=100, allow_nan=False, allow_infinity=False)
EXTENTS = st.integers(min_value=1, max_value=20)


@given(a=COEFFS, b=COEFFS, extent=EXTENTS)
def test_derive_is_deterministic(a: float, b: float, extent: int) -> None:
    model = FunctionModel(a, b)
    assert derive(model, extent) == derive(model, extent)


def test_line_endpoints_span_extent() -> None:
    snap = derive(FunctionModel(2, -1), 10)
    assert snap.line.start == (-10, -21.0, 0.0)
    assert snap.line.end == (10, 19.0, 0.0)


def test_y_intercept_always_visible() -> None:
    for a, b in [(2, 1), (0, 0), (0, 4), (-3, -2)]:
        snap = derive(FunctionModel(a, b), 10)
        assert snap.y_intercept.visible
        assert snap.y_intercept.position == (0.0, float(b), 0.0)


def test_x_intercept_visible_at_root() -> None:
    snap = derive(FunctionModel(2, 1), 10)
    assert snap.x_intercept.visible
    assert snap.x_intercept.position == (-0.5, 0.0, 0.0)


def test_x_intercept_hidden_when_every_point_is_root() -> None:
    assert not derive(FunctionModel(0, 0), 10).x_intercept.visible


def test_x_intercept_hidden_when_no_root() -> None:
    assert not derive(FunctionModel(0, -4), 10).x_intercept.visible


def test_tick_labels_skip_zero() -> None:
    snap = derive(FunctionModel(), 10)
    assert len(snap.tick_labels) == 40
    assert all(lbl.text != "0" for lbl in snap.tick_labels)
    x_labels = [lbl for lbl in snap.tick_labels if lbl.axis == "x"]
    y_labels = [lbl for lbl in snap.tick_labels if lbl.axis == "y"]
    assert len(x_labels) == len(y_labels) == 20
    assert x_labels[0].position == (-10.0, -0.3, 0.0)
    assert y_labels[0].position == (-0.3, -10.0, 0.0)


def test_integer_ticks() -> None:
    assert integer_ticks(2) == [-2, -1, 1, 2]


def test_labels_do_not_depend_on_coefficients() -> None:
    assert derive(FunctionModel(1, 1), 5).tick_labels == derive(FunctionModel(-4, 3), 5).tick_labels
