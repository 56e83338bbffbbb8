from __future__ import annotations

import logging

import plotly.graph_objects as go

from linear_explorer.function_model import FunctionModel
from linear_explorer.graph_engine import derive
from linear_explorer.scene import SceneProjection


def _scene(a: float = 2.0, b: float = -1.0) -> SceneProjection:
    return SceneProjection(derive(FunctionModel(a, b), 10), extent=10)


def _trace(scene: SceneProjection, name: str):
    matches = [t for t in scene.figure.data if t.name == name]
    assert len(matches) == 1
    return matches[0]


def test_initial_figure_holds_line_and_intercepts() -> None:
    scene = _scene(2, 1)
    line = _trace(scene, "f(x)")
    assert tuple(line.x) == (-10, 10)
    assert tuple(line.y) == (-19.0, 21.0)
    assert tuple(_trace(scene, "y-intercept").y) == (1.0,)
    assert tuple(_trace(scene, "x-intercept").x) == (-0.5,)
    assert isinstance(scene.present(), go.Figure)


def test_apply_geometry_updates_in_place() -> None:
    scene = _scene()
    before = len(scene.figure.data)
    line = _trace(scene, "f(x)")
    scene.apply_geometry(derive(FunctionModel(0, 3), 10))
    assert len(scene.figure.data) == before
    assert _trace(scene, "f(x)") is line
    assert tuple(line.y) == (3.0, 3.0)
    assert _trace(scene, "x-intercept").visible is False
    assert _trace(scene, "y-intercept").visible is True


def test_x_intercept_visible_again_after_root_returns() -> None:
    scene = _scene(0, 0)
    assert _trace(scene, "x-intercept").visible is False
    scene.apply_geometry(derive(FunctionModel(1, -2), 10))
    marker = _trace(scene, "x-intercept")
    assert marker.visible is True
    assert tuple(marker.x) == (2.0,)


def test_axis_labels_created_once() -> None:
    scene = _scene()
    x_labels = _trace(scene, "x-labels")
    assert len(x_labels.text) == 20
    scene.apply_geometry(derive(FunctionModel(5, 5), 10))
    assert _trace(scene, "x-labels") is x_labels


def test_show_points_replaces_markers() -> None:
    scene = _scene()
    fixed = len(scene.figure.data)
    assert scene.show_points([("1.00", "1.00"), ("2.00", "3.00")]) == 2
    assert len(scene.figure.data) == fixed + 2
    assert scene.point_markers() == ((1.0, 1.0, 0.0), (2.0, 3.0, 0.0))
    scene.show_points([("4.00", "7.00")])
    assert scene.point_markers() == ((4.0, 7.0, 0.0),)
    assert len(scene.figure.data) == fixed + 1


def test_show_points_skips_unparseable_rows(caplog) -> None:
    scene = _scene()
    with caplog.at_level(logging.DEBUG, logger="linear_explorer.scene"):
        shown = scene.show_points([("abc", "1"), ("1", ""), (), ("2", "5")])
    assert shown == 1
    assert scene.point_markers() == ((2.0, 5.0, 0.0),)
    assert "skipping unplottable row" in caplog.text


def test_clear_point_markers_is_idempotent() -> None:
    scene = _scene()
    fixed = len(scene.figure.data)
    scene.clear_point_markers()
    scene.show_points([("1", "1")])
    scene.clear_point_markers()
    scene.clear_point_markers()
    assert scene.point_markers() == ()
    assert len(scene.figure.data) == fixed
