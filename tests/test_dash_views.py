from __future__ import annotations

import dash

from linear_explorer.dash_views import (
    classification_style,
    create_app,
    dispatch,
    log_preview,
    render_outputs,
    table_body,
)


def _collect_ids(component, found=None):
    found = set() if found is None else found
    cid = getattr(component, "id", None)
    if cid is not None:
        found.add(cid)
    children = getattr(component, "children", None)
    if isinstance(children, (list, tuple)):
        for child in children:
            _collect_ids(child, found)
    elif children is not None and not isinstance(children, (str, int, float)):
        _collect_ids(children, found)
    return found


def test_layout_exposes_every_control(controller) -> None:
    app = create_app(controller)
    assert isinstance(app, dash.Dash)
    ids = _collect_ids(app.layout)
    for expected in (
        "slider-a",
        "slider-b",
        "btn-example-1",
        "btn-example-2",
        "btn-reset",
        "x-input",
        "btn-calc",
        "btn-visualize",
        "btn-clear-table",
        "points-table-body",
        "graph-main",
        "function-root",
    ):
        assert expected in ids


def test_dispatch_routes_buttons(controller) -> None:
    dispatch(controller, "btn-example-1")
    assert controller.state.model.coefficients() == (2.0, 1.0)
    dispatch(controller, "btn-calc", x_value="3")
    assert controller.rows()[0] == ("3.00", "7.00")
    dispatch(controller, "x-input", x_value="0")
    assert controller.rows()[0] == ("0.00", "1.00")
    dispatch(controller, "btn-visualize")
    assert len(controller.state.scene.point_markers()) == 3
    dispatch(controller, "slider-a", a_value=-1)
    assert controller.state.scene.point_markers() == ()
    dispatch(controller, "btn-clear-table")
    assert controller.rows() == []


def test_dispatch_without_trigger_changes_nothing(controller) -> None:
    before = controller.panel()
    dispatch(controller, None, a_value=9, b_value=9)
    dispatch(controller, "unknown-button")
    assert controller.panel() == before


def test_render_outputs_shape(controller) -> None:
    outputs = render_outputs(controller)
    assert len(outputs) == 16
    assert outputs[3] == "f(x) = 2.0x - 1.0"
    assert outputs[7] == "x = 0.50"
    assert outputs[11:13] == (2.0, -1.0)


def test_table_body_rows() -> None:
    rows = table_body([("1.00", "3.00"), ("2.00", "5.00")])
    assert len(rows) == 2
    assert rows[0].children[0].children == "1.00"


def test_classification_style_tone() -> None:
    assert classification_style("increasing")["color"] == "#16a34a"
    assert classification_style("bogus")["color"] == "#6b7280"


def test_log_preview_lists_newest_first(controller) -> None:
    controller.probe("5")
    text = log_preview(controller)
    lines = text.splitlines()
    assert lines[0] == "Recent activity:"
    assert lines[1] == "- probe x=5.0 -> y=9.0"
