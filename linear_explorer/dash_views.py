"""Dash layout and callbacks for the linear function explorer."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import dash
from dash import Input, Output, State, dcc, html

from . import config
from .controller import InteractionController, TextPanel
from .event_log import format_preview_message

logger = logging.getLogger(__name__)

_LOG_PREVIEW_COUNT = 6

_EXAMPLE_BUTTONS = {
    "btn-example-1": "example-1",
    "btn-example-2": "example-2",
    "btn-reset": "reset",
}

_CARD_STYLE: Dict[str, Any] = {
    "backgroundColor": "#ffffff",
    "borderRadius": "12px",
    "padding": "16px",
    "boxShadow": "0 2px 6px rgba(0,0,0,0.08)",
    "marginBottom": "16px",
}

_BUTTON_STYLE: Dict[str, Any] = {
    "padding": "8px 14px",
    "marginRight": "8px",
    "marginTop": "8px",
    "fontWeight": 600,
    "borderRadius": "8px",
}


def _param_control_row(param: str, label: str, value: float) -> html.Div:
    cfg = config.PARAM_BOUNDS[param]
    slider_titles = {
        "a": "Drag to change a (slope). a > 0 rises, a < 0 falls, a = 0 is constant.",
        "b": "Drag to change b (where the line crosses the y axis).",
    }
    marks = {float(v): str(v) for v in range(int(cfg["min"]), int(cfg["max"]) + 1, 5)}
    return html.Div(
        [
            html.Label(
                [label, ": ", html.Span(id=f"{param}-value", style={"fontFamily": "monospace"})],
                htmlFor=f"slider-{param}",
                style={"fontWeight": 600},
            ),
            html.Div(
                dcc.Slider(
                    id=f"slider-{param}",
                    min=cfg["min"],
                    max=cfg["max"],
                    step=cfg["step"],
                    value=value,
                    marks=marks,
                    updatemode="drag",
                    tooltip={"placement": "bottom", "always_visible": False},
                ),
                title=slider_titles[param],
                style={"marginTop": "8px"},
            ),
        ],
        style={"marginBottom": "20px"},
    )


def table_body(rows: Sequence[Tuple[str, str]]) -> List[html.Tr]:
    return [
        html.Tr(
            [
                html.Td(x_text, style={"padding": "6px 12px", "fontWeight": 500}),
                html.Td(y_text, style={"padding": "6px 12px"}),
            ],
            style={"borderBottom": "1px solid #e5e7eb"},
        )
        for x_text, y_text in rows
    ]


def classification_style(kind: str) -> Dict[str, Any]:
    return {"fontWeight": 700, "color": config.CLASSIFICATION_TONES.get(kind, "#6b7280")}


def log_preview(controller: InteractionController) -> str:
    entries = controller.events.recent(_LOG_PREVIEW_COUNT)
    if not entries:
        return "Recent activity will appear here."
    lines = [f"- {format_preview_message(rec)}" for rec in reversed(entries)]
    return "\n".join(["Recent activity:", *lines])


def dispatch(
    controller: InteractionController,
    trigger_id: Optional[str],
    *,
    a_value: Any = None,
    b_value: Any = None,
    x_value: Any = None,
) -> None:
    """Route one Dash trigger to the matching controller intent."""
    if trigger_id == "slider-a":
        controller.set_coefficient("a", a_value)
    elif trigger_id == "slider-b":
        controller.set_coefficient("b", b_value)
    elif trigger_id in _EXAMPLE_BUTTONS:
        controller.load_example(_EXAMPLE_BUTTONS[trigger_id])
    elif trigger_id in ("btn-calc", "x-input"):
        controller.probe(x_value)
    elif trigger_id == "btn-visualize":
        controller.visualize_points()
    elif trigger_id == "btn-clear-table":
        controller.clear_table()
    elif trigger_id is not None:
        logger.debug("ignoring unknown trigger %s", trigger_id)


def render_outputs(controller: InteractionController) -> Tuple[Any, ...]:
    panel: TextPanel = controller.panel()
    a, b = controller.state.model.coefficients()
    return (
        controller.figure(),
        panel.a_text,
        panel.b_text,
        panel.equation,
        panel.classification,
        classification_style(panel.classification_kind),
        panel.y_intercept,
        panel.x_intercept,
        panel.probe_result,
        table_body(panel.rows),
        panel.probe_input,
        a,
        b,
        panel.hint,
        panel.notice,
        log_preview(controller),
    )


def _info_row(label: str, value_id: str, **value_kwargs: Any) -> html.Div:
    return html.Div(
        [html.Span(f"{label} ", style={"color": "#4b5563"}), html.Span(id=value_id, **value_kwargs)],
        style={"marginBottom": "6px"},
    )


def serve_layout(controller: InteractionController) -> html.Div:
    a, b = controller.state.model.coefficients()

    controls_column = html.Div(
        [
            html.Div(
                [
                    html.H2("Coefficients"),
                    _param_control_row("a", "Slope a", a),
                    _param_control_row("b", "Intercept b", b),
                    html.Div(
                        [
                            html.Button("Example 1", id="btn-example-1", n_clicks=0, style=_BUTTON_STYLE),
                            html.Button("Example 2", id="btn-example-2", n_clicks=0, style=_BUTTON_STYLE),
                            html.Button("Reset", id="btn-reset", n_clicks=0, style=_BUTTON_STYLE),
                        ]
                    ),
                    html.Div(id="coefficient-notice", role="status", style={"color": "#b91c1c", "minHeight": "1.2em"}),
                ],
                style=_CARD_STYLE,
            ),
            html.Div(
                [
                    html.H2("Compute a point"),
                    html.Div(
                        [
                            dcc.Input(
                                id="x-input",
                                type="text",
                                placeholder="x value",
                                debounce=True,
                                n_submit=0,
                                style={"width": "120px", "height": "36px", "marginRight": "8px"},
                            ),
                            html.Button("Calculate f(x)", id="btn-calc", n_clicks=0, style=_BUTTON_STYLE),
                        ],
                        style={"display": "flex", "alignItems": "center"},
                    ),
                    html.Div(id="point-result", role="status", style={"marginTop": "8px", "fontFamily": "monospace"}),
                    html.Table(
                        [
                            html.Thead(html.Tr([html.Th("x"), html.Th("f(x)")])),
                            html.Tbody(id="points-table-body"),
                        ],
                        style={"width": "100%", "marginTop": "12px", "borderCollapse": "collapse"},
                    ),
                    html.Div(
                        [
                            html.Button("Visualize points", id="btn-visualize", n_clicks=0, style=_BUTTON_STYLE),
                            html.Button("Clear table", id="btn-clear-table", n_clicks=0, style=_BUTTON_STYLE),
                        ]
                    ),
                ],
                style=_CARD_STYLE,
            ),
        ],
        style={"flex": "1", "minWidth": "300px"},
    )

    graph_column = html.Div(
        [
            dcc.Graph(id="graph-main", figure=controller.figure(), config={"displaylogo": False}),
            html.Div(
                [
                    html.H2("Function"),
                    _info_row("Equation:", "function-equation", style={"fontFamily": "monospace"}),
                    _info_row("Type:", "function-type"),
                    _info_row("y-intercept:", "y-intercept"),
                    _info_row("Root:", "function-root"),
                    html.Div(id="verbal-hint", role="status", style={"color": "#444444", "minHeight": "1.5em"}),
                ],
                style=_CARD_STYLE,
            ),
            dcc.Markdown(log_preview(controller), id="log-display", style={"fontSize": "0.9rem"}),
            html.Div(
                [
                    html.Button("Download JSONL", id="btn-download-jsonl", n_clicks=0),
                    html.Button("Download CSV", id="btn-download-csv", n_clicks=0, style={"marginLeft": "8px"}),
                    dcc.Download(id="download-jsonl"),
                    dcc.Download(id="download-csv"),
                ],
                style={"marginTop": "16px"},
            ),
        ],
        style={"flex": "2", "minWidth": "0"},
    )

    return html.Div(
        [
            html.H1("Linear Function Explorer"),
            html.P("f(x) = a·x + b, drawn in 3D. Probe values of x and project them onto the scene."),
            html.Div([controls_column, graph_column], style={"display": "flex", "gap": "32px", "alignItems": "flex-start"}),
        ],
        style={"padding": "24px", "backgroundColor": "#f3f4f6", "fontFamily": "system-ui, sans-serif"},
    )


def register_callbacks(app: dash.Dash, controller: InteractionController) -> None:
    @app.callback(
        [
            Output("graph-main", "figure"),
            Output("a-value", "children"),
            Output("b-value", "children"),
            Output("function-equation", "children"),
            Output("function-type", "children"),
            Output("function-type", "style"),
            Output("y-intercept", "children"),
            Output("function-root", "children"),
            Output("point-result", "children"),
            Output("points-table-body", "children"),
            Output("x-input", "value"),
            Output("slider-a", "value"),
            Output("slider-b", "value"),
            Output("verbal-hint", "children"),
            Output("coefficient-notice", "children"),
            Output("log-display", "children"),
        ],
        [
            Input("slider-a", "value"),
            Input("slider-b", "value"),
            Input("btn-example-1", "n_clicks"),
            Input("btn-example-2", "n_clicks"),
            Input("btn-reset", "n_clicks"),
            Input("btn-calc", "n_clicks"),
            Input("x-input", "n_submit"),
            Input("btn-visualize", "n_clicks"),
            Input("btn-clear-table", "n_clicks"),
        ],
        State("x-input", "value"),
    )
    def _handle_intent(a_value, b_value, _ex1, _ex2, _reset, _calc, _submit, _visualize, _clear, x_value):
        dispatch(
            controller,
            dash.ctx.triggered_id,
            a_value=a_value,
            b_value=b_value,
            x_value=x_value,
        )
        return render_outputs(controller)

    @app.callback(
        Output("download-jsonl", "data"),
        Input("btn-download-jsonl", "n_clicks"),
        prevent_initial_call=True,
    )
    def _handle_download_jsonl(n_clicks):
        if not n_clicks:
            return dash.no_update
        controller.events.write("export", source="button", export_type="jsonl")
        content = controller.events.to_jsonl()
        filename = f"session_{controller.events.session_id}.jsonl"
        return dcc.send_string(content, filename=filename)

    @app.callback(
        Output("download-csv", "data"),
        Input("btn-download-csv", "n_clicks"),
        prevent_initial_call=True,
    )
    def _handle_download_csv(n_clicks):
        if not n_clicks:
            return dash.no_update
        controller.events.write("export", source="button", export_type="csv")
        content = controller.events.to_csv()
        filename = f"session_{controller.events.session_id}.csv"
        return dcc.send_string(content, filename=filename)


def create_app(controller: Optional[InteractionController] = None) -> dash.Dash:
    controller = controller if controller is not None else InteractionController.start()
    app = dash.Dash(__name__, title="Linear Function Explorer")
    app.layout = serve_layout(controller)
    register_callbacks(app, controller)
    return app
