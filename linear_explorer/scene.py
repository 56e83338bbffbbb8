"""Plotly scene that displays the line, its intercepts and probed points.

The figure is built once; afterwards the always-present traces (line, both
intercept markers, axis labels) are updated in place. Probed-point markers are
appended after the fixed traces and removed as a block.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import plotly.graph_objects as go

from . import config
from .graph_engine import GeometrySnapshot, Point3, TickLabel
from .validation import InvalidInput, parse_finite

logger = logging.getLogger(__name__)


def _grid_lines(extent: float) -> Tuple[List[Optional[float]], List[Optional[float]], List[Optional[float]]]:
    xs: List[Optional[float]] = []
    ys: List[Optional[float]] = []
    zs: List[Optional[float]] = []
    bound = int(extent)
    for i in range(-bound, bound + 1):
        xs.extend([float(i), float(i), None])
        ys.extend([-extent, extent, None])
        zs.extend([0.0, 0.0, None])
        xs.extend([-extent, extent, None])
        ys.extend([float(i), float(i), None])
        zs.extend([0.0, 0.0, None])
    return xs, ys, zs


def _axis_trace(end: Point3, color: str, name: str) -> go.Scatter3d:
    return go.Scatter3d(
        x=[0.0, end[0]],
        y=[0.0, end[1]],
        z=[0.0, end[2]],
        mode="lines",
        line=dict(config.AXIS_LINE_STYLE, color=color),
        name=name,
        hoverinfo="skip",
        showlegend=False,
    )


def _label_trace(labels: Sequence[TickLabel], axis: str) -> go.Scatter3d:
    picked = [lbl for lbl in labels if lbl.axis == axis]
    return go.Scatter3d(
        x=[lbl.position[0] for lbl in picked],
        y=[lbl.position[1] for lbl in picked],
        z=[lbl.position[2] for lbl in picked],
        mode="text",
        text=[lbl.text for lbl in picked],
        textfont=dict(config.LABEL_FONT),
        name=f"{axis}-labels",
        hoverinfo="skip",
        showlegend=False,
    )


def _marker_trace(position: Point3, style: dict, name: str) -> go.Scatter3d:
    return go.Scatter3d(
        x=[position[0]],
        y=[position[1]],
        z=[position[2]],
        mode="markers",
        marker=dict(style),
        name=name,
        hovertemplate=name + "<br>x=%{x:.2f}<br>y=%{y:.2f}<extra></extra>",
        showlegend=False,
    )


class SceneProjection:
    """Owns the figure and the set of currently displayed point markers."""

    def __init__(self, snapshot: GeometrySnapshot, *, extent: float = config.LINE_EXTENT, uirevision: str = config.UI_BASE_TOKEN) -> None:
        self.extent = extent
        self.figure = self._build_figure(snapshot, uirevision)
        self._fixed_count = len(self.figure.data)
        self._markers: List[Point3] = []

    def _build_figure(self, snapshot: GeometrySnapshot, uirevision: str) -> go.Figure:
        extent = self.extent
        gx, gy, gz = _grid_lines(extent)
        fig = go.Figure(
            data=[
                go.Scatter3d(
                    x=gx,
                    y=gy,
                    z=gz,
                    mode="lines",
                    line=dict(color=config.SCENE_COLORS["grid"], width=1),
                    name="grid",
                    hoverinfo="skip",
                    showlegend=False,
                ),
                _axis_trace((extent, 0.0, 0.0), config.SCENE_COLORS["x_axis"], "x-axis"),
                _axis_trace((0.0, extent, 0.0), config.SCENE_COLORS["y_axis"], "y-axis"),
                _axis_trace((0.0, 0.0, extent), config.SCENE_COLORS["z_axis"], "z-axis"),
                _label_trace(snapshot.tick_labels, "x"),
                _label_trace(snapshot.tick_labels, "y"),
                go.Scatter3d(
                    x=[],
                    y=[],
                    z=[],
                    mode="lines",
                    line=dict(config.LINE_STYLE),
                    name="f(x)",
                    hoverinfo="skip",
                    showlegend=False,
                ),
                _marker_trace(snapshot.y_intercept.position, config.Y_INTERCEPT_MARKER_STYLE, "y-intercept"),
                _marker_trace(snapshot.x_intercept.position, config.X_INTERCEPT_MARKER_STYLE, "x-intercept"),
            ]
        )
        axis = dict(
            range=[-extent - 1, extent + 1],
            showbackground=False,
            showgrid=False,
            zeroline=False,
            color=config.SCENE_COLORS["label"],
        )
        fig.update_layout(
            height=config.FIGURE_HEIGHT,
            margin=dict(l=0, r=0, t=0, b=0),
            paper_bgcolor=config.SCENE_COLORS["background"],
            scene=dict(
                xaxis=dict(axis, title="x"),
                yaxis=dict(axis, title="y"),
                zaxis=dict(axis, title="z"),
                aspectmode="cube",
                bgcolor=config.SCENE_COLORS["background"],
            ),
            scene_camera=dict(eye=dict(x=0.0, y=0.0, z=1.6), up=dict(x=0.0, y=1.0, z=0.0)),
            showlegend=False,
            uirevision=uirevision,
        )
        self._index = {trace.name: i for i, trace in enumerate(fig.data)}
        self._apply_geometry_to(fig, snapshot)
        return fig

    @staticmethod
    def _set_position(trace: Any, position: Point3) -> None:
        trace.update(x=[position[0]], y=[position[1]], z=[position[2]])

    def _apply_geometry_to(self, fig: go.Figure, snapshot: GeometrySnapshot) -> None:
        line = fig.data[self._index["f(x)"]]
        start, end = snapshot.line.start, snapshot.line.end
        line.update(x=[start[0], end[0]], y=[start[1], end[1]], z=[start[2], end[2]])

        y_marker = fig.data[self._index["y-intercept"]]
        self._set_position(y_marker, snapshot.y_intercept.position)
        y_marker.visible = snapshot.y_intercept.visible

        x_marker = fig.data[self._index["x-intercept"]]
        self._set_position(x_marker, snapshot.x_intercept.position)
        x_marker.visible = snapshot.x_intercept.visible

    def apply_geometry(self, snapshot: GeometrySnapshot) -> None:
        self._apply_geometry_to(self.figure, snapshot)

    def clear_point_markers(self) -> None:
        if not self._markers:
            return
        self.figure.data = self.figure.data[: self._fixed_count]
        logger.debug("cleared %d point markers", len(self._markers))
        self._markers = []

    def show_points(self, rows: Iterable[Sequence[Any]]) -> int:
        """Replace the displayed markers with one marker per parseable (x, y) row."""
        self.clear_point_markers()
        for row in rows:
            try:
                x = parse_finite(row[0], field="x")
                y = parse_finite(row[1], field="y")
            except (InvalidInput, IndexError, TypeError) as exc:
                logger.debug("skipping unplottable row %r: %s", row, exc)
                continue
            position = (x, y, 0.0)
            self.figure.add_trace(_marker_trace(position, config.POINT_MARKER_STYLE, "point"))
            self._markers.append(position)
        return len(self._markers)

    def point_markers(self) -> Tuple[Point3, ...]:
        return tuple(self._markers)

    def present(self) -> go.Figure:
        return self.figure
