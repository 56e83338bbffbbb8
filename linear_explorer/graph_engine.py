from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from . import config
from .function_model import FunctionModel

Point3 = Tuple[float, float, float]


@dataclass(frozen=True)
class LineSegment:
    start: Point3
    end: Point3


@dataclass(frozen=True)
class InterceptMarker:
    position: Point3
    visible: bool


@dataclass(frozen=True)
class TickLabel:
    text: str
    position: Point3
    axis: str


@dataclass(frozen=True)
class GeometrySnapshot:
    line: LineSegment
    y_intercept: InterceptMarker
    x_intercept: InterceptMarker
    tick_labels: Tuple[TickLabel, ...]


def integer_ticks(extent: float) -> List[int]:
    bound = int(extent)
    return [i for i in range(-bound, bound + 1) if i != 0]


def tick_labels(extent: float, *, offset: float = config.LABEL_OFFSET) -> Tuple[TickLabel, ...]:
    labels: List[TickLabel] = []
    for i in integer_ticks(extent):
        # x-axis numbers sit just below the axis, y-axis numbers just left of it
        labels.append(TickLabel(str(i), (float(i), -offset, 0.0), "x"))
        labels.append(TickLabel(str(i), (-offset, float(i), 0.0), "y"))
    return tuple(labels)


def line_segment(model: FunctionModel, extent: float) -> LineSegment:
    x1, x2 = -extent, extent
    return LineSegment(
        (x1, model.evaluate(x1), 0.0),
        (x2, model.evaluate(x2), 0.0),
    )


def derive(model: FunctionModel, extent: float = config.LINE_EXTENT) -> GeometrySnapshot:
    b = model.y_intercept()
    root = model.x_intercept()
    if root.has_single_root:
        x_marker = InterceptMarker((root.value, 0.0, 0.0), True)
    else:
        # no single crossing: keep the marker parked at the origin, hidden
        x_marker = InterceptMarker((0.0, 0.0, 0.0), False)
    return GeometrySnapshot(
        line=line_segment(model, extent),
        y_intercept=InterceptMarker((0.0, b, 0.0), True),
        x_intercept=x_marker,
        tick_labels=tick_labels(extent),
    )
