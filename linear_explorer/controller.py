"""Turns user actions into model mutations and refreshed projections.

All mutable state lives in one :class:`AppState`. Each public method of
:class:`InteractionController` is one user intent; the text panel and the
figure are read back from the state afterwards (``panel()`` / ``figure()``).

Coefficient changes (slider, example, reset) redraw the geometry and drop the
displayed point markers, but keep the points table. Probing adds to the table
and never touches the markers; markers only appear on ``visualize_points``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

import plotly.graph_objects as go

from . import config
from .event_log import EventLog
from .function_model import FunctionModel
from .graph_engine import GeometrySnapshot, derive
from .point_history import PointHistory, PointRecord
from .scene import SceneProjection
from .validation import InvalidInput, normalize_param_value
from .verbal_descriptions import (
    classification_text,
    describe_a_change,
    describe_b_change,
    equation_text,
    format_coefficient,
    x_intercept_text,
    y_intercept_text,
)

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    model: FunctionModel
    history: PointHistory
    scene: SceneProjection
    extent: float = config.LINE_EXTENT
    probe_result: str = ""
    probe_input: str = ""
    hint: str = ""
    notice: str = ""

    @classmethod
    def create(cls, *, extent: float = config.LINE_EXTENT) -> "AppState":
        model = FunctionModel(config.DEFAULT_PARAMS["a"], config.DEFAULT_PARAMS["b"])
        scene = SceneProjection(derive(model, extent), extent=extent)
        return cls(model=model, history=PointHistory(), scene=scene, extent=extent)


@dataclass(frozen=True)
class TextPanel:
    a_text: str
    b_text: str
    equation: str
    classification: str
    classification_kind: str
    y_intercept: str
    x_intercept: str
    probe_result: str
    probe_input: str
    rows: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
    hint: str = ""
    notice: str = ""


class InteractionController:
    def __init__(self, state: Optional[AppState] = None, *, event_log: Optional[EventLog] = None) -> None:
        self.state = state if state is not None else AppState.create()
        self.events = event_log if event_log is not None else EventLog()

    @classmethod
    def start(cls, *, extent: float = config.LINE_EXTENT, event_log: Optional[EventLog] = None) -> "InteractionController":
        """Build a controller at default coefficients with the seed probe in the table."""
        controller = cls(AppState.create(extent=extent), event_log=event_log)
        controller.initialize()
        return controller

    def initialize(self) -> None:
        a, b = self.state.model.coefficients()
        self.events.write("init", a=a, b=b)
        self.state.probe_input = config.INITIAL_PROBE_X
        self.probe(config.INITIAL_PROBE_X, source="init")

    # -- coefficient changes -------------------------------------------------

    def _refresh_function(self) -> GeometrySnapshot:
        snapshot = derive(self.state.model, self.state.extent)
        self.state.scene.apply_geometry(snapshot)
        self.state.scene.clear_point_markers()
        return snapshot

    def set_coefficient(self, name: str, raw: Any, *, source: str = "slider") -> bool:
        """Apply one slider value. Returns False when the value was rejected."""
        model = self.state.model
        try:
            value = normalize_param_value(name, raw)
        except InvalidInput as exc:
            self.state.notice = exc.message
            logger.warning("rejected %s=%r from %s", name, raw, source)
            return False
        old = getattr(model, name)
        self.state.notice = ""
        model.set_coefficient(name, value)
        self._refresh_function()
        if name == "a":
            self.state.hint = describe_a_change(old, value)
        else:
            self.state.hint = describe_b_change(old, value)
        a, b = model.coefficients()
        self.events.write(
            "param_change",
            source=source,
            param_name=name,
            old_value=old,
            new_value=value,
            a=a,
            b=b,
        )
        return True

    def set_coefficients(self, a_raw: Any, b_raw: Any, *, source: str = "slider") -> bool:
        try:
            a = normalize_param_value("a", a_raw)
            b = normalize_param_value("b", b_raw)
        except InvalidInput as exc:
            self.state.notice = exc.message
            logger.warning("rejected coefficients a=%r b=%r from %s", a_raw, b_raw, source)
            return False
        self.state.notice = ""
        self.state.hint = ""
        self.state.model.set_coefficients(a, b)
        self._refresh_function()
        return True

    def load_example(self, key: str) -> None:
        a, b = config.EXAMPLES[key]
        self.set_coefficients(a, b, source="button")
        logger.info("loaded preset %s: a=%s b=%s", key, a, b)
        self.events.write("example_load", source="button", param_name=key, a=a, b=b)

    def reset(self) -> None:
        self.load_example("reset")

    # -- points --------------------------------------------------------------

    def probe(self, raw: Any, *, source: str = "input") -> Optional[PointRecord]:
        try:
            rec = self.state.history.record(raw, self.state.model)
        except InvalidInput as exc:
            self.state.probe_result = exc.message
            self.state.probe_input = "" if raw is None else str(raw)
            logger.warning("rejected probe input %r", raw)
            self.events.write("probe_rejected", source=source, new_value=raw, message=exc.message)
            return None
        self.state.probe_result = rec.display
        self.state.probe_input = ""
        a, b = self.state.model.coefficients()
        self.events.write("probe", source=source, a=a, b=b, x=rec.x, y=rec.y)
        return rec

    def visualize_points(self) -> int:
        # markers are read back from the table text, as displayed
        shown = self.state.scene.show_points(self.state.history.rows())
        self.events.write("visualize", source="button", new_value=shown)
        return shown

    def clear_table(self) -> None:
        self.state.history.clear()
        self.events.write("clear_table", source="button")

    # -- projections ---------------------------------------------------------

    def geometry(self) -> GeometrySnapshot:
        return derive(self.state.model, self.state.extent)

    def rows(self) -> List[Tuple[str, str]]:
        return self.state.history.rows()

    def figure(self) -> go.Figure:
        return self.state.scene.present()

    def panel(self) -> TextPanel:
        model = self.state.model
        a, b = model.coefficients()
        kind = model.classify()
        return TextPanel(
            a_text=format_coefficient(a),
            b_text=format_coefficient(b),
            equation=equation_text(a, b),
            classification=classification_text(kind),
            classification_kind=kind.value,
            y_intercept=y_intercept_text(model.y_intercept()),
            x_intercept=x_intercept_text(model.x_intercept()),
            probe_result=self.state.probe_result,
            probe_input=self.state.probe_input,
            rows=tuple(self.rows()),
            hint=self.state.hint,
            notice=self.state.notice,
        )
