"""Interactive explorer for first-degree functions f(x) = a*x + b."""

from __future__ import annotations

import logging

from .controller import AppState, InteractionController, TextPanel
from .function_model import Classification, FunctionModel, RootKind, XIntercept
from .graph_engine import GeometrySnapshot, derive
from .point_history import PointHistory, PointRecord
from .scene import SceneProjection
from .validation import InvalidInput

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AppState",
    "Classification",
    "FunctionModel",
    "GeometrySnapshot",
    "InteractionController",
    "InvalidInput",
    "PointHistory",
    "PointRecord",
    "RootKind",
    "SceneProjection",
    "TextPanel",
    "XIntercept",
    "derive",
]
