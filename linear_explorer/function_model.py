from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from . import config

logger = logging.getLogger(__name__)


class Classification(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    CONSTANT = "constant"


class RootKind(str, Enum):
    ROOT = "root"
    EVERY_POINT = "every_point"
    NONE = "none"


@dataclass(frozen=True)
class XIntercept:
    """Where f crosses the x axis; ``value`` is set only for ``RootKind.ROOT``."""

    kind: RootKind
    value: Optional[float] = None

    @property
    def has_single_root(self) -> bool:
        return self.kind is RootKind.ROOT


class FunctionModel:
    """The affine function f(x) = a*x + b."""

    def __init__(self, a: float = config.DEFAULT_PARAMS["a"], b: float = config.DEFAULT_PARAMS["b"]) -> None:
        self.a = float(a)
        self.b = float(b)

    def __repr__(self) -> str:
        return f"FunctionModel(a={self.a!r}, b={self.b!r})"

    def set_coefficients(self, a: float, b: float) -> None:
        self.a = float(a)
        self.b = float(b)
        logger.debug("coefficients set to a=%s b=%s", self.a, self.b)

    def set_coefficient(self, name: str, value: float) -> None:
        if name == "a":
            self.set_coefficients(value, self.b)
        elif name == "b":
            self.set_coefficients(self.a, value)
        else:
            raise KeyError(name)

    def coefficients(self) -> Tuple[float, float]:
        return self.a, self.b

    def evaluate(self, x: float) -> float:
        return self.a * x + self.b

    def classify(self) -> Classification:
        if self.a > 0:
            return Classification.INCREASING
        if self.a < 0:
            return Classification.DECREASING
        return Classification.CONSTANT

    def y_intercept(self) -> float:
        return self.b

    def x_intercept(self) -> XIntercept:
        if self.a == 0:
            if self.b == 0:
                return XIntercept(RootKind.EVERY_POINT)
            return XIntercept(RootKind.NONE)
        root = -self.b / self.a
        if root == 0:
            root = 0.0
        return XIntercept(RootKind.ROOT, root)
