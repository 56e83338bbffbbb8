"""Text renderings of the model for the info panel and the points table."""

from __future__ import annotations

from typing import Optional

from . import config
from .function_model import Classification, RootKind, XIntercept

_CLASSIFICATION_LABELS = {
    Classification.INCREASING: "Increasing (a > 0)",
    Classification.DECREASING: "Decreasing (a < 0)",
    Classification.CONSTANT: "Constant (a = 0)",
}


def format_number(value: float, decimals: int) -> str:
    text = f"{value:.{decimals}f}"
    # "-0.00" reads as a sign error in the table
    if float(text) == 0:
        text = f"{0.0:.{decimals}f}"
    return text


def format_coefficient(value: float) -> str:
    return format_number(value, config.COEFFICIENT_DECIMALS)


def format_point_value(value: float) -> str:
    return format_number(value, config.POINT_DECIMALS)


def equation_text(a: float, b: float) -> str:
    sign = "-" if b < 0 else "+"
    return f"f(x) = {format_coefficient(a)}x {sign} {format_coefficient(abs(b))}"


def classification_text(kind: Classification) -> str:
    return _CLASSIFICATION_LABELS[kind]


def y_intercept_text(b: float) -> str:
    return f"(0, {format_coefficient(b)})"


def x_intercept_text(intercept: XIntercept) -> str:
    if intercept.kind is RootKind.EVERY_POINT:
        return "infinitely many roots"
    if intercept.kind is RootKind.NONE:
        return "no root"
    return f"x = {format_point_value(intercept.value)}"


def point_result_text(x: float, y: float) -> str:
    return f"f({format_point_value(x)}) = {format_point_value(y)}"


def describe_a_change(old: Optional[float], new: float) -> str:
    if new == 0:
        return "a = 0 flattens the line into a horizontal constant function."
    if old is None or old == new:
        return ""
    if old != 0 and (old > 0) != (new > 0):
        direction = "rising" if new > 0 else "falling"
        return f"The sign of a flipped: the line is now {direction}."
    trend = "steeper" if abs(new) > abs(old) else "flatter"
    return f"{'Increasing' if abs(new) > abs(old) else 'Decreasing'} |a| makes the line {trend}."


def describe_b_change(old: Optional[float], new: float) -> str:
    if old is None or old == new:
        return ""
    direction = "up" if new > old else "down"
    return f"Changing b shifts the line {direction}; it now crosses the y axis at {format_coefficient(new)}."
