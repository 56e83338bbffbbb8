from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Sequence, Tuple

from .function_model import FunctionModel
from .validation import parse_finite
from .verbal_descriptions import format_point_value, point_result_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointRecord:
    """One probed (x, f(x)) pair, captured with the coefficients of its moment."""

    x: float
    y: float
    x_text: str = field(init=False)
    y_text: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "x_text", format_point_value(self.x))
        object.__setattr__(self, "y_text", format_point_value(self.y))

    @property
    def display(self) -> str:
        return point_result_text(self.x, self.y)

    def row(self) -> Tuple[str, str]:
        return self.x_text, self.y_text


class PointHistory:
    """Probed points, newest first.

    Records are never re-evaluated: a later coefficient change leaves them as
    they were captured. Only :meth:`clear` empties the collection.
    """

    def __init__(self) -> None:
        self._records: List[PointRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PointRecord]:
        return iter(self._records)

    def record(self, x: Any, model: FunctionModel) -> PointRecord:
        x_val = parse_finite(x, field="x")
        rec = PointRecord(x_val, model.evaluate(x_val))
        self._records.insert(0, rec)
        logger.debug("recorded %s (history size %d)", rec.display, len(self._records))
        return rec

    def all(self) -> Sequence[PointRecord]:
        return tuple(self._records)

    def rows(self) -> List[Tuple[str, str]]:
        return [rec.row() for rec in self._records]

    def clear(self) -> None:
        self._records.clear()
