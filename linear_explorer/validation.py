"""Input parsing at the UI boundary.

Every value that arrives from a control (probe text box, slider, a table row
read back for plotting) passes through here before touching the model.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from . import config


class InvalidInput(ValueError):
    """A value could not be read as a finite real number."""

    def __init__(self, raw: Any, *, field: str = "x", message: Optional[str] = None) -> None:
        self.raw = raw
        self.field = field
        self.message = message or f"Please enter a valid number for {field}."
        super().__init__(self.message)


def parse_finite(raw: Any, *, field: str = "x") -> float:
    if raw is None or isinstance(raw, bool):
        raise InvalidInput(raw, field=field)
    if isinstance(raw, str):
        raw_text = raw.strip()
        # float() takes "1_000"; a typed number never has digit separators
        if not raw_text or "_" in raw_text:
            raise InvalidInput(raw, field=field)
        value_src: Any = raw_text
    else:
        value_src = raw
    try:
        num = float(value_src)
    except (TypeError, ValueError, OverflowError):
        raise InvalidInput(raw, field=field) from None
    if not math.isfinite(num):
        raise InvalidInput(raw, field=field)
    return num


def normalize_param_value(param: str, value: Any) -> float:
    """Clamp and quantize a coefficient to its slider bounds."""
    cfg = config.PARAM_BOUNDS[param]
    num = parse_finite(value, field=param)
    num = max(cfg["min"], min(cfg["max"], num))
    step = cfg.get("step", 0.1) or 0.1
    quantized = round(num / step) * step
    if quantized == -0.0:
        quantized = 0.0
    return float(f"{quantized:.12g}")
