"""Streamlit UI components."""

from __future__ import annotations

from typing import Callable, Sequence, Tuple

import streamlit as st

from . import config
from .controller import TextPanel


def slider_key(param: str) -> str:
    return f"slider_{param}"


def coefficient_controls(on_change: Callable[[str], None]) -> None:
    labels = {"a": "Slope a", "b": "Intercept b"}
    for param in ("a", "b"):
        cfg = config.PARAM_BOUNDS[param]
        st.slider(
            labels[param],
            min_value=cfg["min"],
            max_value=cfg["max"],
            step=cfg["step"],
            key=slider_key(param),
            on_change=on_change,
            args=(param,),
        )


def example_buttons(on_click: Callable[[str], None]) -> None:
    labels = {"example-1": "Example 1", "example-2": "Example 2", "reset": "Reset"}
    cols = st.columns(len(labels))
    for col, (key, label) in zip(cols, labels.items()):
        with col:
            st.button(label, key=f"btn_{key}", on_click=on_click, args=(key,), use_container_width=True)


def info_panel(panel: TextPanel) -> None:
    st.markdown(f"**Equation:** `{panel.equation}`")
    tone = config.CLASSIFICATION_TONES.get(panel.classification_kind, "#6b7280")
    st.markdown(
        f"**Type:** <span style='color:{tone};font-weight:700'>{panel.classification}</span>",
        unsafe_allow_html=True,
    )
    st.markdown(f"**y-intercept:** {panel.y_intercept}")
    st.markdown(f"**Root:** {panel.x_intercept}")
    if panel.hint:
        st.caption(panel.hint)
    if panel.notice:
        st.warning(panel.notice)


def points_table(rows: Sequence[Tuple[str, str]]) -> None:
    if not rows:
        st.caption("No points yet.")
        return
    st.table([{"x": x_text, "f(x)": y_text} for x_text, y_text in rows])
