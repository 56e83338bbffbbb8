import logging

import streamlit as st

from linear_explorer.controller import InteractionController
from linear_explorer.logging_config import setup_logging
from linear_explorer.ui_components import (
    coefficient_controls,
    example_buttons,
    info_panel,
    points_table,
    slider_key,
)

st.set_page_config(page_title="Linear Function Explorer", layout="wide")

if "controller" not in st.session_state:
    setup_logging(logging.INFO)
    st.session_state["controller"] = InteractionController.start()
controller: InteractionController = st.session_state["controller"]


def _sync_sliders():
    a, b = controller.state.model.coefficients()
    st.session_state[slider_key("a")] = a
    st.session_state[slider_key("b")] = b


if slider_key("a") not in st.session_state:
    _sync_sliders()


def _on_slider_change(param: str):
    controller.set_coefficient(param, st.session_state[slider_key(param)])


def _on_example(key: str):
    controller.load_example(key)
    _sync_sliders()


def _on_probe():
    controller.probe(st.session_state.get("x_input", ""))
    st.session_state["x_input"] = controller.state.probe_input


st.title("Linear Function Explorer")
st.caption("f(x) = a·x + b, drawn in 3D. Probe values of x and project them onto the scene.")

left_col, right_col = st.columns([1, 2], gap="large")

with left_col:
    st.header("Coefficients")
    coefficient_controls(_on_slider_change)
    example_buttons(_on_example)

    st.header("Compute a point")
    st.text_input("x", key="x_input", placeholder="x value")
    st.button("Calculate f(x)", on_click=_on_probe, use_container_width=True)
    if controller.state.probe_result:
        st.code(controller.state.probe_result)

    btn_cols = st.columns(2)
    with btn_cols[0]:
        st.button("Visualize points", on_click=controller.visualize_points, use_container_width=True)
    with btn_cols[1]:
        st.button("Clear table", on_click=controller.clear_table, use_container_width=True)
    points_table(controller.rows())

with right_col:
    st.plotly_chart(controller.figure(), use_container_width=True, config={"displaylogo": False})
    st.divider()
    info_panel(controller.panel())
    csv_content = controller.events.to_csv()
    if csv_content:
        st.download_button(
            "Download activity (CSV)",
            csv_content,
            file_name=f"session_{controller.events.session_id}.csv",
            mime="text/csv",
        )
