import logging

import streamlit as st

from datatochart.app_logic import DataState, load_demo_data, preview_frame, process_data
from datatochart.axes import resolve_axes, x_axis_options, y_axis_options
from datatochart.chart_spec import build_chart_spec
from datatochart.config import (
    CHART_HEIGHT,
    CHART_LABELS,
    CHART_TYPES,
    DATA_FORMATS,
    DEFAULT_CHART_TYPE,
    FULLSCREEN_HEIGHT,
    PREVIEW_ROWS,
)
from datatochart.demo import DEMO_CSV, DEMO_FORMAT
from datatochart.renderer import render_chart
from datatochart.schema import classify_columns
from datatochart.validator import ChartValidationError, validate_chart_spec

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

CSV_PLACEHOLDER = """Paste your CSV data here (comma-separated values with header row)
Example:
name,value,category
Product A,42,Electronics
Product B,28,Clothing
Product C,15,Food"""

JSON_PLACEHOLDER = """Paste your JSON data here (array of objects)
Example:
[
  { "name": "Product A", "value": 42, "category": "Electronics" },
  { "name": "Product B", "value": 28, "category": "Clothing" },
  { "name": "Product C", "value": 15, "category": "Food" }
]"""


# ---------------------------------------------------------
# Session state
# ---------------------------------------------------------
def init_state():
    st.session_state.setdefault("raw_data", "")
    st.session_state.setdefault("data_format", "csv")
    st.session_state.setdefault("chart_type", DEFAULT_CHART_TYPE)
    st.session_state.setdefault("data_state", DataState())


def on_process():
    st.session_state.data_state = process_data(
        st.session_state.raw_data, st.session_state.data_format
    )


def on_load_demo():
    st.session_state.raw_data = DEMO_CSV
    st.session_state.data_format = DEMO_FORMAT
    st.session_state.data_state = load_demo_data()


# ---------------------------------------------------------
# Chart section
# ---------------------------------------------------------
def draw_chart(dataset, chart_type, x, y, height=CHART_HEIGHT):
    spec = build_chart_spec(dataset, chart_type, x, y)
    validate_chart_spec(spec, classify_columns(dataset))

    chart = render_chart(spec, dataset.to_frame(), height=height)

    st.altair_chart(chart, use_container_width=True, theme=None)


@st.dialog("Chart Visualization", width="large")
def show_fullscreen(dataset, chart_type, x, y):
    draw_chart(dataset, chart_type, x, y, height=FULLSCREEN_HEIGHT)


def chart_section(dataset):
    # Recomputed on every rerun from the dataset on screen
    classification = classify_columns(dataset)

    # ---------------------------------------------------------
    # Chart Options
    # ---------------------------------------------------------
    st.subheader("Chart Options")
    st.caption("Select chart type and customize visualization")

    chart_type = st.selectbox(
        "Chart Type",
        CHART_TYPES,
        format_func=lambda t: CHART_LABELS[t],
        key="chart_type",
    )

    # ---------------------------------------------------------
    # Axis selection (defaults come from the column types)
    # ---------------------------------------------------------
    defaults = resolve_axes(classification)
    x_options = x_axis_options(classification)
    y_options = y_axis_options(classification)

    col_x, col_y = st.columns(2)
    with col_x:
        x = st.selectbox("X-Axis / Category", x_options, index=x_options.index(defaults.x))
    with col_y:
        y = st.selectbox("Y-Axis / Value", y_options, index=y_options.index(defaults.y))

    axes = resolve_axes(classification, x, y)

    # ---------------------------------------------------------
    # Visualization
    # ---------------------------------------------------------
    header_col, button_col = st.columns([4, 1])
    with header_col:
        st.subheader("Visualization")
        st.caption("Your data visualized as a chart")
    with button_col:
        if st.button("Fullscreen"):
            show_fullscreen(dataset, chart_type, axes.x, axes.y)

    try:
        draw_chart(dataset, chart_type, axes.x, axes.y)
    except (ChartValidationError, ValueError) as e:
        st.error(f"Something went wrong while generating the chart: {e}")

    # ---------------------------------------------------------
    # Data Preview
    # ---------------------------------------------------------
    st.subheader("Data Preview")
    st.caption(f"First {PREVIEW_ROWS} rows of your data")
    st.dataframe(preview_frame(dataset), hide_index=True)


# ---------------------------------------------------------
# Streamlit UI
# ---------------------------------------------------------
def main():
    st.set_page_config(
        page_title="datatochart",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    st.markdown("""
        <style>
            #MainMenu {visibility: hidden;}
            footer {visibility: hidden;}
        </style>
    """, unsafe_allow_html=True)

    init_state()

    st.title("datatochart")

    # ---------------------------------------------------------
    # Input Data
    # ---------------------------------------------------------
    st.subheader("Input Data")
    st.caption("Paste your data in CSV or JSON format")

    data_format = st.radio(
        "Format",
        DATA_FORMATS,
        format_func=str.upper,
        horizontal=True,
        key="data_format",
        label_visibility="collapsed",
    )

    st.text_area(
        "Data",
        key="raw_data",
        height=220,
        placeholder=CSV_PLACEHOLDER if data_format == "csv" else JSON_PLACEHOLDER,
        label_visibility="collapsed",
    )

    data_state = st.session_state.data_state
    if data_state.error:
        st.error(data_state.error)

    _, demo_col, process_col = st.columns([6, 1, 1])
    with demo_col:
        st.button("Load Demo Data", on_click=on_load_demo)
    with process_col:
        st.button("Process Data", type="primary", on_click=on_process)

    st.markdown("---")

    if data_state.has_data:
        chart_section(data_state.data)


if __name__ == "__main__":
    main()
