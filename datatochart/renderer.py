import logging

import altair as alt
import pandas as pd

from .config import CHART_HEIGHT, CHART_PALETTE, CHART_WIDTH

logger = logging.getLogger(__name__)


# ---------------------------------------------------------
# ENTRYPOINT
# ---------------------------------------------------------
def render_chart(spec: dict, df: pd.DataFrame, height: int = CHART_HEIGHT):
    chart_type = spec["chart"]["type"]

    if not spec.get("encoding"):
        raise ValueError("Chart spec has no encoding; the dataset has no columns")

    if chart_type == "bar":
        chart = _render_bar(spec, df)
    elif chart_type == "line":
        chart = _render_line(spec, df)
    elif chart_type == "pie":
        chart = _render_pie(spec, df)
    elif chart_type == "area":
        chart = _render_area(spec, df)
    else:
        raise ValueError(f"Unsupported chart type: {chart_type}")

    logger.debug("rendered %s chart from %d rows", chart_type, len(df))

    return chart.properties(
        title=spec["chart"].get("title", ""),
        width=CHART_WIDTH,
        height=height,
    )


# ---------------------------------------------------------
# BAR CHART
# ---------------------------------------------------------
def _render_bar(spec, df):
    encoding = spec["encoding"]

    return (
        alt.Chart(df)
        .mark_bar(
            color=CHART_PALETTE[0],
            cornerRadiusTopLeft=4,
            cornerRadiusTopRight=4,
        )
        .encode(
            x=_x_channel(encoding),
            y=_y_channel(encoding),
            tooltip=_tooltip(encoding),
        )
    )


# ---------------------------------------------------------
# LINE CHART
# ---------------------------------------------------------
def _render_line(spec, df):
    encoding = spec["encoding"]

    return (
        alt.Chart(df)
        .mark_line(
            color=CHART_PALETTE[0],
            interpolate="monotone",
            strokeWidth=2,
            point=True,
        )
        .encode(
            x=_x_channel(encoding),
            y=_y_channel(encoding),
            tooltip=_tooltip(encoding),
        )
    )


# ---------------------------------------------------------
# AREA CHART
# ---------------------------------------------------------
def _render_area(spec, df):
    encoding = spec["encoding"]

    return (
        alt.Chart(df)
        .mark_area(
            color=CHART_PALETTE[0],
            interpolate="monotone",
            fillOpacity=0.3,
            line={"color": CHART_PALETTE[0]},
        )
        .encode(
            x=_x_channel(encoding),
            y=_y_channel(encoding),
            tooltip=_tooltip(encoding),
        )
    )


# ---------------------------------------------------------
# PIE CHART
# ---------------------------------------------------------
def _render_pie(spec, df):
    encoding = spec["encoding"]
    y_col = encoding["y"]["column"]

    color_spec = encoding.get("color") or encoding["x"]
    group_col = color_spec["column"]

    return (
        alt.Chart(df)
        .mark_arc(stroke="white")
        .encode(
            theta=alt.Theta(field=field_name(y_col), type="quantitative"),
            color=alt.Color(
                field=field_name(group_col),
                type="nominal",
                sort=None,
                scale=alt.Scale(range=CHART_PALETTE),
            ),
            tooltip=_tooltip(encoding),
        )
    )


# ---------------------------------------------------------
# HELPERS
# ---------------------------------------------------------
def field_name(column: str) -> str:
    # Vega-Lite reads "." and "[...]" in field names as nested access
    for ch in ("\\", ".", "[", "]"):
        column = column.replace(ch, "\\" + ch)
    return column


def _x_channel(encoding):
    x_spec = encoding["x"]
    # Keep the row order of the pasted data on the axis
    return alt.X(
        field=field_name(x_spec["column"]),
        type=x_spec.get("type", "nominal"),
        sort=None,
        axis=alt.Axis(labelAngle=-45),
    )


def _y_channel(encoding):
    y_spec = encoding["y"]
    return alt.Y(
        field=field_name(y_spec["column"]),
        type=y_spec.get("type", "quantitative"),
    )


def _tooltip(encoding):
    tooltip = []
    for col in encoding.get("tooltip", []):
        dtype = "quantitative" if col == encoding["y"]["column"] else "nominal"
        tooltip.append(alt.Tooltip(field=field_name(col), type=dtype))
    return tooltip
