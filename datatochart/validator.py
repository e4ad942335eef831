# validator.py
# Checks a chart spec against the column types of the dataset it will be
# drawn from, before it reaches the renderer.

from .axes import y_axis_options
from .config import CHART_TYPES
from .schema import ColumnClassification


class ChartValidationError(Exception):
    def __init__(self, message: str):
        super().__init__(message)


def validate_chart_spec(chart_spec: dict, classification: ColumnClassification):
    chart = chart_spec.get("chart", {})
    chart_type = chart.get("type")

    if chart_type not in CHART_TYPES:
        raise ChartValidationError(f"Unsupported chart type: {chart_type}")

    title = chart.get("title")
    if title is not None and not isinstance(title, str):
        raise ChartValidationError("Chart title must be a string")

    encoding = chart_spec.get("encoding") or {}
    if not encoding:
        raise ChartValidationError("Nothing to plot: the dataset has no columns")

    x_col = _check_channel(encoding, "x", "nominal")
    y_col = _check_channel(encoding, "y", "quantitative")

    if x_col not in classification.columns:
        raise ChartValidationError(f"Column '{x_col}' does not exist in the dataset")

    # Y must be numeric whenever the dataset has a numeric column
    if y_col not in y_axis_options(classification):
        raise ChartValidationError(f"Column '{y_col}' cannot be used as a value axis")

    _check_color(chart_type, encoding.get("color"), x_col)
    _check_tooltip(encoding.get("tooltip"), {x_col, y_col})


def _check_channel(encoding, channel, expected_type):
    channel_spec = encoding.get(channel)
    if not isinstance(channel_spec, dict):
        raise ChartValidationError(f"Missing '{channel}' encoding")

    if channel_spec.get("type") != expected_type:
        raise ChartValidationError(
            f"Invalid type '{channel_spec.get('type')}' for axis '{channel}', "
            f"expected '{expected_type}'"
        )
    return channel_spec.get("column")


def _check_color(chart_type, color_spec, x_col):
    if chart_type == "pie":
        # One slice per category
        if not color_spec or color_spec.get("column") != x_col:
            raise ChartValidationError("Pie charts must be colored by the x column")
    elif color_spec is not None:
        raise ChartValidationError(f"{chart_type} charts use a single default color")


def _check_tooltip(tooltip, allowed):
    if tooltip is None:
        return

    if not isinstance(tooltip, list):
        raise ChartValidationError("Tooltip must be a list of column names")

    for col in tooltip:
        if col not in allowed:
            raise ChartValidationError(f"Tooltip column '{col}' is not plotted")
