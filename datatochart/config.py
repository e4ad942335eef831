# config.py
# Page and chart constants shared by the engine and the Streamlit page.

CHART_TYPES = ("bar", "line", "pie", "area")

CHART_LABELS = {
    "bar": "Bar Chart",
    "line": "Line Chart",
    "pie": "Pie Chart",
    "area": "Area Chart",
}

DEFAULT_CHART_TYPE = "bar"

DATA_FORMATS = ("csv", "json")

# Rows shown in the "Data Preview" table
PREVIEW_ROWS = 10

# ---------------------------------------------------------
# Default colors (one per series / pie slice, cycled)
# ---------------------------------------------------------
CHART_PALETTE = [
    "#2563eb",
    "#16a34a",
    "#f97316",
    "#9333ea",
    "#e11d48",
    "#0891b2",
    "#ca8a04",
    "#4f46e5",
    "#64748b",
]

CHART_WIDTH = 600
CHART_HEIGHT = 400
FULLSCREEN_HEIGHT = 700
