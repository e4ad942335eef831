# axes.py
# Default X/Y fields for a freshly parsed dataset, and re-validation of
# the axes a user picked against the dataset currently on screen.

from dataclasses import dataclass
from typing import List, Optional

from .schema import ColumnClassification


@dataclass(frozen=True)
class AxisSelection:
    x: Optional[str]
    y: Optional[str]


def _first(items, index=0):
    return items[index] if len(items) > index else None


def _coalesce(*values):
    return next((v for v in values if v is not None), None)


def default_x(classification: ColumnClassification) -> Optional[str]:
    return _coalesce(_first(classification.categorical), _first(classification.columns))


def default_y(classification: ColumnClassification) -> Optional[str]:
    return _coalesce(
        _first(classification.numeric),
        _first(classification.columns, 1),
        _first(classification.columns),
    )


def x_axis_options(classification: ColumnClassification) -> List[str]:
    return list(classification.columns)


def y_axis_options(classification: ColumnClassification) -> List[str]:
    # Nothing numeric: offer every column rather than an empty select
    return list(classification.numeric or classification.columns)


def resolve_axes(
    classification: ColumnClassification,
    x: Optional[str] = None,
    y: Optional[str] = None,
) -> AxisSelection:
    """
    Keeps a requested axis only if it is valid for this dataset, otherwise
    falls back to the default. Axes picked for a previous dataset never
    survive a new parse unless the new dataset has the same column.
    """
    if x not in x_axis_options(classification):
        x = default_x(classification)
    if y not in y_axis_options(classification):
        y = default_y(classification)
    return AxisSelection(x=x, y=y)
