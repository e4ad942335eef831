from .axes import AxisSelection, default_x, default_y, resolve_axes
from .dataset import Dataset
from .parser import DataFormat, ParseError, ParseErrorKind, parse_data
from .schema import (
    ColumnClassification,
    classify_columns,
    get_categorical_columns,
    get_data_keys,
    get_numeric_columns,
)

__all__ = [
    "AxisSelection",
    "ColumnClassification",
    "DataFormat",
    "Dataset",
    "ParseError",
    "ParseErrorKind",
    "classify_columns",
    "default_x",
    "default_y",
    "get_categorical_columns",
    "get_data_keys",
    "get_numeric_columns",
    "parse_data",
    "resolve_axes",
]
