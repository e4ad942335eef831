# schema.py

from dataclasses import dataclass
from typing import Tuple

from .dataset import Dataset
from .heuristics import is_numeric

NUMERIC = "numeric"
CATEGORICAL = "categorical"


@dataclass(frozen=True)
class ColumnClassification:
    columns: Tuple[str, ...] = ()
    numeric: Tuple[str, ...] = ()
    categorical: Tuple[str, ...] = ()

    def kind(self, column: str) -> str:
        if column in self.numeric:
            return NUMERIC
        if column in self.categorical:
            return CATEGORICAL
        raise KeyError(column)


# ---------------------------------------------------------
# Column type detection
# ---------------------------------------------------------
def detect_schema(dataset: Dataset):
    """
    Maps every column to "numeric" or "categorical", in column order.

    A column is numeric when it has at least one non-null value and every
    non-null value is a finite number or a string holding one. Booleans
    and empty strings make a column categorical. A dataset without rows
    (e.g. a header-only CSV) has no classified columns.
    """
    schema = {}
    if not dataset:
        return schema

    for col in dataset.columns:
        values = [record[col] for record in dataset if col in record]
        schema[col] = NUMERIC if is_numeric(values) else CATEGORICAL
    return schema


def classify_columns(dataset: Dataset) -> ColumnClassification:
    schema = detect_schema(dataset)
    return ColumnClassification(
        columns=tuple(schema),
        numeric=tuple(col for col, kind in schema.items() if kind == NUMERIC),
        categorical=tuple(col for col, kind in schema.items() if kind == CATEGORICAL),
    )


def get_data_keys(dataset: Dataset):
    return list(classify_columns(dataset).columns)


def get_numeric_columns(dataset: Dataset):
    return list(classify_columns(dataset).numeric)


def get_categorical_columns(dataset: Dataset):
    return list(classify_columns(dataset).categorical)
