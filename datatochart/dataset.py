# dataset.py

from types import MappingProxyType
from typing import Iterator, List, Mapping, Sequence, Union

import pandas as pd

Scalar = Union[str, int, float, bool, None]
Record = Mapping[str, Scalar]


class Dataset:
    """
    Immutable, ordered sequence of records parsed from one submission.

    Records keep only the keys their source row/object carried. Reading a
    missing key through value() gives None. `columns` starts with the
    explicit column list (the CSV header), then adds record keys in the
    order they are first seen.
    """

    def __init__(
        self,
        records: Sequence[Mapping[str, Scalar]] = (),
        columns: Sequence[str] = (),
    ):
        self._records = tuple(MappingProxyType(dict(r)) for r in records)
        self._columns = _union_columns(columns, self._records)

    @property
    def records(self) -> tuple:
        return self._records

    @property
    def columns(self) -> List[str]:
        return list(self._columns)

    def value(self, row: int, column: str) -> Scalar:
        return self._records[row].get(column)

    def head(self, n: int) -> "Dataset":
        return Dataset(self._records[:n], self._columns)

    def to_frame(self) -> pd.DataFrame:
        """Tabular view for charting and the preview table (missing cells -> NaN)."""
        return pd.DataFrame.from_records(
            [dict(r) for r in self._records],
            columns=list(self._columns),
        )

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, index: int) -> Record:
        return self._records[index]

    def __bool__(self) -> bool:
        return bool(self._records)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Dataset):
            return NotImplemented
        return self._columns == other._columns and [dict(r) for r in self._records] == [
            dict(r) for r in other._records
        ]

    def __repr__(self):
        return f"Dataset(columns={list(self._columns)}, rows={len(self._records)} rows)"


def _union_columns(columns, records) -> tuple:
    seen = dict.fromkeys(columns)
    for record in records:
        for key in record:
            if key not in seen:
                seen[key] = None
    return tuple(seen)

