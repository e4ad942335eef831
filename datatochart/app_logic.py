"""Streamlit-free logic behind the data-to-chart page.

The page keeps only the raw text, the selected format and the last
DataState; everything shown (columns, axes, chart, preview) is derived
from the DataState on every rerun.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from .config import PREVIEW_ROWS
from .dataset import Dataset
from .demo import DEMO_CSV, DEMO_FORMAT
from .parser import ParseError, parse_data

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataState:
    data: Optional[Dataset] = None
    error: Optional[str] = None

    @property
    def has_data(self) -> bool:
        return self.data is not None and len(self.data) > 0


def process_data(raw_text: str, fmt: str) -> DataState:
    """
    Parses submitted text. On any failure the returned state carries only
    the error message, so a previous dataset is never left on screen.

    Args:
        raw_text: Text pasted by the user
        fmt: "csv" or "json"

    Returns:
        DataState with either `data` or `error` set
    """
    if not raw_text or not raw_text.strip():
        return DataState(error="Please enter some data")

    try:
        data = parse_data(raw_text, fmt)
    except ParseError as e:
        logger.info("parse failed (%s): %s", e.kind.value, e)
        return DataState(error=f"Error parsing data: {e}")

    return DataState(data=data)


def load_demo_data() -> DataState:
    return process_data(DEMO_CSV, DEMO_FORMAT)


def preview_frame(dataset: Dataset, rows: int = PREVIEW_ROWS) -> pd.DataFrame:
    return dataset.head(rows).to_frame()
