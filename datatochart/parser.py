# parser.py

import csv
import io
import json
import logging
import math
from enum import Enum

from .dataset import Dataset
from .heuristics import parse_number

logger = logging.getLogger(__name__)


class DataFormat(str, Enum):
    CSV = "csv"
    JSON = "json"


class ParseErrorKind(str, Enum):
    EMPTY_INPUT = "EmptyInput"
    INVALID_JSON = "InvalidJson"
    UNEXPECTED_SHAPE = "UnexpectedShape"
    INVALID_CSV = "InvalidCsv"


class ParseError(Exception):
    def __init__(self, kind: ParseErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


# ---------------------------------------------------------
# ENTRYPOINT
# ---------------------------------------------------------
def parse_data(raw_text: str, fmt) -> Dataset:
    """
    Parses pasted CSV or JSON text into a Dataset.

    Raises ParseError on blank input, malformed CSV quoting or oversized
    fields, invalid JSON, or a JSON value that is not an array of objects.
    Nothing is returned on failure.
    """
    try:
        fmt = DataFormat(fmt)
    except ValueError:
        raise ValueError(f"Unsupported data format: {fmt}") from None

    if not raw_text or not raw_text.strip():
        raise ParseError(ParseErrorKind.EMPTY_INPUT, "No data provided")

    if fmt is DataFormat.CSV:
        dataset = _parse_csv(raw_text)
    else:
        dataset = _parse_json(raw_text)

    logger.debug(
        "parsed %s input: %d rows, columns=%s", fmt.value, len(dataset), dataset.columns
    )
    return dataset


# ---------------------------------------------------------
# CSV
# ---------------------------------------------------------
def _parse_csv(raw_text: str) -> Dataset:
    # strict: an unterminated quote is an error instead of swallowing the rest
    reader = csv.reader(io.StringIO(raw_text), skipinitialspace=True, strict=True)
    try:
        lines = [row for row in reader if not _is_blank(row)]
    except csv.Error as e:
        raise ParseError(
            ParseErrorKind.INVALID_CSV, f"Invalid CSV at line {reader.line_num}: {e}"
        ) from e

    if not lines:
        raise ParseError(ParseErrorKind.EMPTY_INPUT, "No header row found")

    header = [name.strip() for name in lines[0]]
    records = []

    for line_no, row in enumerate(lines[1:], start=2):
        if len(row) != len(header):
            logger.debug(
                "row %d has %d fields, header has %d", line_no, len(row), len(header)
            )
        records.append({name: coerce_cell(cell) for name, cell in zip(header, row)})

    return Dataset(records, columns=header)


def _is_blank(row) -> bool:
    # "" or whitespace only; "," is a row of empty fields, not a blank line
    return len(row) < 2 and not "".join(row).strip()


def coerce_cell(cell: str):
    cell = cell.strip()
    number = parse_number(cell)
    return cell if number is None else number


# ---------------------------------------------------------
# JSON
# ---------------------------------------------------------
def _reject_constant(name):
    raise ValueError(f"Unexpected constant {name}")


def _finite_float(text):
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def _parse_json(raw_text: str) -> Dataset:
    try:
        payload = json.loads(
            raw_text, parse_constant=_reject_constant, parse_float=_finite_float
        )
    except (ValueError, RecursionError) as e:
        raise ParseError(ParseErrorKind.INVALID_JSON, f"Invalid JSON: {e}") from e

    if not isinstance(payload, list):
        raise ParseError(
            ParseErrorKind.UNEXPECTED_SHAPE,
            f"Expected a JSON array of objects, got {_json_type(payload)}",
        )

    records = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ParseError(
                ParseErrorKind.UNEXPECTED_SHAPE,
                f"Item {index} is {_json_type(item)}, expected an object",
            )
        records.append({key: _scalar(value) for key, value in item.items()})

    return Dataset(records)


def _scalar(value):
    # Nested arrays/objects are kept as their JSON text
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return value


def _json_type(value) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "a boolean"
    if isinstance(value, (int, float)):
        return "a number"
    if isinstance(value, str):
        return "a string"
    if isinstance(value, list):
        return "an array"
    return "an object"
