# heuristics.py

import math
import re

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")


def parse_number(text):
    """
    Returns an int or float when the whole (trimmed) string is a finite
    number literal, otherwise None. "1,000", "N/A", "nan", "inf" and ""
    are not numbers.
    """
    text = text.strip()
    if _INT_RE.fullmatch(text):
        return int(text)
    if _FLOAT_RE.fullmatch(text):
        value = float(text)
        # 1e999 overflows to inf
        return value if math.isfinite(value) else None
    return None


def is_numeric_value(value) -> bool:
    # bool is an int subclass but counts as categorical
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str):
        return parse_number(value) is not None
    return False


def is_numeric(col) -> bool:
    values = [cell for cell in col if cell is not None]
    return bool(values) and all(is_numeric_value(cell) for cell in values)
