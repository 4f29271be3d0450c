"""Input parsing (strings, nested lists, numpy arrays) into flat digit lists, and string output."""

# parsing.py
from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from .coords import SudokuSize
from .errors import InputParseError, OutputParseError


def parse_string(text: str) -> list[int]:
    """Each digit character becomes its value; anything else ('.', '0', '_', ...) is a blank."""
    text = "".join(text.split())
    return [int(ch) if ch.isdigit() else 0 for ch in text]


def parse_digits(source: Any) -> list[int]:
    """Flatten a puzzle given as a string, a flat or nested sequence, or a numpy array."""
    if isinstance(source, str):
        return parse_string(source)
    try:
        arr = np.asarray(source)
    except (TypeError, ValueError) as e:
        raise InputParseError(str(e)) from e
    if arr.dtype.kind not in "iu":
        if arr.dtype.kind == "f" and np.all(np.mod(arr, 1) == 0):
            arr = arr.astype(np.int64)
        else:
            raise InputParseError(f"unsupported element type {arr.dtype}")
    digits = [int(v) for v in arr.ravel()]
    if any(d < 0 for d in digits):
        raise InputParseError("negative digits are not allowed")
    return digits


def check_digit_range(digits: Sequence[int], size: SudokuSize) -> None:
    for i, d in enumerate(digits):
        if d < 0:
            raise InputParseError(f"negative digit {d} at index {i}")
        if d > size.house_size:
            raise InputParseError(f"digit {d} at index {i} exceeds house size {size.house_size}")


def output_string(values: Sequence[int], empty: str = ".", delimiter: str = "") -> str:
    """Join values; digits above 9 only make sense with a delimiter."""
    if not delimiter and any(v > 9 for v in values):
        raise OutputParseError("values above 9 need a delimiter")
    return delimiter.join(str(v) if v else empty for v in values)


def to_rows(values: Sequence[int], house_size: int) -> list[list[int]]:
    return [list(values[r * house_size:(r + 1) * house_size]) for r in range(house_size)]
