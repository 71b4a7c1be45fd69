"""
Zig-zag string reflow.

Characters are written down the rows 0, 1, ..., n-1 and then back up
n-2, ..., 0, repeating until the text runs out. Reading the rows left to
right, top to bottom gives the converted string:

    P   A   H   N
    A P L S I I G      "PAYPALISHIRING", 3 rows -> "PAHNAPLSIIGYIR"
    Y   I   R
"""

from __future__ import annotations
import logging
from typing import List

from ..datastructures.custom_array import CustomArray

log = logging.getLogger(__name__)


def zigzag_rows(text: str, num_rows: int) -> CustomArray[List[str]]:
    """Distribute the characters of `text` over `num_rows` rows in zig-zag order.

    Returns a CustomArray holding one independent list of characters per row.

    Raises:
        ValueError: if `num_rows` < 1.
    """
    if num_rows < 1:
        raise ValueError("num_rows must be >= 1")

    # Every row needs its own buffer; a plain fill([]) would alias them all.
    rows: CustomArray[List[str]] = CustomArray(num_rows).fill_unique([])

    if num_rows == 1:
        rows[0].extend(text)
        return rows

    current_row = 0
    delta = 1
    for ch in text:
        if current_row == 0:
            delta = 1
        elif current_row == num_rows - 1:
            delta = -1
        rows[current_row].append(ch)
        current_row += delta

    log.debug("zigzag_rows: %d char(s) over %d row(s)", len(text), num_rows)
    return rows


def zigzag_conversion(text: str, num_rows: int) -> str:
    """Return `text` read row by row after a zig-zag layout over `num_rows` rows."""
    if num_rows == 1:
        return text
    return "".join("".join(row) for row in zigzag_rows(text, num_rows))
