from __future__ import annotations

from enum import Enum
from math import comb
from typing import Union

import numpy as np


class RowWidth(str, Enum):
    """
    Fixed-width unsigned integer used to accumulate coefficients.

    The width is a design parameter, not a correctness guarantee: rows longer
    than `max_safe_length(width)` hold coefficients reduced modulo 2**bits.
    """
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"

    @property
    def bits(self) -> int:
        return int(self.value[1:])

    @property
    def dtype(self) -> type:
        return _DTYPES[self]

    @property
    def max_value(self) -> int:
        return (1 << self.bits) - 1


_DTYPES: dict[RowWidth, type] = {
    RowWidth.U8: np.uint8,
    RowWidth.U16: np.uint16,
    RowWidth.U32: np.uint32,
    RowWidth.U64: np.uint64,
}

DEFAULT_WIDTH = RowWidth.U32


def parse_width(value: Union[RowWidth, str, int]) -> RowWidth:
    """Accept `RowWidth`, "u32", "32" or 32."""
    if isinstance(value, RowWidth):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid width: {value!r}")
    raw = str(value).strip().lower()
    if raw.isdigit():
        raw = f"u{raw}"
    try:
        return RowWidth(raw)
    except ValueError as exc:
        allowed = ", ".join(w.value for w in RowWidth)
        raise ValueError(f"Invalid width: {value!r} (expected one of: {allowed})") from exc


def max_safe_length(width: RowWidth = DEFAULT_WIDTH) -> int:
    """
    Largest row length whose coefficients all fit in `width`.

    The central coefficient C(n-1, (n-1)//2) is the largest in its row, so the
    search only tracks that one value. Known results:
    u8 -> 11, u16 -> 19, u32 -> 35, u64 -> 68.
    """
    width = parse_width(width)
    # first row index whose central coefficient overflows == number of safe rows
    row_index = 1
    while comb(row_index, row_index // 2) <= width.max_value:
        row_index += 1
    return row_index


def safe_lengths() -> dict[str, int]:
    return {w.value: max_safe_length(w) for w in RowWidth}
