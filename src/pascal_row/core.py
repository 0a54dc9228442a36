"""Row generation for Pascal's triangle.

`generate_row(n)` returns row n-1 of the triangle (n coefficients) computed in
a single buffer. Each generation i rewrites positions 1..i in ascending order;
before position j is rewritten it still holds row i-1's value at j, while
positions 1..j-1 already hold row i. One temporary carries the pre-update
value of position j-1 forward, so the previous row never needs its own array.

Additions are reduced modulo 2**bits of the chosen width. No overflow
detection happens here; see `pascal_row.adapter` for the policies.
"""

from __future__ import annotations

from math import comb

import numpy as np

from .widths import DEFAULT_WIDTH, RowWidth, parse_width


def generate_row(n: int, width: RowWidth = DEFAULT_WIDTH) -> np.ndarray:
    width = parse_width(width)
    mask = width.max_value

    row = np.zeros(n, dtype=width.dtype)
    if n == 0:
        return row
    row[0] = 1

    for i in range(1, n):
        curr = 1  # row[0] of the previous generation
        for j in range(1, i + 1):
            last = curr
            curr = int(row[j])
            row[j] = (last + curr) & mask

    return row


def wrapped_row(n: int, width: RowWidth = DEFAULT_WIDTH) -> list[int]:
    """Exact coefficients of row n-1 reduced modulo 2**bits, without the buffer recurrence."""
    width = parse_width(width)
    modulus = width.max_value + 1
    return [comb(n - 1, i) % modulus for i in range(n)]
