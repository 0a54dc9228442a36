from __future__ import annotations

from math import comb

import numpy as np
import pytest

from pascal_row.core import generate_row, wrapped_row
from pascal_row.widths import RowWidth, max_safe_length


def test_small_rows() -> None:
    assert generate_row(0).tolist() == []
    assert generate_row(1).tolist() == [1]
    assert generate_row(2).tolist() == [1, 1]
    assert generate_row(5).tolist() == [1, 4, 6, 4, 1]
    assert generate_row(6).tolist() == [1, 5, 10, 10, 5, 1]


def test_buffer_has_requested_length_and_dtype() -> None:
    for n in range(0, 40):
        row = generate_row(n)
        assert len(row) == n
        assert row.dtype == np.uint32


def test_rows_are_palindromic_with_unit_ends() -> None:
    for n in range(1, 36):
        row = generate_row(n).tolist()
        assert row[0] == 1
        assert row[-1] == 1
        assert row == row[::-1]


def test_interior_values_follow_previous_row() -> None:
    # recompute the previous row independently rather than reusing buffer state
    for n in range(2, 36):
        row = generate_row(n).tolist()
        prev = generate_row(n - 1).tolist()
        for i in range(1, n - 1):
            assert row[i] == prev[i - 1] + prev[i]


def test_rows_match_binomial_coefficients_within_safe_length() -> None:
    for width in RowWidth:
        n = max_safe_length(width)
        assert generate_row(n, width).tolist() == [comb(n - 1, i) for i in range(n)]


def test_repeated_calls_are_identical_and_independent() -> None:
    first = generate_row(12)
    second = generate_row(12)
    assert first is not second
    assert first.tolist() == second.tolist()

    first[3] = 0
    assert generate_row(12).tolist() == second.tolist()


@pytest.mark.parametrize("width", list(RowWidth))
def test_overflowing_rows_wrap_modulo_width(width: RowWidth) -> None:
    n = max_safe_length(width) + 5
    row = generate_row(n, width).tolist()
    assert row == wrapped_row(n, width)
    # at least the central coefficient really did wrap
    assert row[(n - 1) // 2] != comb(n - 1, (n - 1) // 2)


def test_u32_wraparound_is_deterministic() -> None:
    # C(35, 17) = 4537567650 does not fit in 32 bits
    row = generate_row(36)
    assert int(row[17]) == 4537567650 % 2**32
    assert generate_row(36).tolist() == row.tolist()


def test_width_accepts_string_and_int() -> None:
    assert generate_row(4, "u8").dtype == np.uint8
    assert generate_row(4, 64).dtype == np.uint64
