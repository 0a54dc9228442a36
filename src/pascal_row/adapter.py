"""Host boundary around the row generator.

Input validation, the size guard and the overflow policy all run here, before
the pure core is called. The core's buffer is then copied into plain Python
ints so nothing numpy-specific leaks to the host.
"""

from __future__ import annotations

import operator
from typing import Any, Optional, Union

from .config import load_settings
from .core import generate_row
from .errors import CoefficientOverflowError, InvalidRowIndexError, RowTooLargeError
from .models import OverflowPolicy, RowRequest, RowResult, Settings
from .widths import RowWidth, max_safe_length, parse_width


def validate_row_index(value: Any) -> int:
    """Return `value` as a non-negative int or raise InvalidRowIndexError."""
    # bool is an int subclass, but True/False are never a meaningful row length
    if isinstance(value, bool):
        raise InvalidRowIndexError(f"Row length must be an integer, got bool ({value!r}).")
    try:
        n = operator.index(value)
    except TypeError as exc:
        raise InvalidRowIndexError(
            f"Row length must be an integer, got {type(value).__name__} ({value!r})."
        ) from exc
    if n < 0:
        raise InvalidRowIndexError(f"Row length must be non-negative, got {n}.")
    return n


def _resolve_overflow(value: Union[OverflowPolicy, str, None], default: OverflowPolicy) -> OverflowPolicy:
    if value is None:
        return default
    if isinstance(value, OverflowPolicy):
        return value
    try:
        return OverflowPolicy(str(value).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(p.value for p in OverflowPolicy)
        raise ValueError(f"Invalid overflow policy: {value!r} (expected one of: {allowed})") from exc


def compute_row(
    n: Any,
    *,
    width: Union[RowWidth, str, int, None] = None,
    overflow: Union[OverflowPolicy, str, None] = None,
    settings: Optional[Settings] = None,
) -> RowResult:
    """
    Validate `n`, apply policies, generate the row and convert it for the host.

    Raises:
        InvalidRowIndexError: n is negative or not an integer
        RowTooLargeError: n exceeds settings.max_length
        CoefficientOverflowError: n exceeds the safe length and overflow is RAISE
    """
    settings = settings or load_settings()
    request = RowRequest(
        n=validate_row_index(n),
        width=parse_width(width) if width is not None else settings.width,
        overflow=_resolve_overflow(overflow, settings.overflow),
    )
    length, row_width, policy = request.n, request.width, request.overflow

    if length > settings.max_length:
        raise RowTooLargeError(length, settings.max_length)

    safe = max_safe_length(row_width)
    wrapped = length > safe
    warnings: list[str] = []
    if wrapped:
        if policy == OverflowPolicy.RAISE:
            raise CoefficientOverflowError(length, row_width.value, safe)
        warnings.append(
            f"Coefficients of row {length - 1} exceed {row_width.value}; "
            f"values are reduced modulo 2**{row_width.bits} (safe up to n={safe})."
        )

    buffer = generate_row(length, row_width)

    return RowResult(
        n=length,
        row_index=length - 1 if length > 0 else None,
        width=row_width,
        overflow=policy,
        values=buffer.tolist(),
        max_safe_length=safe,
        wrapped=wrapped,
        warnings=warnings,
    )


def pascal_row(
    n: Any,
    *,
    width: Union[RowWidth, str, int, None] = None,
    overflow: Union[OverflowPolicy, str, None] = None,
) -> list[int]:
    """Host entry point: the n coefficients of row n-1 as a list of ints."""
    return compute_row(n, width=width, overflow=overflow).values
