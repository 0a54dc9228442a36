from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .widths import DEFAULT_WIDTH, RowWidth


class OverflowPolicy(str, Enum):
    """
    What to do when the requested row does not fit the chosen width.

    - WRAP: return coefficients reduced modulo 2**bits and flag the result
    - RAISE: reject the request before the row is generated
    """
    WRAP = "wrap"
    RAISE = "raise"


DEFAULT_MAX_LENGTH = 4096


class Settings(BaseModel):
    """
    Boundary defaults, normally loaded from the environment (see config.py).

    max_length bounds the buffer the adapter is willing to allocate.
    """
    width: RowWidth = DEFAULT_WIDTH
    overflow: OverflowPolicy = OverflowPolicy.WRAP
    max_length: int = Field(default=DEFAULT_MAX_LENGTH, gt=0)


class RowRequest(BaseModel):
    n: int = Field(ge=0)
    width: RowWidth = DEFAULT_WIDTH
    overflow: OverflowPolicy = OverflowPolicy.WRAP


class RowResult(BaseModel):
    """
    A computed row as handed back to the host.

    n: row length (number of coefficients)
    row_index: triangle row number (n-1); None for the empty row
    values: C(row_index, i) for i in 0..n-1, reduced modulo 2**bits when wrapped
    max_safe_length: largest n whose coefficients fit in `width`
    wrapped: True when at least one coefficient exceeded the width
    """
    n: int
    row_index: Optional[int] = None
    width: RowWidth
    overflow: OverflowPolicy
    values: list[int] = Field(default_factory=list)
    max_safe_length: int
    wrapped: bool = False
    warnings: list[str] = Field(default_factory=list)
