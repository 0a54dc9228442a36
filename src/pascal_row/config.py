from __future__ import annotations

import os
from typing import Optional

from .models import DEFAULT_MAX_LENGTH, OverflowPolicy, Settings
from .widths import DEFAULT_WIDTH, RowWidth, parse_width

ENV_WIDTH = "PASCAL_ROW_WIDTH"
ENV_OVERFLOW = "PASCAL_ROW_OVERFLOW"
ENV_MAX_LENGTH = "PASCAL_ROW_MAX_LENGTH"


def _get_width(default: RowWidth = DEFAULT_WIDTH) -> RowWidth:
    raw = os.environ.get(ENV_WIDTH)
    if raw is None or raw.strip() == "":
        return default
    try:
        return parse_width(raw)
    except ValueError:
        return default


def _get_overflow(default: OverflowPolicy = OverflowPolicy.WRAP) -> OverflowPolicy:
    raw = os.environ.get(ENV_OVERFLOW)
    if raw is None or raw.strip() == "":
        return default
    try:
        return OverflowPolicy(raw.strip().lower())
    except ValueError:
        return default


def _get_max_length(default: int = DEFAULT_MAX_LENGTH) -> int:
    raw = os.environ.get(ENV_MAX_LENGTH)
    if raw is None or raw.strip() == "":
        return default
    try:
        v = int(raw)
        return v if v > 0 else default
    except ValueError:
        return default


def load_settings(
    *,
    width: Optional[RowWidth] = None,
    overflow: Optional[OverflowPolicy] = None,
    max_length: Optional[int] = None,
) -> Settings:
    """
    Resolve boundary settings.

    Explicit arguments win over environment variables; blank or unparsable
    environment values fall back to the built-in defaults.
    """
    return Settings(
        width=width if width is not None else _get_width(),
        overflow=overflow if overflow is not None else _get_overflow(),
        max_length=max_length if max_length is not None else _get_max_length(),
    )
