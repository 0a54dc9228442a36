from .adapter import compute_row, pascal_row, validate_row_index
from .core import generate_row
from .errors import CoefficientOverflowError, InvalidRowIndexError, PascalRowError, RowTooLargeError
from .models import OverflowPolicy, RowResult, Settings
from .widths import RowWidth, max_safe_length

__all__ = [
    "CoefficientOverflowError",
    "InvalidRowIndexError",
    "OverflowPolicy",
    "PascalRowError",
    "RowResult",
    "RowTooLargeError",
    "RowWidth",
    "Settings",
    "compute_row",
    "generate_row",
    "max_safe_length",
    "pascal_row",
    "validate_row_index",
]
