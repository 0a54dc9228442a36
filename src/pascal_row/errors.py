from __future__ import annotations


class PascalRowError(Exception):
    """Base class for errors raised at the host boundary."""


class InvalidRowIndexError(PascalRowError, ValueError):
    """Raised when the requested row length is negative or not an integer."""


class RowTooLargeError(PascalRowError, ValueError):
    """Raised when the requested row length exceeds the configured maximum."""

    def __init__(self, n: int, max_length: int) -> None:
        self.n = n
        self.max_length = max_length
        super().__init__(f"Row length {n} exceeds the configured maximum of {max_length}.")


class CoefficientOverflowError(PascalRowError, ArithmeticError):
    """Raised when coefficients would not fit in the chosen width and overflow is not allowed to wrap."""

    def __init__(self, n: int, width: str, max_safe_length: int) -> None:
        self.n = n
        self.width = width
        self.max_safe_length = max_safe_length
        super().__init__(
            f"Row length {n} overflows {width} coefficients "
            f"(largest safe row length for {width} is {max_safe_length})."
        )
