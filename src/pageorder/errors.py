"""
Exception types raised by pageorder.

The ordering core itself never fails on well-formed input; these cover
the surrounding contract violations (even-length updates handed to
middle extraction) and malformed puzzle text rejected by the parser.
"""

from __future__ import annotations

from typing import Optional


class PageOrderError(Exception):
    """Base class for all pageorder errors."""


class PreconditionViolation(PageOrderError, ValueError):
    """
    Raised when a caller breaks a stated precondition.

    Attributes:
        update: The offending update, if one is involved.
    """

    def __init__(self, message: str, update: Optional[tuple[int, ...]] = None) -> None:
        self.update = update
        super().__init__(message)


class InputFormatError(PageOrderError, ValueError):
    """
    Raised when puzzle text cannot be parsed.

    Attributes:
        line_number: 1-based line of the input that failed, if known.
        line: Raw text of that line.
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
