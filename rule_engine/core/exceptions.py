"""
Errors raised by the discount batch pipeline

Author: TM3
Date: 2025-11-20
"""
from typing import Optional


class ParseError(ValueError):
    """
    A raw order record could not be turned into an Order

    Raised for a wrong field count or a field that does not parse in its
    expected format. Never replaced by a zero/default order.
    """

    def __init__(
        self,
        message: str,
        record: Optional[str] = None,
        field: Optional[str] = None,
        line_number: Optional[int] = None
    ):
        self.record = record
        self.field = field
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


MalformedRecordError = ParseError


class IOUnavailableError(OSError):
    """Source file unreadable or destination unwritable"""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)
