"""
Exception types for HTML table reading.

Every failure carries enough context (location, selector, counts, tag names)
to diagnose the problem without re-running the read.
"""

from typing import Optional, Dict, Any


class TableReaderError(Exception):
    """Base exception for table reading errors with context.

    Provides details about the location and selector involved in a failure,
    plus any additional data useful for debugging.
    """

    def __init__(
        self,
        message: str,
        location: Optional[str] = None,
        selector: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize TableReaderError with context information.

        Args:
            message: Human-readable error description
            location: The URL or path being read when the error occurred
            selector: The CSS selector in use, if any
            details: Any additional data for context
        """
        super().__init__(message)
        self.message = message
        self.location = location
        self.selector = selector
        self.details = details or {}

    def __str__(self) -> str:
        """Provide detailed error message for debugging."""
        parts = [str(self.message)]

        if self.location:
            parts.append(f"Location: {self.location}")

        if self.selector:
            parts.append(f"Selector: {self.selector}")

        return " | ".join(parts)


class InvalidLocationError(TableReaderError):
    """Raised when a location is missing or cannot be parsed as a URL or path."""


class FetchError(TableReaderError):
    """Raised when reading a file or HTTP resource fails."""

    def __init__(
        self,
        message: str,
        location: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, location=location, details=details)
        self.status_code = status_code

    def __str__(self) -> str:
        text = super().__str__()
        if self.status_code:
            text += f" | Status: {self.status_code}"
        if self.__cause__ is not None:
            text += f" | Cause: {self.__cause__}"
        return text


class ParseError(TableReaderError):
    """Raised when no available HTML parser can build a document."""


class NoTableFoundError(TableReaderError):
    """Raised when the best-table heuristic finds no row-bearing table."""


class SelectionError(TableReaderError):
    """Raised when an explicit selector does not resolve to exactly one table."""

    def __init__(
        self,
        message: str,
        selector: Optional[str] = None,
        count: Optional[int] = None,
        index: Optional[int] = None,
        tag: Optional[str] = None,
        location: Optional[str] = None,
    ):
        super().__init__(message, location=location, selector=selector)
        self.count = count
        self.index = index
        self.tag = tag


class EndOfSequenceError(TableReaderError):
    """Raised when a row cursor is advanced past its last row with ``next()``.

    Iterating with ``for`` ends with a plain StopIteration instead.
    """


class UnsupportedOperationError(TableReaderError):
    """Raised on any attempt to mutate a document through a read-only cursor."""


__all__ = [
    "TableReaderError",
    "InvalidLocationError",
    "FetchError",
    "ParseError",
    "NoTableFoundError",
    "SelectionError",
    "EndOfSequenceError",
    "UnsupportedOperationError",
]
