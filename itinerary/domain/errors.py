"""Typed domain errors for the itinerary prettifier.

Only load-time problems are raised as exceptions. Per-token problems are
collected as diagnostics and never interrupt processing.

All errors inherit from ItineraryError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ItineraryError(Exception):
    """Base error for the itinerary domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ReferenceTableError(ItineraryError):
    """The airport reference table is malformed.

    Attributes:
        file_path: Path or name of the offending table, if known
    """

    file_path: Optional[str] = None


@dataclass
class SchemaError(ReferenceTableError):
    """The header row lacks one or more required columns.

    Attributes:
        missing_columns: Every required column absent from the header
    """

    missing_columns: tuple[str, ...] = ()


@dataclass
class RowShapeError(ReferenceTableError):
    """A data row has a different number of fields than the header.

    Attributes:
        row_number: Source line on which the offending row ends
        expected_fields: Field count of the header
        actual_fields: Field count of the offending row
    """

    row_number: int = 0
    expected_fields: int = 0
    actual_fields: int = 0


@dataclass
class EmptyFieldError(ReferenceTableError):
    """A data row leaves one or more required fields empty.

    Attributes:
        row_number: Source line on which the offending row ends
        empty_columns: Required columns that were empty in that row
    """

    row_number: int = 0
    empty_columns: tuple[str, ...] = ()


@dataclass
class InputNotFoundError(ItineraryError):
    """A required input artifact could not be opened.

    Attributes:
        file_path: Path that was attempted
        artifact: What the file was supposed to be ("input", "airport lookup")
    """

    file_path: Optional[str] = None
    artifact: str = "input"


@dataclass
class OutputWriteError(ItineraryError):
    """The processed document could not be written.

    Attributes:
        file_path: Path where writing was attempted
    """

    file_path: Optional[str] = None
