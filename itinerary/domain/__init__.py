"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    EmptyFieldError,
    InputNotFoundError,
    ItineraryError,
    OutputWriteError,
    ReferenceTableError,
    RowShapeError,
    SchemaError,
)
from .models import (
    REQUIRED_COLUMNS,
    AirportRecord,
    Diagnostic,
    DiagnosticKind,
    ProcessingResult,
    StyleDirective,
    Token,
    TokenKind,
)

__all__ = [
    # Models
    "REQUIRED_COLUMNS",
    "AirportRecord",
    "StyleDirective",
    "Token",
    "TokenKind",
    "Diagnostic",
    "DiagnosticKind",
    "ProcessingResult",
    # Errors
    "ItineraryError",
    "ReferenceTableError",
    "SchemaError",
    "RowShapeError",
    "EmptyFieldError",
    "InputNotFoundError",
    "OutputWriteError",
]
