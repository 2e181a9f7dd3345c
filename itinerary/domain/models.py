"""Immutable domain models for the itinerary prettifier.

All models are frozen dataclasses with slots. They carry no behaviour
beyond small convenience properties and have no external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


REQUIRED_COLUMNS: tuple[str, ...] = (
    "name",
    "iso_country",
    "municipality",
    "icao_code",
    "iata_code",
    "coordinates",
)


@dataclass(frozen=True, slots=True)
class AirportRecord:
    """One row of the airport reference table.

    Attributes:
        name: Human-readable airport name
        iso_country: ISO country code
        municipality: City served by the airport
        icao_code: 4-letter ICAO identifier
        iata_code: 3-letter IATA identifier
        coordinates: Free-text coordinates, kept verbatim
    """

    name: str
    iso_country: str
    municipality: str
    icao_code: str
    iata_code: str
    coordinates: str


@dataclass(frozen=True, slots=True)
class StyleDirective:
    """Text-attribute effects applied to a replacement in styled mode.

    An instance built with no arguments has no effects at all and is what
    lookups of unknown categories return.
    """

    color: Optional[str] = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False

    @property
    def is_empty(self) -> bool:
        """Check if the directive carries no effect."""
        return not (
            self.color
            or self.bold
            or self.italic
            or self.underline
            or self.strikethrough
        )


class TokenKind(Enum):
    """Kinds of placeholder tokens recognised in a document line."""

    AIRPORT_NAME = auto()
    AIRPORT_MUNICIPALITY = auto()
    DATE = auto()
    TIME_12H = auto()
    TIME_24H = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A placeholder found in one line.

    Attributes:
        kind: What the token resolves to
        payload: The airport code or the raw date/time value
        literal: The exact substring matched in the line
        span: Start and end offsets of ``literal`` in the line
        by_icao: True for ``##``/``*##`` tokens (4-letter ICAO lookups)
    """

    kind: TokenKind
    payload: str
    literal: str
    span: tuple[int, int]
    by_icao: bool = False


class DiagnosticKind(Enum):
    """Families of non-fatal problems reported after a run."""

    UNRESOLVED_AIRPORT = auto()
    UNPARSEABLE_DATETIME = auto()


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A deduplicated, non-fatal record of an unresolved token."""

    kind: DiagnosticKind
    literal: str
    reason: str = ""

    def __str__(self) -> str:
        if self.reason:
            return f"{self.literal}: {self.reason}"
        return self.literal


@dataclass(frozen=True, slots=True)
class ProcessingResult:
    """Outcome of running a document through the pipeline.

    Attributes:
        text: The final, normalised document
        diagnostics: Unresolved tokens in first-seen order
    """

    text: str
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)

    @property
    def has_diagnostics(self) -> bool:
        """Check if any token could not be resolved."""
        return len(self.diagnostics) > 0
