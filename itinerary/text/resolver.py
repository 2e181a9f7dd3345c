"""Resolution of placeholder tokens into display text.

The resolver is bound to one run: it reads from the reference table and
the style store, and records every token it cannot resolve in the run's
diagnostic collector. Unresolved tokens are returned unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from ..domain.models import Token, TokenKind
from ..ports.reference import ReferenceTablePort
from ..ports.styles import StyleStorePort
from .diagnostics import DiagnosticCollector
from .grammar import (
    normalize_minus,
    parse_datetime_value,
    replace_tokens,
    scan_airport_tokens,
    scan_datetime_tokens,
)

# Rendered for values carrying the ``Z`` marker. Kept as the historical
# output of the tool even though it reads as a negative offset.
UTC_OFFSET_TEXT = "(-07:00)"

DAY_MONTH_FORMAT = "%d %b"
TIME_FORMATS = {
    TokenKind.TIME_12H: "%I:%M%p",
    TokenKind.TIME_24H: "%H:%M",
}


def format_offset(value: str, moment: datetime) -> str:
    """Render the UTC offset of a parsed value as ``(+hh:mm)``/``(-hh:mm)``.

    Args:
        value: The normalised payload the datetime was parsed from.
        moment: The parsed, offset-aware datetime.
    """
    if value.endswith("Z"):
        return UTC_OFFSET_TEXT

    offset = moment.utcoffset()
    assert offset is not None
    minutes = int(offset.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"({sign}{hours:02d}:{minutes:02d})"


def offset_category(offset_text: str) -> str:
    """Style category for an offset: OffsetNeg when it starts with a minus."""
    return "OffsetNeg" if offset_text.startswith("(-") else "OffsetPos"


@dataclass
class TokenResolver:
    """Turns tokens into replacement text for one run.

    Attributes:
        reference_table: Airport records to resolve codes against
        style_store: Style directives for styled mode
        styled: Wrap replacements in escape sequences when True
        diagnostics: Collector receiving unresolved tokens
    """

    reference_table: ReferenceTablePort
    style_store: StyleStorePort
    styled: bool = False
    diagnostics: DiagnosticCollector = field(default_factory=DiagnosticCollector)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _render(self, text: str, category: str) -> str:
        return self.style_store.render_category(text, category, styled=self.styled)

    def resolve_airport_token(self, token: Token) -> str:
        """Replace an airport token with the airport name or municipality.

        Args:
            token: A token produced by ``scan_airport_tokens``.

        Returns:
            The replacement text, or the token literal if no record matches.
        """
        if token.by_icao:
            record = self.reference_table.find_by_icao(token.payload)
        else:
            record = self.reference_table.find_by_iata(token.payload)

        if record is None:
            if self.diagnostics.unresolved_airport(token.literal):
                self._logger.debug(
                    "Airport code not found", extra={"token": token.literal}
                )
            return token.literal

        if token.kind is TokenKind.AIRPORT_MUNICIPALITY:
            return self._render(record.municipality, "City")
        return self._render(record.name, "Airport")

    def resolve_datetime_token(self, token: Token) -> str:
        """Replace a date/time token with its human-readable form.

        ``D`` renders as ``05 Mar 2024``; ``T12`` as ``10:00AM (+05:00)``;
        ``T24`` as ``10:00 (+05:00)``.

        Args:
            token: A token produced by ``scan_datetime_tokens``.

        Returns:
            The replacement text, or the token literal if the value
            cannot be parsed.
        """
        value = normalize_minus(token.payload)
        try:
            moment = parse_datetime_value(value)
        except ValueError as e:
            if self.diagnostics.unparseable_datetime(value, str(e)):
                self._logger.debug(
                    "Unparseable date/time",
                    extra={"token": token.literal, "reason": str(e)},
                )
            return token.literal

        if token.kind is TokenKind.DATE:
            # %Y is not zero-padded below year 1000 on every platform
            date_text = f"{moment:{DAY_MONTH_FORMAT}} {moment.year:04d}"
            return self._render(date_text, "Date")

        clock = moment.strftime(TIME_FORMATS[token.kind])
        offset = format_offset(value, moment)
        if not self.styled:
            return f"{clock} {offset}"
        return (
            self._render(clock, "Time")
            + " "
            + self._render(offset, offset_category(offset))
        )

    def substitute_airports(self, line: str) -> str:
        """Apply the airport-token pass to one line."""
        return replace_tokens(line, scan_airport_tokens(line), self.resolve_airport_token)

    def substitute_datetimes(self, line: str) -> str:
        """Apply the date/time-token pass to one line."""
        return replace_tokens(line, scan_datetime_tokens(line), self.resolve_datetime_token)
