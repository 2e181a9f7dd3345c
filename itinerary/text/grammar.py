"""Token grammar for itinerary placeholders.

Two token families are recognised inside a line:

Airport tokens (``X`` is an uppercase ASCII letter)::

    #XXX      airport name by IATA code
    ##XXXX    airport name by ICAO code
    *#XXX     municipality by IATA code
    *##XXXX   municipality by ICAO code

Date/time tokens::

    D(<value>)     date, e.g. 05 Mar 2024
    T12(<value>)   12-hour time with offset
    T24(<value>)   24-hour time with offset

where ``<value>`` is ``YYYY-MM-DDThh:mm`` followed by ``Z`` or a numeric
offset ``+hh:mm`` / ``-hh:mm``.

Alternatives are tried left to right at each position, so ``#JFKX``
yields ``#JFK`` and ``##JFK`` yields ``#JFK`` starting one character in.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Callable, Iterable, Iterator

from ..domain.models import Token, TokenKind

UNICODE_MINUS = "−"

_AIRPORT_TOKEN = re.compile(
    r"""
      \#(?P<iata>[A-Z]{3})
    | \#\#(?P<icao>[A-Z]{4})
    | \*\#(?P<city_iata>[A-Z]{3})
    | \*\#\#(?P<city_icao>[A-Z]{4})
    """,
    re.VERBOSE,
)

_DATETIME_TOKEN = re.compile(r"(?P<prefix>D|T12|T24)\((?P<value>[^)]+)\)")

_DATETIME_VALUE = re.compile(
    r"""
    \A
    [0-9]{4}-[0-9]{2}-[0-9]{2}  # date
    T[0-9]{2}:[0-9]{2}          # time
    (?:Z|[+-][0-9]{2}:[0-9]{2}) # UTC marker or numeric offset
    \Z
    """,
    re.VERBOSE,
)

_DATETIME_PREFIXES = {
    "D": TokenKind.DATE,
    "T12": TokenKind.TIME_12H,
    "T24": TokenKind.TIME_24H,
}

# group name -> (kind, looked up by ICAO)
_AIRPORT_GROUPS = {
    "iata": (TokenKind.AIRPORT_NAME, False),
    "icao": (TokenKind.AIRPORT_NAME, True),
    "city_iata": (TokenKind.AIRPORT_MUNICIPALITY, False),
    "city_icao": (TokenKind.AIRPORT_MUNICIPALITY, True),
}


def _airport_token(match: re.Match[str]) -> Token:
    group = match.lastgroup
    assert group is not None
    kind, by_icao = _AIRPORT_GROUPS[group]
    return Token(
        kind=kind,
        payload=match.group(group),
        literal=match.group(0),
        span=match.span(),
        by_icao=by_icao,
    )


def _datetime_token(match: re.Match[str]) -> Token:
    return Token(
        kind=_DATETIME_PREFIXES[match.group("prefix")],
        payload=match.group("value"),
        literal=match.group(0),
        span=match.span(),
    )


def scan_airport_tokens(line: str) -> Iterator[Token]:
    """Yield airport tokens of a line, left to right, without overlap."""
    for match in _AIRPORT_TOKEN.finditer(line):
        yield _airport_token(match)


def scan_datetime_tokens(line: str) -> Iterator[Token]:
    """Yield date/time tokens of a line, left to right, without overlap."""
    for match in _DATETIME_TOKEN.finditer(line):
        yield _datetime_token(match)


def replace_tokens(
    line: str, tokens: Iterable[Token], replacement: Callable[[Token], str]
) -> str:
    """Rebuild a line with each token swapped for ``replacement(token)``.

    Tokens must be in ascending, non-overlapping span order, as the
    scanners produce them.
    """
    parts = []
    position = 0
    for token in tokens:
        start, end = token.span
        parts.append(line[position:start])
        parts.append(replacement(token))
        position = end
    parts.append(line[position:])
    return "".join(parts)


def normalize_minus(value: str) -> str:
    """Replace the Unicode minus sign with an ASCII hyphen."""
    return value.replace(UNICODE_MINUS, "-")


def parse_datetime_value(value: str) -> datetime:
    """Parse a date/time payload into an offset-aware datetime.

    Args:
        value: The text between the parentheses of a date/time token.

    Returns:
        The parsed datetime. ``Z`` yields a UTC datetime.

    Raises:
        ValueError: If the value does not follow the grammar or names an
            impossible date or time.
    """
    value = normalize_minus(value)
    if not _DATETIME_VALUE.match(value):
        raise ValueError("does not match YYYY-MM-DDThh:mm(Z|+hh:mm|-hh:mm)")
    return datetime.strptime(value, "%Y-%m-%dT%H:%M%z")
