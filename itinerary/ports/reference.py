"""Reference-table port - Abstraction over the airport records.

Implementation: adapters/reference/csv_table.py
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import AirportRecord


class ReferenceTablePort(Protocol):
    """Port for read-only airport lookups.

    The table is built once before processing and never mutated.
    Lookups return the first record in load order, so duplicate codes
    resolve deterministically.
    """

    def find_by_iata(self, code: str) -> Optional[AirportRecord]:
        """Find the first record with the given 3-letter IATA code.

        Args:
            code: IATA code, e.g. 'JFK'.

        Returns:
            The first matching record, or None.
        """
        ...

    def find_by_icao(self, code: str) -> Optional[AirportRecord]:
        """Find the first record with the given 4-letter ICAO code.

        Args:
            code: ICAO code, e.g. 'KJFK'.

        Returns:
            The first matching record, or None.
        """
        ...
