"""Collection of non-fatal problems found while processing a document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..domain.models import Diagnostic, DiagnosticKind

logger = logging.getLogger(__name__)


@dataclass
class DiagnosticCollector:
    """Accumulates diagnostics for one run, each distinct one kept once.

    Airport diagnostics are identified by their literal token; date/time
    diagnostics by literal and failure reason together.
    """

    _seen: set[tuple[DiagnosticKind, str, str]] = field(default_factory=set, repr=False)
    _items: list[Diagnostic] = field(default_factory=list)

    def add(self, diagnostic: Diagnostic) -> bool:
        """Record a diagnostic unless an identical one was seen.

        Returns:
            True if the diagnostic was new.
        """
        key = (diagnostic.kind, diagnostic.literal, diagnostic.reason)
        if key in self._seen:
            return False
        self._seen.add(key)
        self._items.append(diagnostic)
        return True

    def unresolved_airport(self, literal: str) -> bool:
        return self.add(Diagnostic(DiagnosticKind.UNRESOLVED_AIRPORT, literal))

    def unparseable_datetime(self, literal: str, reason: str) -> bool:
        return self.add(
            Diagnostic(DiagnosticKind.UNPARSEABLE_DATETIME, literal, reason)
        )

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Diagnostics in first-seen order."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def of_kind(self, kind: DiagnosticKind) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self._items if d.kind is kind)

    def report(self, log: logging.Logger = logger) -> None:
        """Log one aggregated warning per diagnostic family."""
        airports = self.of_kind(DiagnosticKind.UNRESOLVED_AIRPORT)
        if airports:
            log.warning(
                "airport code not found: %s",
                ", ".join(str(d) for d in airports),
                extra={"count": len(airports)},
            )

        datetimes = self.of_kind(DiagnosticKind.UNPARSEABLE_DATETIME)
        if datetimes:
            log.warning(
                "failed to parse time string: %s",
                ", ".join(str(d) for d in datetimes),
                extra={"count": len(datetimes)},
            )
