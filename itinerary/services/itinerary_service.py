"""Itinerary service - Main orchestrator.

Runs a document through the airport pass, the date/time pass and line
normalisation, then applies the document-wide blank-line reduction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..domain.models import ProcessingResult
from ..ports.reference import ReferenceTablePort
from ..ports.styles import StyleStorePort
from ..text.diagnostics import DiagnosticCollector
from ..text.normalize import collapse_blank_runs, normalize, reduce_empty_lines
from ..text.resolver import TokenResolver


def iter_document_lines(text: str) -> Iterator[str]:
    """Split a document into lines the way a line scanner reads them.

    Only ``\\n`` ends a line; a ``\\r`` right before it belongs to the line
    ending. A final newline does not start an extra empty line.
    """
    if not text:
        return
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


@dataclass
class ItineraryService:
    """Main service for prettifying itinerary documents.

    The stores are built before processing and only read here, so one
    service can process any number of documents. Each call gets its own
    diagnostic collector.

    Attributes:
        reference_table: Airport records for code lookups
        style_store: Style directives for styled mode
    """

    reference_table: ReferenceTablePort
    style_store: StyleStorePort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def process(
        self,
        text: str,
        styled: bool = False,
        diagnostics: Optional[DiagnosticCollector] = None,
    ) -> ProcessingResult:
        """Prettify a whole document.

        Args:
            text: The raw document.
            styled: Wrap replacements in terminal escape sequences.
            diagnostics: Collector to fill; a fresh one is used if omitted.

        Returns:
            ProcessingResult with the final text and the diagnostics.
        """
        diagnostics = diagnostics if diagnostics is not None else DiagnosticCollector()
        resolver = TokenResolver(
            reference_table=self.reference_table,
            style_store=self.style_store,
            styled=styled,
            diagnostics=diagnostics,
        )
        self._logger.info(
            "Starting document processing",
            extra={"length": len(text), "styled": styled},
        )

        processed = (
            normalize(resolver.substitute_datetimes(resolver.substitute_airports(line)))
            for line in iter_document_lines(text)
        )
        output = "".join(line + "\n" for line in collapse_blank_runs(processed))
        final = reduce_empty_lines(output)

        self._logger.info(
            "processing of input completed",
            extra={"diagnostics": len(diagnostics)},
        )
        return ProcessingResult(text=final, diagnostics=diagnostics.diagnostics)
