"""Text processing for itinerary documents.

- grammar: token families and date/time value parsing
- resolver: token to replacement text
- normalize: line clean-up and blank-line reduction
- diagnostics: per-run collection of unresolved tokens
"""

from .diagnostics import DiagnosticCollector
from .normalize import collapse_blank_runs, normalize, reduce_empty_lines
from .resolver import TokenResolver

__all__ = [
    "DiagnosticCollector",
    "TokenResolver",
    "normalize",
    "collapse_blank_runs",
    "reduce_empty_lines",
]
