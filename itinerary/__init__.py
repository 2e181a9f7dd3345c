"""Top-level package for the itinerary prettifier.

The package turns an administrator-written itinerary, full of airport
codes (``#LAX``, ``*##EGLL``) and ISO date/time placeholders
(``T12(2024-03-05T10:00-05:00)``), into a document a customer can read,
either as plain text or styled for an ANSI terminal.
"""

__version__ = "1.0.0"
