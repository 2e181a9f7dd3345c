"""Style settings adapter.

Reads the ``user_settings.txt`` format:

    [Airport]
    Color = 32
    Bold = true

A bracketed line opens a category; ``Key = Value`` lines set fields of the
current category. Unrecognised lines are skipped. A missing settings file
is not an error: every lookup then returns the no-effect directive.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Union

from ...domain.models import StyleDirective

logger = logging.getLogger(__name__)

ESCAPE = "\033["
RESET = ESCAPE + "0m"

_FLAG_CODES = (
    ("bold", "1"),
    ("italic", "3"),
    ("underline", "4"),
    ("strikethrough", "9"),
)

_BOOLEAN_KEYS = {
    "Bold": "bold",
    "Italic": "italic",
    "Underline": "underline",
    "Strikethrough": "strikethrough",
}

NO_STYLE = StyleDirective()


@dataclass(frozen=True)
class StyleStore:
    """Named style directives implementing StyleStorePort.

    Attributes:
        directives: Category name to directive
    """

    directives: Mapping[str, StyleDirective] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def lookup(self, category: str) -> StyleDirective:
        """Return the directive for a category, or the no-effect directive."""
        return self.directives.get(category, NO_STYLE)

    def render(self, text: str, directive: StyleDirective, styled: bool = True) -> str:
        """Wrap text with the directive's escape sequences.

        The opening fragments are emitted in a fixed order (color, bold,
        italic, underline, strikethrough) and a single reset always
        closes the fragment. In plain mode the text comes back unchanged.
        """
        if not styled:
            return text
        if directive.is_empty:
            return text + RESET

        opening = ""
        if directive.color:
            opening += f"{ESCAPE}{directive.color}m"
        for attribute, code in _FLAG_CODES:
            if getattr(directive, attribute):
                opening += f"{ESCAPE}{code}m"

        return opening + text + RESET

    def render_category(self, text: str, category: str, styled: bool = True) -> str:
        """Shortcut for ``render(text, lookup(category), styled)``."""
        return self.render(text, self.lookup(category), styled)

    @classmethod
    def load(cls, lines: Iterable[str]) -> StyleStore:
        """Parse settings text into a store.

        Args:
            lines: Lines of the settings file, with or without line endings.

        Returns:
            The store. Parsing never fails.
        """
        directives: dict[str, StyleDirective] = {}
        category = ""

        for raw_line in lines:
            line = raw_line.rstrip("\r\n")
            if line.startswith("[") and line.endswith("]"):
                category = line[1:-1]
                continue

            parts = line.split("=")
            if len(parts) != 2:
                continue
            key = parts[0].strip()
            value = parts[1].strip()

            directive = directives.get(category, NO_STYLE)
            if key == "Color":
                directive = replace(directive, color=value)
            elif key in _BOOLEAN_KEYS:
                directive = replace(directive, **{_BOOLEAN_KEYS[key]: value == "true"})
            directives[category] = directive

        logger.debug(
            "Style settings parsed",
            extra={"categories": sorted(directives)},
        )
        return cls(directives=MappingProxyType(directives))

    @classmethod
    def from_path(cls, path: Union[str, Path], encoding: str = "utf-8") -> StyleStore:
        """Load settings from a file, degrading to an empty store.

        Args:
            path: Location of the settings file.
            encoding: Text encoding of the file.

        Returns:
            The parsed store, or an empty one if the file is unreadable.
        """
        path = Path(path)
        try:
            with path.open(encoding=encoding) as f:
                return cls.load(f)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(
                "Settings not found, styling disabled",
                extra={"path": str(path), "error": str(e)},
            )
            return cls()
