"""Style port - Abstraction over the named formatting directives.

Implementation: adapters/styles/settings_store.py
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import StyleDirective


class StyleStorePort(Protocol):
    """Port for style lookups and rendering.

    Unknown categories are not an error: they resolve to a directive
    with no effects.
    """

    def lookup(self, category: str) -> StyleDirective:
        """Return the directive for a category such as 'Airport' or 'Date'."""
        ...

    def render(self, text: str, directive: StyleDirective, styled: bool = True) -> str:
        """Wrap text in terminal escape sequences.

        Args:
            text: The replacement text.
            directive: Effects to apply.
            styled: When False the text is returned unchanged.

        Returns:
            The (possibly) wrapped text.
        """
        ...

    def render_category(self, text: str, category: str, styled: bool = True) -> str:
        """Render text with the directive looked up for ``category``."""
        ...
