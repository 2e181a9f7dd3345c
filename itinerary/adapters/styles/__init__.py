"""Style adapters - Implementations of the StyleStorePort.

Available implementations:
- StyleStore: Directives parsed from a user settings file
"""

from .settings_store import NO_STYLE, RESET, StyleStore

__all__ = ["StyleStore", "NO_STYLE", "RESET"]
