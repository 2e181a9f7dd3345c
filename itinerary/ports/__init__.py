"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the text-processing core and the
stores it reads from. They enable dependency injection and make the
system testable with in-memory fakes.
"""

from .reference import ReferenceTablePort
from .styles import StyleStorePort

__all__ = [
    "ReferenceTablePort",
    "StyleStorePort",
]
