"""Services layer - Application orchestration.

Available services:
- ItineraryService: Prettifies a document against the loaded stores
"""

from .itinerary_service import ItineraryService, iter_document_lines

__all__ = ["ItineraryService", "iter_document_lines"]
