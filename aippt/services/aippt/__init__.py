"""
AIPPT Service
Generates slide records with a language model and exports themed decks.
"""

from .service import AIPPTService, coerce_slides, require
from .models import DeckRequest, DeckResult, OutlineRequest, SlidesRequest, WritingRequest

__all__ = [
    "AIPPTService",
    "coerce_slides",
    "require",
    "DeckRequest",
    "DeckResult",
    "OutlineRequest",
    "SlidesRequest",
    "WritingRequest",
]
