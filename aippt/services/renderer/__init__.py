"""Deck rendering: slide records to document model."""

from .renderer import DeckRenderer, content_line

__all__ = [
    "DeckRenderer",
    "content_line",
]
