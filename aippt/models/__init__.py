"""Pydantic models and schemas for type-safe data handling."""

from .slide import (
    SLIDE_TYPES,
    ContentItem,
    ContentSlide,
    ContentsSlide,
    CoverSlide,
    EndSlide,
    SlideRecord,
    TransitionSlide,
    parse_slide_record,
)
from .theme import Language, LocaleLabels, Theme
from .document import DocumentModel, Page, TextBlock

__all__ = [
    # Slide models
    "SlideRecord",
    "CoverSlide",
    "ContentsSlide",
    "TransitionSlide",
    "ContentSlide",
    "ContentItem",
    "EndSlide",
    "SLIDE_TYPES",
    "parse_slide_record",
    # Theme models
    "Theme",
    "Language",
    "LocaleLabels",
    # Document models
    "DocumentModel",
    "Page",
    "TextBlock",
]
