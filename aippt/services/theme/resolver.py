"""
Theme resolution.

Maps a presentation style to a template, loads the template's theme from a
theme store and normalizes its colors. Resolution never fails: any problem
with the stored theme falls back to the default colors.
"""
import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Protocol

from aippt.models.theme import (
    DEFAULT_ACCENT,
    DEFAULT_BACKGROUND,
    DEFAULT_FONT_COLOR,
    Theme,
)
from aippt.templates import THEMES_DIR, get_theme_path

from .colors import normalize_color

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_ID = "template_1"

STYLE_TEMPLATE_MAP = {
    "通用": "template_1",
    "学术风": "template_2",
    "职场风": "template_3",
    "教育风": "template_4",
    "营销风": "template_5",
}


def template_for_style(style: Any) -> str:
    """Get the template identifier for a style name."""
    if isinstance(style, str):
        return STYLE_TEMPLATE_MAP.get(style.strip(), DEFAULT_TEMPLATE_ID)
    return DEFAULT_TEMPLATE_ID


class ThemeStore(Protocol):
    """Key-value lookup from template identifier to a raw theme description."""

    def load(self, template_id: str) -> Mapping[str, Any]:
        ...


class JsonThemeStore:
    """
    Theme store backed by ``<template_id>.json`` files.

    Each file is a template document whose ``theme`` object holds
    ``backgroundColor``, ``themeColors`` and ``fontColor``.
    """

    def __init__(self, directory: Optional[Path] = None):
        self.directory = Path(directory) if directory else THEMES_DIR

    def load(self, template_id: str) -> Mapping[str, Any]:
        path = get_theme_path(template_id, self.directory)
        document = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(document, dict):
            raise ValueError(f"Template {template_id} is not a JSON object")
        theme = document.get("theme", {})
        if not isinstance(theme, dict):
            raise ValueError(f"Template {template_id} has a malformed theme")
        return theme


class ThemeResolver:
    """Resolves style names to fully populated themes."""

    def __init__(self, store: Optional[ThemeStore] = None):
        self._store = store or JsonThemeStore()

    def resolve(self, style: Any) -> Theme:
        """
        Resolve a style name to a Theme.

        Args:
            style: Presentation style such as "学术风"; unknown styles use the default template

        Returns:
            Theme with every color set
        """
        template_id = template_for_style(style)
        try:
            raw = self._store.load(template_id)
        except Exception as e:
            logger.warning(f"Failed to load template {template_id}, using default theme: {e}")
            return Theme()

        theme_colors = raw.get("themeColors")
        first_color = theme_colors[0] if isinstance(theme_colors, list) and theme_colors else None

        return Theme(
            background=normalize_color(raw.get("backgroundColor"), DEFAULT_BACKGROUND),
            accent=normalize_color(first_color, DEFAULT_ACCENT),
            font_color=normalize_color(raw.get("fontColor"), DEFAULT_FONT_COLOR),
        )
