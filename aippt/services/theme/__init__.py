"""Theme services: color normalization and style-to-theme resolution."""

from .colors import normalize_color
from .resolver import (
    DEFAULT_TEMPLATE_ID,
    STYLE_TEMPLATE_MAP,
    JsonThemeStore,
    ThemeResolver,
    ThemeStore,
    template_for_style,
)

__all__ = [
    "normalize_color",
    "ThemeResolver",
    "ThemeStore",
    "JsonThemeStore",
    "template_for_style",
    "STYLE_TEMPLATE_MAP",
    "DEFAULT_TEMPLATE_ID",
]
