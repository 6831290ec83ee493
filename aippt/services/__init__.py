"""Service layer for AIPPT."""

from .theme import ThemeResolver, JsonThemeStore, normalize_color
from .extraction import RecordStream, aiter_records, extract_records
from .renderer import DeckRenderer
from .export import ExportManager, ExportResult
from .llm import LLMClient
from .aippt import AIPPTService

__all__ = [
    "ThemeResolver",
    "JsonThemeStore",
    "normalize_color",
    "RecordStream",
    "aiter_records",
    "extract_records",
    "DeckRenderer",
    "ExportManager",
    "ExportResult",
    "LLMClient",
    "AIPPTService",
]
