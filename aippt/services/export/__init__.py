"""Deck export: PPTX serialization and publication."""

from .manager import ExportManager, ExportResult, generate_file_name
from .pptx_writer import build_presentation, write_pptx

__all__ = [
    "ExportManager",
    "ExportResult",
    "generate_file_name",
    "build_presentation",
    "write_pptx",
]
