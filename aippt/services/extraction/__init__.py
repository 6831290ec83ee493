"""Slide record extraction from language-model output."""

from .extractor import (
    END_OF_STREAM,
    LineSplitter,
    RecordStream,
    aiter_records,
    extract_records,
    iter_records,
    iter_records_incremental,
    parse_line,
)

__all__ = [
    "END_OF_STREAM",
    "LineSplitter",
    "RecordStream",
    "aiter_records",
    "extract_records",
    "iter_records",
    "iter_records_incremental",
    "parse_line",
]
