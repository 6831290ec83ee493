"""Upstream language-model access."""

from .client import LLMClient, parse_sse_line, upstream_error
from .prompts import (
    STYLE_DESCRIPTIONS,
    WRITING_COMMANDS,
    build_outline_prompt,
    build_slides_prompt,
    build_writing_prompt,
    user_message,
)

__all__ = [
    "LLMClient",
    "parse_sse_line",
    "upstream_error",
    "STYLE_DESCRIPTIONS",
    "WRITING_COMMANDS",
    "build_outline_prompt",
    "build_slides_prompt",
    "build_writing_prompt",
    "user_message",
]
