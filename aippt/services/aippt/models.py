"""
Request and response models for the AIPPT tools.

Required fields are optional here so that missing parameters are reported
with the service's own error category instead of a generic validation error.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field


class OutlineRequest(BaseModel):
    """Request model for outline generation."""

    content: Optional[str] = Field(default=None, description="Topic of the presentation")
    language: Optional[str] = Field(default=None, description="Output language, e.g. 中文 or English")
    model: Optional[str] = Field(default=None, description="Public model name")


class SlidesRequest(BaseModel):
    """Request model for streaming slide generation from an outline."""

    content: Optional[str] = Field(default=None, description="Outline to expand into slides")
    language: Optional[str] = Field(default=None, description="Output language")
    style: Optional[str] = Field(default=None, description="Presentation style, e.g. 学术风")
    model: Optional[str] = Field(default=None, description="Public model name")


class DeckRequest(BaseModel):
    """Request model for deck generation with PPTX export."""

    language: Optional[str] = Field(default=None, description="Output language")
    style: Optional[str] = Field(default=None, description="Presentation style")
    content: Optional[str] = Field(default=None, description="Outline, required without slides")
    model: Optional[str] = Field(default=None, description="Public model name, required without slides")
    slides: Any = Field(
        default=None,
        description="Pre-built slide records (list or JSON string); bypasses the model"
    )


class WritingRequest(BaseModel):
    """Request model for the AI writing tool."""

    content: Optional[str] = Field(default=None, description="Text to process")
    command: Optional[str] = Field(default=None, description="改写, 扩写 or 缩写")
    model: Optional[str] = Field(default=None, description="Public model name")


class DeckResult(BaseModel):
    """Result of a deck generation."""

    url: str = Field(description="Relative URL of the exported deck")
    file_name: str = Field(description="Exported file name")
    slide_count: int = Field(ge=0, description="Number of pages in the deck")
    slides: list[dict] = Field(default_factory=list, description="Rendered records in wire form")
