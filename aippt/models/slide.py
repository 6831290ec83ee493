"""
Slide record models.

A slide record is one of five frozen variants. Records arrive in the PPTist
"AIPPT" wire shape ``{"type": ..., "data": {...}}`` either from callers or
from language-model output, and are parsed leniently: an unknown type is
rejected, while a known type with missing or malformed data degrades to the
variant's empty form.
"""
from typing import Any, Callable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class ContentItem(_Record):
    """One point on a content slide."""

    heading: str = Field(default="", description="Optional lead-in for the point")
    body: str = Field(default="", description="Point text")


class CoverSlide(_Record):
    type: Literal["cover"] = "cover"
    title: str = Field(default="", description="Deck title")
    subtitle: str = Field(default="", description="Subtitle or short description")

    def to_wire(self) -> dict:
        return {"type": self.type, "data": {"title": self.title, "text": self.subtitle}}


class ContentsSlide(_Record):
    type: Literal["contents"] = "contents"
    items: list[str] = Field(default_factory=list, description="Table of contents entries")

    def to_wire(self) -> dict:
        return {"type": self.type, "data": {"items": list(self.items)}}


class TransitionSlide(_Record):
    type: Literal["transition"] = "transition"
    title: str = Field(default="", description="Section title")
    body: str = Field(default="", description="Section introduction")

    def to_wire(self) -> dict:
        return {"type": self.type, "data": {"title": self.title, "text": self.body}}


class ContentSlide(_Record):
    type: Literal["content"] = "content"
    title: str = Field(default="", description="Slide heading")
    items: list[ContentItem] = Field(default_factory=list, description="Points on the slide")

    def to_wire(self) -> dict:
        return {
            "type": self.type,
            "data": {
                "title": self.title,
                "items": [{"title": item.heading, "text": item.body} for item in self.items],
            },
        }


class EndSlide(_Record):
    type: Literal["end"] = "end"

    def to_wire(self) -> dict:
        return {"type": self.type}


SlideRecord = Union[CoverSlide, ContentsSlide, TransitionSlide, ContentSlide, EndSlide]


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _cover(data: dict) -> CoverSlide:
    return CoverSlide(title=_text(data.get("title")), subtitle=_text(data.get("text")))


def _contents(data: dict) -> ContentsSlide:
    items = [_text(item) for item in _list(data.get("items")) if item]
    return ContentsSlide(items=[item for item in items if item])


def _transition(data: dict) -> TransitionSlide:
    return TransitionSlide(title=_text(data.get("title")), body=_text(data.get("text")))


def _content_item(raw: Any) -> ContentItem:
    if not isinstance(raw, dict):
        return ContentItem()
    return ContentItem(heading=_text(raw.get("title")), body=_text(raw.get("text")))


def _content(data: dict) -> ContentSlide:
    return ContentSlide(
        title=_text(data.get("title")),
        items=[_content_item(item) for item in _list(data.get("items"))],
    )


def _end(data: dict) -> EndSlide:
    return EndSlide()


_PARSERS: dict[str, Callable[[dict], SlideRecord]] = {
    "cover": _cover,
    "contents": _contents,
    "transition": _transition,
    "content": _content,
    "end": _end,
}

SLIDE_TYPES = tuple(_PARSERS)


def parse_slide_record(obj: Any) -> Optional[SlideRecord]:
    """
    Build a slide record from its wire shape.

    Args:
        obj: Decoded JSON value, typically ``{"type": ..., "data": {...}}``

    Returns:
        The matching record, or None when ``obj`` has no recognized type
    """
    if isinstance(obj, _Record) and not isinstance(obj, ContentItem):
        return obj
    if not isinstance(obj, dict):
        return None
    kind = obj.get("type")
    parser = _PARSERS.get(kind) if isinstance(kind, str) else None
    if parser is None:
        return None
    data = obj.get("data")
    return parser(data if isinstance(data, dict) else {})
