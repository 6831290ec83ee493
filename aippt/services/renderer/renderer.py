"""
Deck rendering.

Maps each slide record to one page using the fixed layout for its type.
Pages are independent of each other; output order follows input order.
"""
import logging
from typing import Any, Callable, Iterable, Optional, Union

from aippt.models.document import DocumentModel, Page, TextBlock
from aippt.models.slide import (
    ContentSlide,
    ContentsSlide,
    CoverSlide,
    EndSlide,
    SlideRecord,
    TransitionSlide,
    parse_slide_record,
)
from aippt.models.theme import Language, LocaleLabels, Theme

from . import layouts
from .layouts import BlockLayout

logger = logging.getLogger(__name__)


def _block(text: str, layout: BlockLayout, color: str) -> TextBlock:
    return TextBlock(
        text=text,
        x=layout.x,
        y=layout.y,
        width=layout.width,
        height=layout.height,
        font_size=layout.font_size,
        color=color,
        bold=layout.bold,
        centered=layout.centered,
        bulleted=layout.bulleted,
    )


def content_line(heading: str, body: str) -> str:
    """Compose one bullet of a content slide."""
    if heading:
        return f"{heading}{layouts.CONTENT_SEPARATOR}{body}"
    return body


class DeckRenderer:
    """Renders slide records into a document model."""

    def __init__(self):
        self._layouts: dict[type, Callable[[Any, Theme, LocaleLabels], list[TextBlock]]] = {
            CoverSlide: self._cover,
            ContentsSlide: self._contents,
            TransitionSlide: self._transition,
            ContentSlide: self._content,
            EndSlide: self._end,
        }

    @property
    def supported_types(self) -> tuple[type, ...]:
        return tuple(self._layouts)

    def render(
        self,
        records: Iterable[Union[SlideRecord, dict]],
        theme: Theme,
        language: Union[Language, str, None] = None,
    ) -> DocumentModel:
        """
        Render records into pages.

        Args:
            records: Slide records, or raw wire dicts from a caller
            theme: Resolved theme
            language: Language for boilerplate labels (Chinese when unrecognized)

        Returns:
            Document model with one page per recognized record
        """
        labels = Language.parse(language).labels
        pages = []
        for record in records:
            page = self.render_page(record, theme, labels)
            if page is not None:
                pages.append(page)
        return DocumentModel(pages=tuple(pages))

    def render_page(self, record: Any, theme: Theme, labels: LocaleLabels) -> Optional[Page]:
        """Render a single record, or return None if it has no usable type."""
        if isinstance(record, dict):
            record = parse_slide_record(record)
        layout = self._layouts.get(type(record))
        if layout is None:
            logger.debug(f"Skipping record without a known slide type: {type(record).__name__}")
            return None
        return Page(background=theme.background, blocks=tuple(layout(record, theme, labels)))

    def _cover(self, slide: CoverSlide, theme: Theme, labels: LocaleLabels) -> list[TextBlock]:
        blocks = [_block(slide.title or labels.cover_placeholder, layouts.COVER_TITLE, theme.accent)]
        if slide.subtitle:
            blocks.append(_block(slide.subtitle, layouts.COVER_SUBTITLE, theme.font_color))
        return blocks

    def _contents(self, slide: ContentsSlide, theme: Theme, labels: LocaleLabels) -> list[TextBlock]:
        blocks = [_block(labels.contents, layouts.CONTENTS_HEADING, theme.accent)]
        items = [item for item in slide.items if item]
        if items:
            blocks.append(_block("\n".join(items), layouts.CONTENTS_LIST, theme.font_color))
        return blocks

    def _transition(self, slide: TransitionSlide, theme: Theme, labels: LocaleLabels) -> list[TextBlock]:
        blocks = [_block(slide.title or labels.transition_placeholder, layouts.TRANSITION_TITLE, theme.accent)]
        if slide.body:
            blocks.append(_block(slide.body, layouts.TRANSITION_BODY, theme.font_color))
        return blocks

    def _content(self, slide: ContentSlide, theme: Theme, labels: LocaleLabels) -> list[TextBlock]:
        blocks = []
        if slide.title:
            blocks.append(_block(slide.title, layouts.CONTENT_HEADING, theme.accent))
        lines = [content_line(item.heading, item.body) for item in slide.items]
        lines = [line for line in lines if line]
        if lines:
            blocks.append(_block("\n".join(lines), layouts.CONTENT_LIST, theme.font_color))
        return blocks

    def _end(self, slide: EndSlide, theme: Theme, labels: LocaleLabels) -> list[TextBlock]:
        return [_block(labels.closing, layouts.END_TEXT, theme.accent)]
