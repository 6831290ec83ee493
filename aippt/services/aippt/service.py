"""
AIPPT Service

Orchestrates outline generation, slide extraction, deck rendering and export.
Every call works on its own records, theme and document, so independent
requests can run concurrently without coordination.
"""
import asyncio
import json
import logging
from typing import Any, AsyncIterator, Optional, Sequence

from aippt.core.config import Settings
from aippt.core.errors import InvalidRequestError, NoSlidesError, UpstreamError
from aippt.models.slide import SlideRecord, parse_slide_record
from aippt.models.theme import Language
from aippt.services.export import ExportManager, ExportResult
from aippt.services.extraction import END_OF_STREAM, aiter_records, extract_records
from aippt.services.llm import (
    LLMClient,
    build_outline_prompt,
    build_slides_prompt,
    build_writing_prompt,
    user_message,
)
from aippt.services.renderer import DeckRenderer
from aippt.services.theme import JsonThemeStore, ThemeResolver

from .models import DeckResult

logger = logging.getLogger(__name__)


def require(**params: Any) -> None:
    """Reject a request when any named parameter is empty."""
    missing = [name for name, value in params.items() if not value]
    if missing:
        raise InvalidRequestError(f"Missing required parameters: {', '.join(missing)}")


def coerce_slides(slides: Any) -> list[SlideRecord]:
    """
    Turn caller-supplied slides into slide records.

    Args:
        slides: A list of wire records, or a JSON string holding one

    Raises:
        InvalidRequestError: if the value is not a non-empty list
        NoSlidesError: if no element has a recognized slide type
    """
    if isinstance(slides, str):
        try:
            slides = json.loads(slides)
        except ValueError as e:
            raise InvalidRequestError(
                "slides must be a valid JSON string or array",
                details=str(e),
                category="invalid_slides",
            ) from e

    if not isinstance(slides, list) or not slides:
        raise InvalidRequestError("slides must be a non-empty array", category="invalid_slides")

    records = [record for record in map(parse_slide_record, slides) if record is not None]
    if not records:
        raise NoSlidesError("slides contain no record with a recognized type")
    return records


class AIPPTService:
    """Service for AI-assisted presentation generation."""

    def __init__(
        self,
        settings: Settings,
        llm: Optional[LLMClient] = None,
        theme_resolver: Optional[ThemeResolver] = None,
        renderer: Optional[DeckRenderer] = None,
        exporter: Optional[ExportManager] = None,
    ):
        self._settings = settings
        self._llm = llm or LLMClient(settings)
        self._themes = theme_resolver or ThemeResolver(JsonThemeStore(settings.themes_dir))
        self._renderer = renderer or DeckRenderer()
        self._exporter = exporter or ExportManager(
            settings.export_dir, url_prefix=settings.exports_url_prefix
        )

    @property
    def models(self) -> list[str]:
        return self._llm.models

    # -------------------------------------------------------------------------
    # Language model backed generation
    # -------------------------------------------------------------------------

    async def stream_outline(self, content: str, language: Any, model: str) -> AsyncIterator[str]:
        """Stream outline text deltas for a topic."""
        require(content=content, language=language, model=model)
        prompt = build_outline_prompt(content, Language.parse(language))
        async for delta in self._llm.stream(model, user_message(prompt)):
            if delta == END_OF_STREAM:
                return
            yield delta

    async def stream_slides(
        self, content: str, language: Any, style: str, model: str
    ) -> AsyncIterator[SlideRecord]:
        """Stream slide records as soon as each line of model output completes."""
        require(content=content, language=language, style=style, model=model)
        prompt = build_slides_prompt(content, Language.parse(language), style)
        async for record in aiter_records(self._llm.stream(model, user_message(prompt))):
            yield record

    async def generate_slides(
        self, content: str, language: Any, style: str, model: str
    ) -> list[SlideRecord]:
        """
        Generate slide records in batch mode.

        Raises:
            UpstreamError: if the model returns no content
            NoSlidesError: if the content holds no usable record
        """
        require(content=content, language=language, style=style, model=model)
        prompt = build_slides_prompt(content, Language.parse(language), style)
        raw_text = await self._llm.complete(model, user_message(prompt))
        if not raw_text:
            raise UpstreamError("AI returned no content", category="empty_completion")

        records = extract_records(raw_text)
        if not records:
            raise NoSlidesError("AI did not generate any slide content", details=raw_text)
        logger.info(f"Extracted {len(records)} slides from model output")
        return records

    async def stream_rewrite(self, content: str, command: str, model: Optional[str] = None) -> AsyncIterator[str]:
        """Stream the result of a writing command (rewrite, expand, condense)."""
        require(content=content, command=command)
        prompt = build_writing_prompt(content, command)
        async for delta in self._llm.stream(model or self._settings.default_writing_model, user_message(prompt)):
            if delta == END_OF_STREAM:
                return
            yield delta

    # -------------------------------------------------------------------------
    # Rendering and export
    # -------------------------------------------------------------------------

    def render_deck(self, records: Sequence[SlideRecord], language: Any, style: str) -> ExportResult:
        """Resolve the theme, render the records and export the deck."""
        theme = self._themes.resolve(style)
        document = self._renderer.render(records, theme, language)
        if not len(document):
            raise NoSlidesError("No slide could be rendered")
        return self._exporter.export(document)

    async def build_deck(
        self,
        language: Any,
        style: str,
        slides: Any = None,
        content: Optional[str] = None,
        model: Optional[str] = None,
    ) -> DeckResult:
        """
        Build and export a deck.

        Directly supplied ``slides`` take precedence; otherwise ``content`` and
        ``model`` are required and the slides are generated by the model.
        """
        require(language=language, style=style)

        if slides is not None and slides != "":
            records = coerce_slides(slides)
        else:
            if not content or not model:
                raise InvalidRequestError("content and model are required when slides are not provided")
            records = await self.generate_slides(content, language, style, model)

        result = await asyncio.to_thread(self.render_deck, records, language, style)
        return DeckResult(
            url=result.url,
            file_name=result.file_name,
            slide_count=len(records),
            slides=[record.to_wire() for record in records],
        )
