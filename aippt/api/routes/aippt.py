"""AIPPT tool endpoints."""
import json
import logging
from typing import Any, AsyncIterator, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse

from aippt.core.errors import AIPPTError, NoSlidesError
from aippt.services.aippt import (
    AIPPTService,
    DeckRequest,
    OutlineRequest,
    SlidesRequest,
    WritingRequest,
    require,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/tools", tags=["aippt"])

STREAM_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


def get_aippt_service(request: Request) -> AIPPTService:
    """Get the service instance owned by the running application."""
    return request.app.state.aippt_service


async def _started(
    stream: AsyncIterator[str], empty_error: Optional[AIPPTError] = None
) -> AsyncIterator[str]:
    """
    Pull the first item before the response starts.

    Errors raised before any output (bad parameters, provider failures) then
    propagate as a normal JSON error instead of a broken stream. When
    ``empty_error`` is given, a stream that ends without output raises it.
    """
    try:
        first = await stream.__anext__()
    except StopAsyncIteration:
        if empty_error is not None:
            raise empty_error from None
        first = None

    async def body():
        try:
            if first is not None:
                yield first
            async for item in stream:
                yield item
        except Exception as e:
            logger.error(f"Stream interrupted: {e}")
        finally:
            await stream.aclose()

    return body()


def _event_stream(body: AsyncIterator[str]) -> StreamingResponse:
    return StreamingResponse(body, media_type="text/event-stream", headers=STREAM_HEADERS)


async def _json_lines(records) -> AsyncIterator[str]:
    async for record in records:
        yield json.dumps(record.to_wire(), ensure_ascii=False) + "\n"


@router.post("/aippt_outline")
async def generate_outline(
    request: OutlineRequest,
    service: AIPPTService = Depends(get_aippt_service),
):
    """
    Generate a presentation outline.

    Streams the model's outline text as it is produced.
    """
    require(content=request.content, language=request.language, model=request.model)
    stream = service.stream_outline(request.content, request.language, request.model)
    return _event_stream(await _started(stream))


@router.post("/aippt")
async def generate_slides(
    request: SlidesRequest,
    service: AIPPTService = Depends(get_aippt_service),
):
    """
    Generate slide data from an outline.

    Streams one JSON slide record per line, each forwarded as soon as the
    model finishes the line that contains it. Noise lines are dropped.
    """
    require(
        content=request.content,
        language=request.language,
        style=request.style,
        model=request.model,
    )
    records = service.stream_slides(request.content, request.language, request.style, request.model)
    empty = NoSlidesError("AI did not generate any slide content")
    return _event_stream(await _started(_json_lines(records), empty_error=empty))


@router.post("/aippt_with_action")
async def generate_deck(
    request: DeckRequest,
    service: AIPPTService = Depends(get_aippt_service),
) -> dict[str, Any]:
    """
    Generate a deck and export it as PPTX.

    Uses ``slides`` directly when supplied, otherwise generates slides from
    ``content`` with ``model``. Returns the download URL of the deck.
    """
    result = await service.build_deck(
        language=request.language,
        style=request.style,
        slides=request.slides,
        content=request.content,
        model=request.model,
    )
    return {
        "success": True,
        "message": "PPTX generated",
        "url": result.url,
        "file_name": result.file_name,
        "slide_count": result.slide_count,
        "slides": result.slides,
    }


@router.post("/ai_writing")
async def ai_writing(
    request: WritingRequest,
    service: AIPPTService = Depends(get_aippt_service),
):
    """Rewrite, expand or condense a piece of text, streaming the result."""
    require(content=request.content, command=request.command)
    stream = service.stream_rewrite(request.content, request.command, request.model)
    return _event_stream(await _started(stream))
