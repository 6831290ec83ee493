"""
Chat completion client for OpenAI-compatible providers.

Supports Zhipu, Doubao and OpenAI-compatible gateways. Requests are passed
through without retries; provider HTTP errors surface as UpstreamError.
"""
import asyncio
import json
import logging
from typing import Any, AsyncIterator, Optional

import aiohttp

from aippt.core.config import ModelConfig, Settings
from aippt.core.errors import UnsupportedModelError, UpstreamError
from aippt.services.extraction import END_OF_STREAM, LineSplitter

logger = logging.getLogger(__name__)

SSE_DATA_PREFIX = "data:"

STATUS_MESSAGES = {
    429: "AI service rate limit reached, please retry later",
    401: "AI service authentication failed, check the API key",
}
UNAVAILABLE_MESSAGE = "AI service is temporarily unavailable, please retry later"
GENERIC_MESSAGE = "AI service error"


def upstream_error(status: int, details: Any = None) -> UpstreamError:
    """Build an UpstreamError with a message chosen from the provider status."""
    if status in STATUS_MESSAGES:
        message = STATUS_MESSAGES[status]
    elif status >= 500:
        message = UNAVAILABLE_MESSAGE
    else:
        message = GENERIC_MESSAGE
    return UpstreamError(message, details=details, status_code=status if status >= 500 else 502)


def parse_sse_line(line: str) -> Optional[str]:
    """
    Extract the content delta from one server-sent event line.

    Returns:
        The delta text, ``END_OF_STREAM`` for ``data: [DONE]``, or None
        for lines that carry no content
    """
    line = line.strip()
    if not line.startswith(SSE_DATA_PREFIX):
        return None
    data = line[len(SSE_DATA_PREFIX):].strip()
    if data == END_OF_STREAM:
        return END_OF_STREAM
    try:
        payload = json.loads(data)
    except ValueError:
        logger.warning(f"Failed to parse stream data: {data[:120]}")
        return None
    try:
        content = payload["choices"][0]["delta"].get("content")
    except (KeyError, IndexError, TypeError, AttributeError):
        return None
    return content or None


class LLMClient:
    """Thin async client over the configured chat completion endpoints."""

    def __init__(self, settings: Settings):
        self._configs = settings.model_configs
        self._timeout = aiohttp.ClientTimeout(total=settings.llm_timeout)

    @property
    def models(self) -> list[str]:
        return list(self._configs)

    def get_model_config(self, model: str) -> ModelConfig:
        config = self._configs.get(model)
        if config is None:
            raise UnsupportedModelError(f"Unsupported model: {model}")
        return config

    def build_request(self, model: str, messages: list[dict], stream: bool) -> tuple[str, dict, dict]:
        """Build the URL, headers and JSON body for a chat completion."""
        config = self.get_model_config(model)
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {config.api_key or ''}",
        }
        body = {
            "model": config.model,
            "messages": messages,
            "stream": stream,
            "temperature": config.temperature,
            "max_tokens": config.max_tokens,
        }
        return config.url, headers, body

    async def complete(self, model: str, messages: list[dict]) -> str:
        """Run a non-streaming chat completion and return the message content."""
        url, headers, body = self.build_request(model, messages, stream=False)
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.post(url, json=body, headers=headers) as resp:
                    if resp.status != 200:
                        details = await resp.text()
                        logger.error(f"AI API call failed with status {resp.status}: {details[:500]}")
                        raise upstream_error(resp.status, details)
                    data = await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"AI API call failed: {e}")
            raise UpstreamError(UNAVAILABLE_MESSAGE, details=str(e)) from e

        try:
            return data["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError):
            return ""

    async def stream(self, model: str, messages: list[dict]) -> AsyncIterator[str]:
        """
        Run a streaming chat completion.

        Yields content deltas as they arrive, then ``END_OF_STREAM`` when the
        provider sends ``data: [DONE]``.
        """
        url, headers, body = self.build_request(model, messages, stream=True)
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.post(url, json=body, headers=headers) as resp:
                    if resp.status != 200:
                        details = await resp.text()
                        logger.error(f"AI stream failed with status {resp.status}: {details[:500]}")
                        raise upstream_error(resp.status, details)

                    lines = LineSplitter()
                    async for chunk in resp.content.iter_any():
                        for line in lines.feed(chunk):
                            delta = parse_sse_line(line)
                            if delta == END_OF_STREAM:
                                yield END_OF_STREAM
                                return
                            if delta:
                                yield delta
                    for line in lines.flush():
                        delta = parse_sse_line(line)
                        if delta:
                            yield delta
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"AI stream failed: {e}")
            raise UpstreamError(UNAVAILABLE_MESSAGE, details=str(e)) from e
