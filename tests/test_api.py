"""
Unit tests for API endpoints.
"""
import json
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from aippt.core import UpstreamError
from aippt.main import create_app
from aippt.services import AIPPTService
from aippt.services.extraction import END_OF_STREAM


def streaming(*chunks):
    async def stream(model, messages):
        for chunk in chunks:
            yield chunk
    return stream


@pytest.fixture
def llm():
    mock = Mock()
    mock.models = ["gpt-4"]
    mock.complete = AsyncMock(return_value='```json\n{"type": "cover", "data": {"title": "A"}}\n{"type": "end"}\n```')
    mock.stream = streaming("Out", "line", END_OF_STREAM)
    return mock


@pytest.fixture
def app(settings, llm):
    """Create a test FastAPI application."""
    return create_app(settings, service=AIPPTService(settings, llm=llm))


@pytest.fixture
def client(app):
    """Create a test client."""
    return TestClient(app)


class TestServiceRoutes:
    """Tests for index and health endpoints."""

    def test_health(self, client, settings):
        """Test health reports status and models."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["models"] == settings.model_names
        assert "timestamp" in data

    def test_index_lists_endpoints(self, client):
        """Test the root route describes the service."""
        data = client.get("/").json()
        assert any("aippt_with_action" in endpoint for endpoint in data["endpoints"])

    def test_unknown_route(self, client):
        """Test unknown routes return a JSON 404."""
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.json()["category"] == "not_found"


class TestOutlineAPI:
    """Tests for the outline endpoint."""

    def test_streams_outline(self, client):
        """Test outline text is streamed."""
        response = client.post("/tools/aippt_outline", json={
            "content": "Solar power", "language": "English", "model": "gpt-4",
        })

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/event-stream")
        assert response.text == "Outline"

    def test_missing_parameters(self, client):
        """Test missing parameters are rejected before streaming."""
        response = client.post("/tools/aippt_outline", json={"content": "Solar power"})

        assert response.status_code == 400
        data = response.json()
        assert data["category"] == "missing_parameters"
        assert "language" in data["error"]

    def test_upstream_failure_before_stream(self, client, llm):
        """Test provider failures are reported as JSON errors."""
        async def failing(model, messages):
            raise UpstreamError("AI service rate limit reached", details="429")
            yield  # pragma: no cover

        llm.stream = failing
        response = client.post("/tools/aippt_outline", json={
            "content": "Solar power", "language": "English", "model": "gpt-4",
        })

        assert response.status_code == 502
        assert response.json()["category"] == "upstream_error"


class TestSlidesAPI:
    """Tests for the streaming slide endpoint."""

    def test_streams_json_lines(self, client, llm):
        """Test each recognized record is written as one JSON line."""
        llm.stream = streaming(
            "```json\n{\"type\": \"cover\", \"data\": {\"ti",
            "tle\": \"A\"}}\nnoise\n{\"type\": \"end\"}",
            "\n```",
            END_OF_STREAM,
        )

        response = client.post("/tools/aippt", json={
            "content": "outline", "language": "English", "style": "通用", "model": "gpt-4",
        })

        assert response.status_code == 200
        lines = [json.loads(line) for line in response.text.splitlines()]
        assert lines == [
            {"type": "cover", "data": {"title": "A", "text": ""}},
            {"type": "end"},
        ]

    def test_no_usable_records(self, client, llm):
        """Test model output without any slide record is a terminal failure."""
        llm.stream = streaming("I cannot help with that.\n", "```\n", END_OF_STREAM)

        response = client.post("/tools/aippt", json={
            "content": "outline", "language": "English", "style": "通用", "model": "gpt-4",
        })

        assert response.status_code == 422
        assert response.json()["category"] == "no_slides"

    def test_missing_style(self, client):
        """Test style is required."""
        response = client.post("/tools/aippt", json={
            "content": "outline", "language": "English", "model": "gpt-4",
        })
        assert response.status_code == 400


class TestDeckAPI:
    """Tests for deck generation with export."""

    def test_with_direct_slides(self, client, wire_slides, settings):
        """Test supplied slides are exported and downloadable."""
        response = client.post("/tools/aippt_with_action", json={
            "language": "English", "style": "学术风", "slides": wire_slides,
        })

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["url"].startswith("/exports/aippt_")
        assert len(data["slides"]) == 5
        assert data["slide_count"] == 5
        assert data["url"].endswith(data["file_name"])

        download = client.get(data["url"])
        assert download.status_code == 200
        assert download.content[:2] == b"PK"

    def test_with_slides_string(self, client, wire_slides):
        """Test slides may be sent as a JSON string."""
        response = client.post("/tools/aippt_with_action", json={
            "language": "English", "style": "通用", "slides": json.dumps(wire_slides),
        })
        assert response.status_code == 200

    def test_unparseable_slides_string(self, client):
        """Test a malformed slides string is an input error."""
        response = client.post("/tools/aippt_with_action", json={
            "language": "English", "style": "通用", "slides": "[{broken",
        })

        assert response.status_code == 400
        assert response.json()["category"] == "invalid_slides"

    def test_no_usable_slides(self, client):
        """Test slides without a known type are a terminal failure."""
        response = client.post("/tools/aippt_with_action", json={
            "language": "English", "style": "通用", "slides": [{"type": "chart"}],
        })

        assert response.status_code == 422
        assert response.json()["category"] == "no_slides"

    def test_generates_when_no_slides(self, client, llm):
        """Test content and model drive generation when slides are absent."""
        response = client.post("/tools/aippt_with_action", json={
            "language": "English", "style": "通用", "content": "outline", "model": "gpt-4",
        })

        assert response.status_code == 200
        assert [s["type"] for s in response.json()["slides"]] == ["cover", "end"]
        llm.complete.assert_awaited_once()

    def test_missing_content_without_slides(self, client):
        """Test content and model are required without slides."""
        response = client.post("/tools/aippt_with_action", json={
            "language": "English", "style": "通用",
        })
        assert response.status_code == 400

    def test_wrongly_typed_field(self, client):
        """Test body validation errors carry a category."""
        response = client.post("/tools/aippt_with_action", json={
            "language": 1, "style": "通用", "slides": [],
        })

        assert response.status_code == 422
        data = response.json()
        assert data["category"] == "invalid_request"
        assert "language" in data["details"]

    def test_missing_language(self, client, wire_slides):
        """Test language is always required."""
        response = client.post("/tools/aippt_with_action", json={
            "style": "通用", "slides": wire_slides,
        })
        assert response.status_code == 400


class TestWritingAPI:
    """Tests for the AI writing endpoint."""

    def test_streams_result(self, client):
        """Test rewritten text is streamed."""
        response = client.post("/tools/ai_writing", json={"content": "text", "command": "改写"})

        assert response.status_code == 200
        assert response.text == "Outline"

    def test_missing_command(self, client):
        """Test command is required."""
        response = client.post("/tools/ai_writing", json={"content": "text"})
        assert response.status_code == 400
