"""
Pytest configuration and fixtures.
"""
import pytest

from aippt.core import Settings


@pytest.fixture
def settings(tmp_path):
    """Settings writing into a temporary data directory."""
    return Settings(data_dir=tmp_path / "data")


@pytest.fixture
def wire_slides():
    """One record of every slide type in wire form."""
    return [
        {"type": "cover", "data": {"title": "AI in Education", "text": "A short tour"}},
        {"type": "contents", "data": {"items": ["Background", "Practice"]}},
        {"type": "transition", "data": {"title": "Background", "text": "Where we stand"}},
        {
            "type": "content",
            "data": {
                "title": "Practice",
                "items": [
                    {"title": "Tutoring", "text": "Personal feedback"},
                    {"text": "Grading support"},
                ],
            },
        },
        {"type": "end"},
    ]


@pytest.fixture
def clean_environment(monkeypatch):
    """Provide a clean environment for tests."""
    env_vars = [
        "ZHIPU_API_KEY",
        "DOUBAO_API_KEY",
        "OPENAI_API_KEY",
        "OPENAI_BASE_URL",
        "PORT",
        "DATA_DIR",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)
