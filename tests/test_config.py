"""
Unit tests for configuration module.
"""
import os
from unittest.mock import patch

import pytest

from aippt.core import Settings, get_settings


class TestSettings:
    """Tests for Settings class."""

    def test_default_values(self, clean_environment):
        """Test that default values are set correctly."""
        settings = Settings()

        assert settings.app_name == "AIPPT"
        assert settings.host == "0.0.0.0"
        assert settings.port == 3001
        assert settings.debug is False
        assert settings.exports_url_prefix == "/exports"

    def test_port_validation(self):
        """Test that port validation works."""
        with pytest.raises(ValueError):
            Settings(port=0)  # Below minimum

        with pytest.raises(ValueError):
            Settings(port=70000)  # Above maximum

        settings = Settings(port=8080)
        assert settings.port == 8080

    def test_export_dir_property(self):
        """Test that the export directory lives under the data directory."""
        settings = Settings(data_dir="somewhere")

        assert settings.export_dir.name == "exports"
        assert settings.export_dir.parent.name == "somewhere"

    @patch.dict(os.environ, {
        "ZHIPU_API_KEY": "zhipu-key",
        "OPENAI_BASE_URL": "https://gateway.example.com/v1/",
    })
    def test_model_configs_from_environment(self):
        """Test provider keys and base URLs are read from the environment."""
        settings = Settings()
        configs = settings.model_configs

        assert configs["GLM-4.5-Flash"].api_key == "zhipu-key"
        assert configs["GLM-4.5-Flash"].model == "glm-4-flash"
        assert configs["gpt-4"].url == "https://gateway.example.com/v1/chat/completions"

    def test_provider_sampling_parameters(self):
        """Test OpenAI-compatible models use the safer token limit."""
        configs = Settings().model_configs

        assert configs["gpt-4"].temperature == 0.5
        assert configs["gpt-4"].max_tokens == 4096
        assert configs["ark-doubao-seed-1.6-flash"].temperature == 0.7
        assert configs["ark-doubao-seed-1.6-flash"].max_tokens == 4000

    def test_model_names(self):
        """Test every public model name is listed."""
        assert Settings().model_names == [
            "GLM-4.5-Flash",
            "ark-doubao-seed-1.6-flash",
            "gemini-3-pro-preview",
            "gpt-4",
        ]

    def test_ensure_directories(self, tmp_path):
        """Test directory creation."""
        settings = Settings(data_dir=tmp_path / "data")
        settings.ensure_directories()

        assert settings.data_dir.exists()
        assert settings.export_dir.exists()


class TestGetSettings:
    """Tests for get_settings function."""

    def test_returns_settings_instance(self):
        """Test that get_settings returns a Settings instance."""
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_cached_instance(self):
        """Test that get_settings returns the same cached instance."""
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
