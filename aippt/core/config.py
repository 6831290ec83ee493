"""
Application settings using Pydantic for validation and type safety.
Security: All sensitive values loaded from environment variables.
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class ModelConfig(BaseModel):
    """Resolved upstream chat-completion target for one public model name."""

    provider: str
    model: str
    url: str
    api_key: Optional[str] = None
    temperature: float = 0.7
    max_tokens: int = 4000


class Settings(BaseSettings):
    """Application configuration with validation and security best practices."""

    # Application
    app_name: str = Field(default="AIPPT", description="Application name")
    debug: bool = Field(default=False, description="Debug mode flag")

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3001, ge=1, le=65535, description="Server port")

    # Paths (relative to workspace root)
    data_dir: Path = Field(default=Path("data"), description="Data directory")
    themes_dir: Optional[Path] = Field(
        default=None,
        description="Directory of template theme JSON files (bundled themes when unset)"
    )
    exports_url_prefix: str = Field(
        default="/exports",
        description="URL prefix under which exported decks are served"
    )

    @property
    def export_dir(self) -> Path:
        """Get exported decks directory path."""
        return self.data_dir / "exports"

    # Zhipu AI Configuration
    zhipu_api_key: Optional[str] = Field(default=None, description="Zhipu API key (sensitive)")
    zhipu_base_url: str = Field(
        default="https://open.bigmodel.cn/api/paas/v4",
        description="Zhipu API base URL"
    )

    # Doubao Configuration
    doubao_api_key: Optional[str] = Field(default=None, description="Doubao API key (sensitive)")
    doubao_base_url: str = Field(
        default="https://ark.cn-beijing.volces.com/api/v3",
        description="Doubao API base URL"
    )

    # OpenAI-compatible Configuration
    openai_api_key: Optional[str] = Field(default=None, description="OpenAI API key (sensitive)")
    openai_base_url: str = Field(
        default="https://api.openai.com/v1",
        description="OpenAI-compatible API base URL"
    )

    # LLM request behaviour
    llm_timeout: int = Field(
        default=120,
        ge=5,
        le=600,
        description="Upstream chat completion timeout in seconds"
    )
    default_writing_model: str = Field(
        default="ark-doubao-seed-1.6-flash",
        description="Model used by the AI writing tool when none is requested"
    )

    # CORS Configuration
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    @property
    def model_configs(self) -> dict[str, ModelConfig]:
        """Map public model names to their provider endpoints."""
        zhipu_url = f"{self.zhipu_base_url.rstrip('/')}/chat/completions"
        doubao_url = f"{self.doubao_base_url.rstrip('/')}/chat/completions"
        openai_url = f"{self.openai_base_url.rstrip('/')}/chat/completions"
        return {
            "GLM-4.5-Flash": ModelConfig(
                provider="zhipu", model="glm-4-flash", url=zhipu_url,
                api_key=self.zhipu_api_key,
            ),
            "ark-doubao-seed-1.6-flash": ModelConfig(
                provider="doubao", model="doubao-seed-1.6-flash", url=doubao_url,
                api_key=self.doubao_api_key,
            ),
            "gemini-3-pro-preview": ModelConfig(
                provider="openai", model="gemini-3-pro-preview", url=openai_url,
                api_key=self.openai_api_key, temperature=0.5, max_tokens=4096,
            ),
            "gpt-4": ModelConfig(
                provider="openai", model="gpt-4", url=openai_url,
                api_key=self.openai_api_key, temperature=0.5, max_tokens=4096,
            ),
        }

    @property
    def model_names(self) -> list[str]:
        """Public model names accepted by the API."""
        return list(self.model_configs)

    @field_validator("data_dir")
    @classmethod
    def validate_data_dir(cls, v: Path) -> Path:
        """Ensure data directory path is valid."""
        return Path(v)

    def ensure_directories(self) -> None:
        """Create required directories if they don't exist."""
        for dir_path in [
            self.data_dir,
            self.export_dir,
        ]:
            dir_path.mkdir(parents=True, exist_ok=True)

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        env_prefix = ""
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Only the application entry point uses this; services receive their
    settings explicitly.
    """
    return Settings()
