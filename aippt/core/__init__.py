"""Core configuration module for AIPPT."""

from .config import ModelConfig, Settings, get_settings
from .errors import (
    AIPPTError,
    ExportError,
    InvalidRequestError,
    NoSlidesError,
    UnsupportedModelError,
    UpstreamError,
)
from .logging import get_logger, setup_logging

__all__ = [
    "Settings",
    "ModelConfig",
    "get_settings",
    "setup_logging",
    "get_logger",
    "AIPPTError",
    "InvalidRequestError",
    "UnsupportedModelError",
    "NoSlidesError",
    "UpstreamError",
    "ExportError",
]
