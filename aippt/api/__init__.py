"""API routes for AIPPT."""

from .routes import aippt

__all__ = [
    "aippt",
]
