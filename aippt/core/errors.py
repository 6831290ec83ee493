"""
Typed errors surfaced to API callers.

Each error carries a stable machine-readable category, a human readable
message and a bounded details string.
"""
from typing import Any, Optional

MAX_DETAILS_LENGTH = 2000


def bounded_details(details: Any, limit: int = MAX_DETAILS_LENGTH) -> str:
    """Render arbitrary details as a plain string capped at ``limit`` characters."""
    if details is None:
        return ""
    if isinstance(details, bytes):
        text = details.decode("utf-8", errors="replace")
    else:
        text = details if isinstance(details, str) else repr(details)
    if len(text) > limit:
        return text[:limit] + "..."
    return text


class AIPPTError(Exception):
    """Base error with a stable category and an HTTP status."""

    category = "internal_error"
    status_code = 500

    def __init__(
        self,
        message: str,
        details: Any = None,
        category: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = bounded_details(details)
        if category is not None:
            self.category = category
        if status_code is not None:
            self.status_code = status_code

    def __str__(self) -> str:
        return f"{self.category}: {self.message}"

    def to_dict(self) -> dict:
        return {
            "error": self.message,
            "category": self.category,
            "details": self.details,
            "status": self.status_code,
        }


class InvalidRequestError(AIPPTError):
    """Missing or unparseable caller input; nothing was processed."""

    category = "missing_parameters"
    status_code = 400


class UnsupportedModelError(InvalidRequestError):
    category = "unsupported_model"


class NoSlidesError(AIPPTError):
    """No usable slide record survived extraction or filtering."""

    category = "no_slides"
    status_code = 422


class UpstreamError(AIPPTError):
    """The language-model provider failed or returned nothing."""

    category = "upstream_error"
    status_code = 502


class ExportError(AIPPTError):
    """The rendered deck could not be written to the export directory."""

    category = "export_failed"
    status_code = 500
