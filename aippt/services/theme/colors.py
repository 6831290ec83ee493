"""Color normalization for untrusted theme data."""
import re
from typing import Any

HEX_PATTERN = re.compile(r"^[0-9a-fA-F]{6}$")
RGB_PATTERN = re.compile(r"rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})", re.IGNORECASE)


def _clamp(channel: int) -> int:
    return max(0, min(255, channel))


def normalize_color(value: Any, fallback: str) -> str:
    """
    Convert a color notation to canonical ``RRGGBB`` upper-case hex.

    Accepts ``2e75b6``, ``#2E75B6``, ``rgb(46, 117, 182)`` and
    ``rgba(46, 117, 182, 0.5)``. Anything else returns ``fallback`` unchanged.
    """
    if not value or not isinstance(value, str):
        return fallback

    candidate = value.strip()
    if candidate.startswith("#"):
        candidate = candidate[1:]
    if HEX_PATTERN.match(candidate):
        return candidate.upper()

    match = RGB_PATTERN.search(value)
    if match:
        return "".join(f"{_clamp(int(channel)):02X}" for channel in match.groups())

    return fallback
