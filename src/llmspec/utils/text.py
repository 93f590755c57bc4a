"""Text helpers: slugs, truncation, byte formatting and name ordering."""

from __future__ import annotations

import math
import re
import unicodedata
from typing import Tuple

ELLIPSIS = "…"

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """
    Derive a URL-safe slug from a group name.

    ``ProductManagement`` and ``product management`` both become
    ``product-management``.
    """
    with_dashes = _CAMEL_BOUNDARY.sub(r"\1-\2", name)
    slug = _NON_ALNUM.sub("-", with_dashes.strip().lower())
    return slug.strip("-")


def truncate(text: object, max_chars: int) -> str:
    """Cut text to ``max_chars`` characters, ending in a single ellipsis when cut."""
    if not isinstance(text, str):
        return ""
    if max_chars <= 0:
        return ""
    if len(text) <= max_chars:
        return text
    if max_chars == 1:
        return ELLIPSIS
    return text[: max_chars - 1] + ELLIPSIS


def format_bytes(size: float) -> str:
    """Human-readable size: ``0 B``, ``512 B``, ``1.5 KB``."""
    if not isinstance(size, (int, float)) or not math.isfinite(size) or size <= 0:
        return "0 B"
    units = ["B", "KB", "MB", "GB"]
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(units) - 1:
        value /= 1024
        unit += 1
    if unit == 0:
        return f"{int(value)} B"
    return f"{value:.1f} {units[unit]}"


def name_sort_key(name: str) -> Tuple[str, str]:
    """
    Sort key for display names.

    Case and accents are ignored for the primary comparison; the raw name
    breaks ties so the order never depends on directory listing order.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name
