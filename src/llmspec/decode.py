"""
Decoding of metadata documents into key-value trees.

Decoders never raise. They return a ``Decoded`` pair of the parsed mapping
(or None when the document is unusable) and the warnings produced along the
way, so normalization code stays pure and independent of document syntax.

Field coercers follow the same rule: a value of the wrong type is treated as
absent (None) and the caller decides whether absence deserves a warning.
"""

from __future__ import annotations

import datetime as _dt
import math
import tomllib
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

FRONTMATTER_DELIMITER = "---"


@dataclass
class Decoded:
    """Result of decoding one document."""

    value: Optional[Dict[str, Any]]
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None


def _where(source: str) -> str:
    return f": {source}" if source else ""


def split_frontmatter(text: str) -> tuple[Optional[str], str]:
    """
    Split a markdown document into (frontmatter_yaml, body).

    Returns ``(None, text)`` when the document has no leading ``---`` block.

    Raises:
        ValueError: If the opening delimiter is never closed.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.splitlines()
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return None, text

    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONTMATTER_DELIMITER:
            return "\n".join(lines[1:i]), "\n".join(lines[i + 1:])

    raise ValueError("frontmatter block is not closed with '---'")


def decode_frontmatter(text: str, source: str = "") -> Decoded:
    """
    Decode the YAML frontmatter of a markdown document.

    A document without frontmatter decodes to an empty mapping.
    """
    try:
        block, _ = split_frontmatter(text)
    except ValueError as e:
        return Decoded(None, [f"Failed to parse frontmatter{_where(source)}: {e}"])

    if block is None:
        return Decoded({})

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        return Decoded(None, [f"Failed to parse frontmatter{_where(source)}: {e}"])

    if data is None:
        return Decoded({})
    if not isinstance(data, dict):
        return Decoded(
            None,
            [f"Frontmatter is not a mapping{_where(source)}: got {type(data).__name__}"],
        )
    return Decoded(data)


def decode_toml(text: str, source: str = "") -> Decoded:
    """Decode a TOML document."""
    try:
        return Decoded(tomllib.loads(text))
    except tomllib.TOMLDecodeError as e:
        return Decoded(None, [f"Failed to parse TOML{_where(source)}: {e}"])


def read_text(path: str) -> str:
    """Read a UTF-8 text file. Raises OSError / UnicodeDecodeError."""
    with open(path, encoding="utf-8") as f:
        return f.read()


# ── Field coercers ─────────────────────────────────────────────────────────


def is_mapping(value: Any) -> bool:
    return isinstance(value, dict)


def as_text(value: Any) -> Optional[str]:
    """Stripped non-empty string, else None."""
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def as_date_text(value: Any) -> Optional[str]:
    """Like ``as_text`` but also accepts TOML/YAML native dates."""
    if isinstance(value, (_dt.date, _dt.datetime, _dt.time)):
        return value.isoformat()
    return as_text(value)


def as_bool(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


def as_number(value: Any) -> Optional[float]:
    """Finite int or float; bools are not numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def as_string_list(value: Any) -> Optional[List[str]]:
    """Keep the string items of a list; non-lists are None."""
    if not isinstance(value, list):
        return None
    return [item for item in value if isinstance(item, str)]
