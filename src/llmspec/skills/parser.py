"""
SKILL.md frontmatter parsing.

Only ``name`` and ``description`` are read. The skill body is never
inspected. Parsing never raises: a broken document yields a record named
after its folder with an empty description, plus warnings.
"""

from __future__ import annotations

from typing import List, Tuple

from llmspec.decode import as_text, decode_frontmatter, read_text
from llmspec.skills.models import SkillMetadata


def normalize_skill_metadata(
    data: dict,
    folder_name: str,
    source: str = "",
) -> Tuple[SkillMetadata, List[str]]:
    """Normalize decoded frontmatter into SkillMetadata."""
    warnings: List[str] = []
    where = f" ({source})" if source else ""

    name = as_text(data.get("name"))
    if name is None:
        warnings.append(
            f"Skill '{folder_name}' missing/empty frontmatter field: name; "
            f"using folder name{where}"
        )

    description = as_text(data.get("description"))
    if description is None:
        warnings.append(f"Skill '{folder_name}' missing/empty frontmatter field: description{where}")

    return SkillMetadata(name=name or folder_name, description=description or ""), warnings


def parse_skill_metadata(
    text: str,
    folder_name: str,
    source: str = "",
) -> Tuple[SkillMetadata, List[str]]:
    """
    Parse SKILL.md text.

    Returns:
        Tuple of (SkillMetadata, warnings)
    """
    decoded = decode_frontmatter(text, source)
    if not decoded.ok:
        return SkillMetadata(name=folder_name, description=""), decoded.warnings

    metadata, warnings = normalize_skill_metadata(decoded.value or {}, folder_name, source)
    return metadata, decoded.warnings + warnings


def read_skill_metadata(path: str, folder_name: str) -> Tuple[SkillMetadata, List[str]]:
    """Read and parse a SKILL.md file; unreadable files fall back like broken ones."""
    try:
        text = read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        return (
            SkillMetadata(name=folder_name, description=""),
            [f"Failed to read SKILL.md: {path}: {e}"],
        )
    return parse_skill_metadata(text, folder_name, source=path)
