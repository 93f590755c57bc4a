"""Projection of assembled skills into the public manifest and the internal catalog."""

from __future__ import annotations

from typing import List, Tuple

from llmspec.catalog import GroupEntry
from llmspec.config import DOWNLOADS_URL_PATH, PUBLIC_DESC_MAX_CHARS
from llmspec.skills.models import SkillGroup, SkillRecord, SkillsManifest
from llmspec.utils.text import truncate

SkillGroupEntry = GroupEntry[str, SkillRecord]


def download_url_for(identity: str) -> str:
    return f"{DOWNLOADS_URL_PATH}/{identity}.zip"


def to_public_skill(record: SkillRecord, max_chars: int = PUBLIC_DESC_MAX_CHARS) -> SkillRecord:
    """Public view of a skill: same fields, description cut to the budget."""
    return record.model_copy(update={"description": truncate(record.description, max_chars)})


def to_internal_skill(record: SkillRecord) -> SkillRecord:
    return record


def _build_manifest(
    groups: List[SkillGroupEntry],
    project,
    *,
    version: str,
    generated_at: str,
    base_url: str,
) -> SkillsManifest:
    out_groups = []
    for entry in groups:
        skills = [project(record) for record in entry.units]
        out_groups.append(
            SkillGroup(name=entry.name, slug=entry.slug, skill_count=len(skills), skills=skills)
        )

    return SkillsManifest(
        version=version,
        generated_at=generated_at,
        base_url=base_url,
        total_groups=len(out_groups),
        total_skills=sum(g.skill_count for g in out_groups),
        groups=out_groups,
    )


def build_skills_manifests(
    groups: List[SkillGroupEntry],
    *,
    version: str,
    generated_at: str,
    base_url: str,
    max_chars: int = PUBLIC_DESC_MAX_CHARS,
) -> Tuple[SkillsManifest, SkillsManifest]:
    """
    Build (public, internal) manifests from sorted group entries.

    Both editions come from the same records; the public one only passes
    each record through ``to_public_skill``.
    """
    public = _build_manifest(
        groups,
        lambda record: to_public_skill(record, max_chars),
        version=version,
        generated_at=generated_at,
        base_url=base_url,
    )
    internal = _build_manifest(
        groups,
        to_internal_skill,
        version=version,
        generated_at=generated_at,
        base_url=base_url,
    )
    return public, internal
