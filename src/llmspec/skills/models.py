"""
Pydantic models for the skills catalog.

The same models serve the public manifest and the internal catalog; the
public edition differs only in its truncated descriptions (see
``llmspec.skills.catalog.to_public_skill``).
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class SkillMetadata(BaseModel):
    """Normalized SKILL.md frontmatter."""
    name: str = Field(..., description="Display name (falls back to the folder name)")
    description: str = Field(default="", description="Full description text")


class SkillContents(BaseModel):
    """What a skill bundle ships besides SKILL.md."""
    has_scripts: bool = Field(default=False, description="Has a scripts/ directory")
    has_references: bool = Field(default=False, description="Has a references/ directory")
    has_license: bool = Field(default=False, description="Has a LICENSE file")


class SkillRecord(BaseModel):
    """One skill as listed in a manifest."""
    id: str = Field(..., description="Folder name; also the archive name")
    name: str
    description: str
    group: str = Field(..., description="Owning group slug")
    download_url: str
    zip_size_bytes: int = Field(..., ge=0)
    file_count: int = Field(..., ge=0)
    contents: SkillContents


class SkillGroup(BaseModel):
    """A skill category folder."""
    name: str
    slug: str
    skill_count: int = Field(..., ge=0)
    skills: List[SkillRecord] = Field(default_factory=list)


class SkillsManifest(BaseModel):
    """Root of skills.json and skills-catalog.json."""
    version: str
    generated_at: str
    base_url: str
    total_groups: int = Field(..., ge=0)
    total_skills: int = Field(..., ge=0)
    groups: List[SkillGroup] = Field(default_factory=list)
