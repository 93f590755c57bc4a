"""
Skills pipeline: SKILL.md bundles packaged as ZIPs and listed in manifests.

Example:
    from llmspec.skills import build_skills

    report = build_skills()
    print(report.summary())
"""

from llmspec.skills.catalog import build_skills_manifests, to_public_skill
from llmspec.skills.models import (
    SkillContents,
    SkillGroup,
    SkillMetadata,
    SkillRecord,
    SkillsManifest,
)
from llmspec.skills.packager import (
    PackageResult,
    archive_path_for,
    create_skill_zip,
    detect_skill_contents,
    package_skill,
)
from llmspec.skills.parser import parse_skill_metadata, read_skill_metadata
from llmspec.skills.pipeline import build_skills
from llmspec.skills.schema import build_skills_schema
from llmspec.skills.walker import SKILL_FILE, SkillDir, list_groups, list_skill_dirs

__all__ = [
    "SKILL_FILE",
    "PackageResult",
    "SkillContents",
    "SkillDir",
    "SkillGroup",
    "SkillMetadata",
    "SkillRecord",
    "SkillsManifest",
    "archive_path_for",
    "build_skills",
    "build_skills_manifests",
    "build_skills_schema",
    "create_skill_zip",
    "detect_skill_contents",
    "list_groups",
    "list_skill_dirs",
    "package_skill",
    "parse_skill_metadata",
    "read_skill_metadata",
    "to_public_skill",
]
