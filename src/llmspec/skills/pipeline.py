"""
Skills build pipeline.

Walks ``<skills_root>/<group>/<skill>/SKILL.md``, packages every skill into
``<downloads>/<skill>.zip`` and writes:

- the public manifest  (public/skills/skills.json)
- the internal catalog (src/data/skills-catalog.json)
- the JSON schema      (public/skills/schema.json)

Used by: llmspec build skills
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from llmspec.catalog import CatalogAssembler, utc_timestamp
from llmspec.config import BuildConfig, get_config
from llmspec.errors import CorpusRootMissingError, OutputBoundaryError
from llmspec.report import BuildReport
from llmspec.skills.catalog import build_skills_manifests, download_url_for
from llmspec.skills.models import SkillRecord
from llmspec.skills.packager import archive_path_for, detect_skill_contents, package_skill
from llmspec.skills.parser import read_skill_metadata
from llmspec.skills.schema import build_skills_schema
from llmspec.skills.walker import SkillDir, list_groups, list_skill_dirs
from llmspec.utils.text import format_bytes, slugify
from llmspec.writer import write_json_pretty

logger = logging.getLogger(__name__)


def _process_skill(
    skill_dir: SkillDir,
    group_name: str,
    group_slug: str,
    assembler: CatalogAssembler[str, SkillRecord],
    config: BuildConfig,
    report: BuildReport,
) -> None:
    folder_name = skill_dir.dir_name
    label = f"{group_name}/{folder_name}"

    # Identity comes from the folder name, never from frontmatter
    if not assembler.claim(folder_name, label):
        return

    try:
        zip_path = archive_path_for(config.downloads_dir, folder_name)
    except OutputBoundaryError as e:
        report.error(f"Refusing to write archive outside downloads dir. skill={label}: {e}")
        return

    metadata, warnings = read_skill_metadata(skill_dir.skill_file, folder_name)
    report.extend_errors(warnings)

    logger.info("Packaging %s...", metadata.name)
    result = package_skill(skill_dir.path, folder_name, zip_path, report)
    if result.ok:
        report.packaged_count += 1
        report.total_zip_bytes += result.zip_size_bytes
        logger.info(
            "  %s.zip  %s  (%d files)",
            folder_name,
            format_bytes(result.zip_size_bytes),
            result.file_count,
        )
    else:
        report.error(f"Failed to package {metadata.name}: {zip_path}: {result.error}")

    record = SkillRecord(
        id=folder_name,
        name=metadata.name,
        description=metadata.description,
        group=group_slug,
        download_url=download_url_for(folder_name),
        zip_size_bytes=result.zip_size_bytes,
        file_count=result.file_count,
        contents=detect_skill_contents(skill_dir.path),
    )
    assembler.add_unit(group_slug, record)


def build_skills(
    config: Optional[BuildConfig] = None,
    *,
    generated_at: Optional[str] = None,
) -> BuildReport:
    """
    Run the skills pipeline end to end.

    Args:
        config: Build configuration (defaults to ``get_config()``).
        generated_at: Timestamp to record; defaults to now.

    Returns:
        BuildReport with counts, warnings and output paths.

    Raises:
        CorpusRootMissingError: If the skills root does not exist.
        OutputBoundaryError: If a manifest path escapes its output directory.
    """
    config = config or get_config()
    report = BuildReport("skills")

    skills_root = config.skills_root_dir
    if not skills_root.is_dir():
        raise CorpusRootMissingError(str(skills_root))

    os.makedirs(config.downloads_dir, exist_ok=True)
    logger.info("Building skills artifacts from: %s", skills_root)
    logger.info("Output downloads dir: %s", config.downloads_dir)

    assembler: CatalogAssembler[str, SkillRecord] = CatalogAssembler(
        report, unit_name=lambda skill: skill.name
    )

    for group_name in list_groups(skills_root, report):
        group_slug = slugify(group_name)
        if not assembler.add_group(group_slug, group_name, group_name):
            continue
        for skill_dir in list_skill_dirs(skills_root / group_name, report):
            _process_skill(skill_dir, group_name, group_slug, assembler, config, report)

    public, internal = build_skills_manifests(
        assembler.sorted_groups(),
        version=config.manifest_version,
        generated_at=generated_at or utc_timestamp(),
        base_url=config.base_url,
        max_chars=config.public_desc_max_chars,
    )
    report.group_count = public.total_groups
    report.unit_count = public.total_skills

    report.outputs["Manifest"] = str(write_json_pretty(
        config.skills_manifest_path,
        public.model_dump(mode="json"),
        base_dir=config.public_skills_dir,
        label="public manifest",
    ))
    report.outputs["Catalog"] = str(write_json_pretty(
        config.skills_catalog_path,
        internal.model_dump(mode="json"),
        base_dir=config.data_dir,
        label="internal catalog",
    ))
    report.outputs["Schema"] = str(write_json_pretty(
        config.skills_schema_path,
        build_skills_schema(config.base_url),
        base_dir=config.public_skills_dir,
        label="schema",
    ))
    return report
