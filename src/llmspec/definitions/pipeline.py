"""
Definitions build pipeline.

Walks ``<providers_root>/<provider>/provider.toml`` and every
``<provider>/models/**/*.toml`` and writes:

- the public manifest  (public/definitions/definitions.json)
- the internal catalog (src/data/definitions-catalog.json)
- the JSON schema      (public/definitions/schema.json)

Used by: llmspec build definitions
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from llmspec.catalog import CatalogAssembler, utc_timestamp
from llmspec.config import BuildConfig, get_config
from llmspec.definitions.catalog import ProviderSource, build_definitions_manifests
from llmspec.definitions.models import ModelDefinition
from llmspec.definitions.parser import model_id_from_path, read_model, read_provider
from llmspec.definitions.schema import build_definitions_schema
from llmspec.definitions.walker import LOGO_FILE, MODELS_DIR, list_model_files, list_provider_dirs
from llmspec.errors import CorpusRootMissingError
from llmspec.report import BuildReport
from llmspec.utils.text import slugify
from llmspec.writer import write_json_pretty

logger = logging.getLogger(__name__)

SUBMODULE_HINT = "git submodule update --init --recursive"


def _process_provider(
    providers_root: str,
    provider_id: str,
    assembler: CatalogAssembler[ProviderSource, ModelDefinition],
    report: BuildReport,
) -> None:
    provider_dir = os.path.join(providers_root, provider_id)
    meta, warnings = read_provider(provider_dir, provider_id)
    report.extend_errors(warnings)

    slug = slugify(provider_id)
    source = ProviderSource(meta=meta, has_logo=os.path.isfile(os.path.join(provider_dir, LOGO_FILE)))
    if not assembler.add_group(slug, meta.name, source):
        return

    models_root = os.path.join(provider_dir, MODELS_DIR)
    if not os.path.isdir(models_root):
        report.warning(f"Provider '{provider_id}' has no {MODELS_DIR}/ directory: {models_root}")
        return

    for abs_path, rel in list_model_files(models_root, report):
        model_id = model_id_from_path(rel)
        if not assembler.claim(f"{provider_id}/{model_id}", abs_path):
            continue
        model, model_warnings = read_model(abs_path, slug, model_id)
        report.extend_errors(model_warnings)
        assembler.add_unit(slug, model)

    logger.debug("Provider %s: %s", provider_id, meta.name)


def build_definitions(
    config: Optional[BuildConfig] = None,
    *,
    generated_at: Optional[str] = None,
) -> BuildReport:
    """
    Run the definitions pipeline end to end.

    Args:
        config: Build configuration (defaults to ``get_config()``).
        generated_at: Timestamp to record; defaults to now.

    Returns:
        BuildReport with counts, warnings and output paths.

    Raises:
        CorpusRootMissingError: If the providers root does not exist.
        OutputBoundaryError: If a manifest path escapes its output directory.
    """
    config = config or get_config()
    report = BuildReport("definitions")

    providers_root = config.providers_root_dir
    if not providers_root.is_dir():
        raise CorpusRootMissingError(str(providers_root), hint=SUBMODULE_HINT)

    logger.info("Building model definitions from: %s", providers_root)

    assembler: CatalogAssembler[ProviderSource, ModelDefinition] = CatalogAssembler(
        report, unit_name=lambda model: model.name
    )
    for provider_id in list_provider_dirs(providers_root, report):
        _process_provider(str(providers_root), provider_id, assembler, report)

    public, internal = build_definitions_manifests(
        assembler.sorted_groups(),
        version=config.manifest_version,
        generated_at=generated_at or utc_timestamp(),
        base_url=config.base_url,
        max_chars=config.public_desc_max_chars,
    )
    report.group_count = public.total_providers
    report.unit_count = public.total_models

    report.outputs["Manifest"] = str(write_json_pretty(
        config.definitions_manifest_path,
        public.model_dump(mode="json", exclude_unset=True),
        base_dir=config.public_definitions_dir,
        label="public manifest",
    ))
    report.outputs["Catalog"] = str(write_json_pretty(
        config.definitions_catalog_path,
        internal.model_dump(mode="json", exclude_unset=True),
        base_dir=config.data_dir,
        label="internal catalog",
    ))
    report.outputs["Schema"] = str(write_json_pretty(
        config.definitions_schema_path,
        build_definitions_schema(config.base_url),
        base_dir=config.public_definitions_dir,
        label="schema",
    ))
    return report
