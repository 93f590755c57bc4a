"""
Definitions pipeline: provider and model TOML files compiled into manifests.

Example:
    from llmspec.definitions import build_definitions

    report = build_definitions()
    print(report.summary())
"""

from llmspec.definitions.catalog import (
    ProviderSource,
    build_definitions_manifests,
    to_public_cost,
    to_public_model,
)
from llmspec.definitions.models import (
    DefinitionsManifest,
    ModelDefinition,
    ModelLimit,
    ModelModalities,
    Provider,
    ProviderMeta,
    PublicCost,
    PublicDefinitionsManifest,
    PublicModelDefinition,
    PublicProvider,
)
from llmspec.definitions.parser import (
    model_id_from_path,
    normalize_model,
    normalize_provider,
    read_model,
    read_provider,
)
from llmspec.definitions.pipeline import build_definitions
from llmspec.definitions.schema import build_definitions_schema
from llmspec.definitions.walker import list_model_files, list_provider_dirs

__all__ = [
    "DefinitionsManifest",
    "ModelDefinition",
    "ModelLimit",
    "ModelModalities",
    "Provider",
    "ProviderMeta",
    "ProviderSource",
    "PublicCost",
    "PublicDefinitionsManifest",
    "PublicModelDefinition",
    "PublicProvider",
    "build_definitions",
    "build_definitions_manifests",
    "build_definitions_schema",
    "list_model_files",
    "list_provider_dirs",
    "model_id_from_path",
    "normalize_model",
    "normalize_provider",
    "read_model",
    "read_provider",
    "to_public_cost",
    "to_public_model",
]
