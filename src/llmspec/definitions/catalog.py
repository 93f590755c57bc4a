"""Projection of assembled providers into the public manifest and the internal catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from llmspec.catalog import GroupEntry
from llmspec.config import PUBLIC_DESC_MAX_CHARS
from llmspec.decode import as_number
from llmspec.definitions.models import (
    DefinitionsManifest,
    ModelDefinition,
    Provider,
    ProviderMeta,
    PublicCost,
    PublicDefinitionsManifest,
    PublicModelDefinition,
    PublicProvider,
)
from llmspec.utils.text import truncate


@dataclass(frozen=True)
class ProviderSource:
    """Group record for one provider folder."""

    meta: ProviderMeta
    has_logo: bool


ProviderEntry = GroupEntry[ProviderSource, ModelDefinition]

# Fields copied verbatim from the internal record into the public one
_SHARED_MODEL_FIELDS = (
    "id",
    "name",
    "family",
    "provider",
    "release_date",
    "last_updated",
    "attachment",
    "reasoning",
    "tool_call",
    "open_weights",
    "temperature",
    "structured_output",
    "knowledge",
    "status",
    "modalities",
    "limit",
)


def to_public_cost(cost: Optional[Dict[str, Any]]) -> Optional[PublicCost]:
    """Reduce a cost table to its input/output prices; None if it has neither."""
    if not cost:
        return None
    fields = {}
    for key in ("input", "output"):
        value = as_number(cost.get(key))
        if value is not None:
            fields[key] = value
    return PublicCost(**fields) if fields else None


def to_public_model(
    model: ModelDefinition,
    max_chars: int = PUBLIC_DESC_MAX_CHARS,
) -> PublicModelDefinition:
    set_fields = model.model_fields_set
    fields: Dict[str, Any] = {
        name: getattr(model, name) for name in _SHARED_MODEL_FIELDS if name in set_fields
    }
    if model.description is not None:
        fields["description"] = truncate(model.description, max_chars)
    cost = to_public_cost(model.cost)
    if cost is not None:
        fields["cost"] = cost
    return PublicModelDefinition(**fields)


def to_internal_provider(entry: ProviderEntry) -> Provider:
    meta = entry.record.meta
    fields: Dict[str, Any] = {
        "id": meta.id,
        "name": entry.name,
        "slug": entry.slug,
        "env": list(meta.env),
        "npm": meta.npm,
        "doc": meta.doc,
        "has_logo": entry.record.has_logo,
        "model_count": len(entry.units),
        "models": list(entry.units),
    }
    if meta.api is not None:
        fields["api"] = meta.api
    return Provider(**fields)


def to_public_provider(
    entry: ProviderEntry,
    max_chars: int = PUBLIC_DESC_MAX_CHARS,
) -> PublicProvider:
    meta = entry.record.meta
    models = [to_public_model(model, max_chars) for model in entry.units]
    fields: Dict[str, Any] = {
        "id": meta.id,
        "name": entry.name,
        "slug": entry.slug,
        "npm": meta.npm,
        "doc": meta.doc,
        "has_logo": entry.record.has_logo,
        "model_count": len(models),
        "models": models,
    }
    if meta.api is not None:
        fields["api"] = meta.api
    return PublicProvider(**fields)


def build_definitions_manifests(
    providers: List[ProviderEntry],
    *,
    version: str,
    generated_at: str,
    base_url: str,
    max_chars: int = PUBLIC_DESC_MAX_CHARS,
) -> Tuple[PublicDefinitionsManifest, DefinitionsManifest]:
    """Build (public, internal) manifests from sorted provider entries."""
    internal_providers = [to_internal_provider(entry) for entry in providers]
    public_providers = [to_public_provider(entry, max_chars) for entry in providers]

    total_models = sum(p.model_count for p in internal_providers)
    public = PublicDefinitionsManifest(
        version=version,
        generated_at=generated_at,
        base_url=base_url,
        total_providers=len(public_providers),
        total_models=total_models,
        providers=public_providers,
    )
    internal = DefinitionsManifest(
        version=version,
        generated_at=generated_at,
        base_url=base_url,
        total_providers=len(internal_providers),
        total_models=total_models,
        providers=internal_providers,
    )
    return public, internal
