"""
Normalization of provider.toml and model TOML files.

Both normalizers are pure: they take a decoded mapping and return the
record plus a list of field warnings. Required fields that are missing or
wrongly typed get a safe default (folder-derived name, empty string,
``False`` or ``None``); unknown ``status`` values are dropped.
"""

from __future__ import annotations

import math
import os
import re
from typing import Any, Dict, List, Optional, Tuple

from llmspec.decode import (
    as_bool,
    as_date_text,
    as_number,
    as_string_list,
    as_text,
    decode_toml,
    is_mapping,
    read_text,
)
from llmspec.definitions.models import (
    ALLOWED_STATUSES,
    ModelDefinition,
    ModelLimit,
    ModelModalities,
    ProviderMeta,
)

PROVIDER_FILE = "provider.toml"

_TOML_SUFFIX = re.compile(r"\.toml$", re.IGNORECASE)

REQUIRED_MODEL_STRINGS = ("release_date", "last_updated")
REQUIRED_MODEL_BOOLEANS = ("attachment", "reasoning", "tool_call", "open_weights")
OPTIONAL_MODEL_BOOLEANS = ("temperature", "structured_output")


def model_id_from_path(rel_path: str) -> str:
    """``openai/gpt-4o.toml`` -> ``openai/gpt-4o``."""
    return _TOML_SUFFIX.sub("", rel_path.replace(os.sep, "/"))


def _present(data: Dict[str, Any], key: str) -> bool:
    return key in data and data[key] is not None


def normalize_provider(
    provider_id: str,
    data: Dict[str, Any],
    source: str = "",
) -> Tuple[ProviderMeta, List[str]]:
    """Normalize a decoded provider.toml."""
    warnings: List[str] = []
    where = f" ({source})" if source else ""

    def missing(field: str, kind: str) -> None:
        warnings.append(f"Provider '{provider_id}' missing required {kind} field: {field}{where}")

    name = as_text(data.get("name"))
    env = as_string_list(data.get("env"))
    npm = as_text(data.get("npm"))
    doc = as_text(data.get("doc"))
    api = as_text(data.get("api"))

    if name is None:
        missing("name", "string")
    if not env:
        missing("env", "string[]")
    if npm is None:
        missing("npm", "string")
    if doc is None:
        missing("doc", "string")
    if api is None and _present(data, "api"):
        warnings.append(f"Provider '{provider_id}' has non-string field: api; ignoring{where}")

    fields: Dict[str, Any] = {
        "id": provider_id,
        "name": name or provider_id,
        "env": env or [],
        "npm": npm or "",
        "doc": doc or "",
    }
    if api is not None:
        fields["api"] = api
    return ProviderMeta(**fields), warnings


def normalize_model(
    provider: str,
    model_id: str,
    data: Dict[str, Any],
    source: str = "",
) -> Tuple[ModelDefinition, List[str]]:
    """
    Normalize a decoded model TOML.

    Args:
        provider: Owning provider slug.
        model_id: Path-derived model identity.
        data: Decoded TOML mapping.
        source: File path used in warnings.

    Returns:
        Tuple of (ModelDefinition, warnings)
    """
    warnings: List[str] = []
    where = f" ({source})" if source else ""
    label = f"Model '{provider}/{model_id}'"

    def missing(field: str, kind: str) -> None:
        warnings.append(f"{label} missing required {kind} field: {field}{where}")

    def wrong_type(field: str, kind: str) -> None:
        warnings.append(f"{label} has non-{kind} field: {field}; ignoring{where}")

    fields: Dict[str, Any] = {"id": model_id, "provider": provider}

    name = as_text(data.get("name"))
    if name is None:
        missing("name", "string")
    fields["name"] = name or model_id

    family = as_text(data.get("family"))
    if family is not None:
        fields["family"] = family
    elif _present(data, "family"):
        wrong_type("family", "string")

    for key in REQUIRED_MODEL_STRINGS:
        value = as_date_text(data.get(key))
        if value is None:
            missing(key, "string")
        fields[key] = value

    for key in REQUIRED_MODEL_BOOLEANS:
        value = as_bool(data.get(key))
        if value is None:
            missing(key, "boolean")
        fields[key] = bool(value)

    for key in OPTIONAL_MODEL_BOOLEANS:
        value = as_bool(data.get(key))
        if value is not None:
            fields[key] = value
        elif _present(data, key):
            wrong_type(key, "boolean")

    knowledge = as_date_text(data.get("knowledge"))
    if knowledge is not None:
        fields["knowledge"] = knowledge
    elif _present(data, "knowledge"):
        wrong_type("knowledge", "string")

    status = _normalize_status(data.get("status"), label, where, warnings)
    if status is not None:
        fields["status"] = status

    description = as_text(data.get("description"))
    if description is not None:
        fields["description"] = description
    elif _present(data, "description") and not isinstance(data["description"], str):
        wrong_type("description", "string")

    fields["modalities"] = _normalize_modalities(data.get("modalities"), missing)
    fields["limit"] = _normalize_limit(data.get("limit"), missing, wrong_type)

    cost = data.get("cost")
    if is_mapping(cost):
        fields["cost"] = _finite_cost(cost, "cost", wrong_type)
    elif cost is not None:
        wrong_type("cost", "table")

    return ModelDefinition(**fields), warnings


def _normalize_status(
    value: Any,
    label: str,
    where: str,
    warnings: List[str],
) -> Optional[str]:
    if value is None:
        return None
    text = as_text(value)
    status = text.lower() if text else None
    if status in ALLOWED_STATUSES:
        return status
    warnings.append(f"{label} has unknown status '{value}'; omitting from output{where}")
    return None


def _finite_cost(table: Dict[str, Any], prefix: str, wrong_type) -> Dict[str, Any]:
    """Copy a cost table, dropping non-finite numbers (nested tables included)."""
    out: Dict[str, Any] = {}
    for key, value in table.items():
        if isinstance(value, float) and not math.isfinite(value):
            wrong_type(f"{prefix}.{key}", "finite number")
        elif is_mapping(value):
            out[key] = _finite_cost(value, f"{prefix}.{key}", wrong_type)
        else:
            out[key] = value
    return out


def _normalize_modalities(value: Any, missing) -> ModelModalities:
    if not is_mapping(value):
        missing("[modalities]", "table")
        return ModelModalities(input=[], output=[])
    return ModelModalities(
        input=as_string_list(value.get("input")) or [],
        output=as_string_list(value.get("output")) or [],
    )


def _normalize_limit(value: Any, missing, wrong_type) -> ModelLimit:
    table = value if is_mapping(value) else {}
    if not is_mapping(value):
        missing("[limit]", "table")

    context = as_number(table.get("context"))
    output = as_number(table.get("output"))
    if context is None:
        missing("limit.context", "number")
    if output is None:
        missing("limit.output", "number")

    fields: Dict[str, Any] = {"context": context, "output": output}
    limit_input = as_number(table.get("input"))
    if limit_input is not None:
        fields["input"] = limit_input
    elif table.get("input") is not None:
        wrong_type("limit.input", "number")
    return ModelLimit(**fields)


# ── File readers ──────────────────────────────────────────────────────────


def read_toml_file(path: str) -> Tuple[Optional[Dict[str, Any]], List[str]]:
    """Read and decode a TOML file; (None, warnings) when unusable."""
    try:
        text = read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        return None, [f"Failed to read TOML: {path}: {e}"]
    decoded = decode_toml(text, source=path)
    return decoded.value, decoded.warnings


def read_provider(provider_dir: str, provider_id: str) -> Tuple[ProviderMeta, List[str]]:
    """Read ``<provider_dir>/provider.toml``; missing or broken files fall back to defaults."""
    toml_path = os.path.join(provider_dir, PROVIDER_FILE)
    if not os.path.isfile(toml_path):
        meta, _ = normalize_provider(provider_id, {}, toml_path)
        return meta, [f"Missing {PROVIDER_FILE} for provider '{provider_id}': {toml_path}"]

    data, warnings = read_toml_file(toml_path)
    if data is None:
        meta, _ = normalize_provider(provider_id, {}, toml_path)
        return meta, warnings

    meta, field_warnings = normalize_provider(provider_id, data, toml_path)
    return meta, warnings + field_warnings


def read_model(path: str, provider: str, model_id: str) -> Tuple[ModelDefinition, List[str]]:
    """
    Read one model TOML.

    A file that cannot be read or decoded yields a minimal record named
    after its path; only the decode warning is returned for it.
    """
    data, warnings = read_toml_file(path)
    if data is None:
        model, _ = normalize_model(provider, model_id, {}, path)
        return model, warnings
    model, field_warnings = normalize_model(provider, model_id, data, path)
    return model, warnings + field_warnings
