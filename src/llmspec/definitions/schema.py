"""
JSON Schema for the public definitions manifest.

Kept in step with ``PublicDefinitionsManifest``; optional model fields are
listed under ``properties`` but not under ``required`` because the
manifest omits them when the source TOML does not declare them.
"""

from __future__ import annotations

from typing import Any, Dict

from llmspec.config import DEFAULT_BASE_URL
from llmspec.skills.schema import JSON_SCHEMA_DIALECT

_NULLABLE_STRING = {"type": ["string", "null"]}
_NULLABLE_NUMBER = {"type": ["number", "null"]}


def build_definitions_schema(base_url: str = DEFAULT_BASE_URL) -> Dict[str, Any]:
    return {
        "$schema": JSON_SCHEMA_DIALECT,
        "$id": f"{base_url}/definitions/schema.json",
        "title": "LLMSpec Model Definitions Manifest",
        "type": "object",
        "additionalProperties": False,
        "required": [
            "version",
            "generated_at",
            "base_url",
            "total_providers",
            "total_models",
            "providers",
        ],
        "properties": {
            "version": {"type": "string"},
            "generated_at": {"type": "string", "format": "date-time"},
            "base_url": {"type": "string"},
            "total_providers": {"type": "integer", "minimum": 0},
            "total_models": {"type": "integer", "minimum": 0},
            "providers": {
                "type": "array",
                "items": {"$ref": "#/$defs/provider"},
            },
        },
        "$defs": {
            "provider": {
                "type": "object",
                "additionalProperties": False,
                "required": ["id", "name", "slug", "npm", "doc", "has_logo", "model_count", "models"],
                "properties": {
                    "id": {"type": "string"},
                    "name": {"type": "string"},
                    "slug": {"type": "string"},
                    "npm": {"type": "string"},
                    "doc": {"type": "string"},
                    "api": {"type": "string"},
                    "has_logo": {"type": "boolean"},
                    "model_count": {"type": "integer", "minimum": 0},
                    "models": {
                        "type": "array",
                        "items": {"$ref": "#/$defs/model"},
                    },
                },
            },
            "model": {
                "type": "object",
                "additionalProperties": False,
                "required": [
                    "id",
                    "name",
                    "provider",
                    "release_date",
                    "last_updated",
                    "attachment",
                    "reasoning",
                    "tool_call",
                    "open_weights",
                    "modalities",
                    "limit",
                ],
                "properties": {
                    "id": {"type": "string"},
                    "name": {"type": "string"},
                    "family": {"type": "string"},
                    "provider": {"type": "string"},
                    "release_date": _NULLABLE_STRING,
                    "last_updated": _NULLABLE_STRING,
                    "attachment": {"type": "boolean"},
                    "reasoning": {"type": "boolean"},
                    "tool_call": {"type": "boolean"},
                    "open_weights": {"type": "boolean"},
                    "temperature": {"type": "boolean"},
                    "structured_output": {"type": "boolean"},
                    "knowledge": {"type": "string"},
                    "status": {"enum": ["alpha", "beta", "deprecated"]},
                    "description": {"type": "string"},
                    "modalities": {
                        "type": "object",
                        "additionalProperties": False,
                        "required": ["input", "output"],
                        "properties": {
                            "input": {"type": "array", "items": {"type": "string"}},
                            "output": {"type": "array", "items": {"type": "string"}},
                        },
                    },
                    "limit": {
                        "type": "object",
                        "additionalProperties": False,
                        "required": ["context", "output"],
                        "properties": {
                            "context": _NULLABLE_NUMBER,
                            "input": {"type": "number"},
                            "output": _NULLABLE_NUMBER,
                        },
                    },
                    "cost": {
                        "type": "object",
                        "additionalProperties": False,
                        "properties": {
                            "input": {"type": "number"},
                            "output": {"type": "number"},
                        },
                    },
                },
            },
        },
    }
