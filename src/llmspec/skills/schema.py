"""
JSON Schema for the public skills manifest.

Hand-written to match ``SkillsManifest`` as emitted by
``build_skills_manifests``. The test suite validates a built manifest
against this schema, so a field added to the public records must be added
here too.
"""

from __future__ import annotations

from typing import Any, Dict

from llmspec.config import DEFAULT_BASE_URL

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


def build_skills_schema(base_url: str = DEFAULT_BASE_URL) -> Dict[str, Any]:
    return {
        "$schema": JSON_SCHEMA_DIALECT,
        "$id": f"{base_url}/skills/schema.json",
        "title": "LLMSpec Skills Manifest",
        "type": "object",
        "additionalProperties": False,
        "required": ["version", "generated_at", "base_url", "total_groups", "total_skills", "groups"],
        "properties": {
            "version": {"type": "string"},
            "generated_at": {"type": "string", "format": "date-time"},
            "base_url": {"type": "string"},
            "total_groups": {"type": "integer", "minimum": 0},
            "total_skills": {"type": "integer", "minimum": 0},
            "groups": {
                "type": "array",
                "items": {"$ref": "#/$defs/group"},
            },
        },
        "$defs": {
            "group": {
                "type": "object",
                "additionalProperties": False,
                "required": ["name", "slug", "skill_count", "skills"],
                "properties": {
                    "name": {"type": "string"},
                    "slug": {"type": "string"},
                    "skill_count": {"type": "integer", "minimum": 0},
                    "skills": {
                        "type": "array",
                        "items": {"$ref": "#/$defs/skill"},
                    },
                },
            },
            "skill": {
                "type": "object",
                "additionalProperties": False,
                "required": [
                    "id",
                    "name",
                    "description",
                    "group",
                    "download_url",
                    "zip_size_bytes",
                    "file_count",
                    "contents",
                ],
                "properties": {
                    "id": {"type": "string"},
                    "name": {"type": "string"},
                    "description": {"type": "string"},
                    "group": {"type": "string"},
                    "download_url": {"type": "string"},
                    "zip_size_bytes": {"type": "integer", "minimum": 0},
                    "file_count": {"type": "integer", "minimum": 0},
                    "contents": {
                        "type": "object",
                        "additionalProperties": False,
                        "required": ["has_scripts", "has_references", "has_license"],
                        "properties": {
                            "has_scripts": {"type": "boolean"},
                            "has_references": {"type": "boolean"},
                            "has_license": {"type": "boolean"},
                        },
                    },
                },
            },
        },
    }
