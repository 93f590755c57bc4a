"""
Centralized configuration for the llmspec build pipelines.

Uses Pydantic BaseSettings for environment variable integration
and validation. All configurable values should be defined here.

Configuration sources (in order of precedence):
1. Explicit constructor arguments
2. Environment variables (LLMSPEC_*)
3. .env file
4. Default values

Example:
    from llmspec.config import get_config

    config = get_config()
    print(config.downloads_dir)

    # Point at another checkout
    config = get_config(website_dir="/srv/llmspec/website")
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MANIFEST_VERSION = "1.0.0"
DEFAULT_BASE_URL = "https://www.llmspec.dev"
PUBLIC_DESC_MAX_CHARS = 500

# URL path (not filesystem path) under which skill archives are served
DOWNLOADS_URL_PATH = "/skills/downloads"


class BuildConfig(BaseSettings):
    """
    Configuration for a build run.

    All settings can be overridden via environment variables
    prefixed with LLMSPEC_.

    Example:
        export LLMSPEC_WEBSITE_DIR=/srv/llmspec/website
        export LLMSPEC_LOG_LEVEL=debug
    """

    model_config = SettingsConfigDict(
        env_prefix="LLMSPEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    website_dir: Path = Field(
        default=Path("website"),
        description="Website project directory; outputs are written beneath it",
    )
    repo_root: Optional[Path] = Field(
        default=None,
        description="Repository root (defaults to the parent of website_dir)",
    )
    skills_root: Optional[Path] = Field(
        default=None,
        description="Skills corpus root (defaults to <repo_root>/skills)",
    )
    providers_root: Optional[Path] = Field(
        default=None,
        description="Provider definitions root (defaults to <repo_root>/models.dev/providers)",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Public site URL recorded in every manifest",
    )
    manifest_version: str = Field(
        default=MANIFEST_VERSION,
        description="Manifest format version",
    )
    public_desc_max_chars: int = Field(
        default=PUBLIC_DESC_MAX_CHARS,
        ge=1,
        description="Character budget for descriptions in public manifests",
    )

    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="info",
        description="Logging level",
    )
    log_format: Literal["text", "json"] = Field(
        default="text",
        description="Log output format (text for console, json for log shipping)",
    )

    @field_validator("website_dir", "repo_root", "skills_root", "providers_root")
    @classmethod
    def expand_path(cls, v: Optional[Path]) -> Optional[Path]:
        """Expand ~ and environment variables, then make absolute."""
        if v is None:
            return v
        return Path(os.path.abspath(os.path.expanduser(os.path.expandvars(str(v)))))

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # ── Corpus roots ─────────────────────────────────────────────────────

    @property
    def website_path(self) -> Path:
        # Defaults skip validation, so the default may still be relative
        return Path(os.path.abspath(self.website_dir))

    @property
    def repo_path(self) -> Path:
        if self.repo_root:
            return self.repo_root
        return self.website_path.parent

    @property
    def skills_root_dir(self) -> Path:
        if self.skills_root:
            return self.skills_root
        return self.repo_path / "skills"

    @property
    def providers_root_dir(self) -> Path:
        if self.providers_root:
            return self.providers_root
        return self.repo_path / "models.dev" / "providers"

    # ── Output locations ─────────────────────────────────────────────────

    @property
    def public_dir(self) -> Path:
        return self.website_path / "public"

    @property
    def data_dir(self) -> Path:
        """Directory for internal catalogs consumed by the site build."""
        return self.website_path / "src" / "data"

    @property
    def public_skills_dir(self) -> Path:
        return self.public_dir / "skills"

    @property
    def downloads_dir(self) -> Path:
        return self.public_skills_dir / "downloads"

    @property
    def skills_manifest_path(self) -> Path:
        return self.public_skills_dir / "skills.json"

    @property
    def skills_schema_path(self) -> Path:
        return self.public_skills_dir / "schema.json"

    @property
    def skills_catalog_path(self) -> Path:
        return self.data_dir / "skills-catalog.json"

    @property
    def public_definitions_dir(self) -> Path:
        return self.public_dir / "definitions"

    @property
    def definitions_manifest_path(self) -> Path:
        return self.public_definitions_dir / "definitions.json"

    @property
    def definitions_schema_path(self) -> Path:
        return self.public_definitions_dir / "schema.json"

    @property
    def definitions_catalog_path(self) -> Path:
        return self.data_dir / "definitions-catalog.json"


# Global singleton
_config: Optional[BuildConfig] = None


def get_config(**overrides) -> BuildConfig:
    """
    Get the global configuration instance.

    Creates a singleton on first call. Subsequent calls return
    the same instance unless overrides are provided.
    """
    global _config

    if overrides or _config is None:
        _config = BuildConfig(**overrides)

    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
