"""
Pytest configuration and fixtures for llmspec tests.
"""

from __future__ import annotations

import os
import textwrap
from pathlib import Path
from typing import Callable, Dict, Generator, Optional

import pytest

from llmspec.config import BuildConfig, reset_config


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_llmspec_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop LLMSPEC_* variables and reset the config singleton around each test."""
    for key in list(os.environ):
        if key.startswith("LLMSPEC_"):
            monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


# ============================================================================
# Corpus Fixtures
# ============================================================================


def skill_md(name: Optional[str] = None, description: Optional[str] = None) -> str:
    lines = ["---"]
    if name is not None:
        lines.append(f"name: {name}")
    if description is not None:
        lines.append(f"description: {description}")
    lines.append("---")
    lines.append("")
    lines.append("# Instructions")
    lines.append("")
    return "\n".join(lines)


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Repository root holding website/, skills/ and models.dev/providers/."""
    root = tmp_path / "repo"
    (root / "website").mkdir(parents=True)
    return root


@pytest.fixture
def config(repo: Path) -> BuildConfig:
    return BuildConfig(website_dir=repo / "website")


@pytest.fixture
def make_skill(repo: Path) -> Callable[..., Path]:
    """Create ``skills/<group>/<folder>/SKILL.md`` plus optional extra files."""

    def _make(
        group: str,
        folder: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        files: Optional[Dict[str, str]] = None,
        raw: Optional[str] = None,
    ) -> Path:
        skill_dir = repo / "skills" / group / folder
        skill_dir.mkdir(parents=True, exist_ok=True)
        text = raw if raw is not None else skill_md(name or folder, description)
        (skill_dir / "SKILL.md").write_text(text, encoding="utf-8")
        for rel, content in (files or {}).items():
            path = skill_dir / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return skill_dir

    return _make


PROVIDER_TOML = textwrap.dedent("""\
    name = "Acme AI"
    env = ["ACME_API_KEY"]
    npm = "@ai-sdk/acme"
    doc = "https://docs.acme.test/models"
""")

MODEL_TOML = textwrap.dedent("""\
    name = "Acme One"
    family = "acme"
    release_date = "2024-05-01"
    last_updated = "2024-06-01"
    attachment = true
    reasoning = false
    tool_call = true
    open_weights = false
    temperature = true
    knowledge = "2024-01"

    [cost]
    input = 2.5
    output = 10
    cache_read = 1.25

    [limit]
    context = 128000
    output = 16384

    [modalities]
    input = ["text", "image"]
    output = ["text"]
""")


@pytest.fixture
def make_provider(repo: Path) -> Callable[..., Path]:
    """Create ``models.dev/providers/<provider_id>/`` with provider.toml and models."""

    def _make(
        provider_id: str,
        provider_toml: Optional[str] = PROVIDER_TOML,
        models: Optional[Dict[str, str]] = None,
        logo: bool = False,
    ) -> Path:
        provider_dir = repo / "models.dev" / "providers" / provider_id
        provider_dir.mkdir(parents=True, exist_ok=True)
        if provider_toml is not None:
            (provider_dir / "provider.toml").write_text(provider_toml, encoding="utf-8")
        if logo:
            (provider_dir / "logo.svg").write_text("<svg/>", encoding="utf-8")
        for rel, content in (models or {}).items():
            path = provider_dir / "models" / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return provider_dir

    return _make


@pytest.fixture
def model_toml() -> str:
    """A complete model definition."""
    return MODEL_TOML
