"""Tests for the corpus exclusion filter."""

import pytest

from llmspec.exclusion import should_exclude_path


class TestExcludedFiles:
    @pytest.mark.parametrize("rel", [
        ".DS_Store",
        "docs/.DS_Store",
        "lib/module.pyc",
        "lib/MODULE.PYC",
        "notes.md.swp",
        "notes.md.swo",
        ".env",
        ".env.local",
        "config/.env.production",
        ".npmrc",
        ".yarnrc",
        ".yarnrc.yml",
        ".pypirc",
        "id_rsa",
        "keys/ID_ED25519",
        "certs/server.pem",
        "certs/server.KEY",
        "bundle.p12",
        "bundle.pfx",
    ])
    def test_file_is_excluded(self, rel):
        assert should_exclude_path(rel) is True

    @pytest.mark.parametrize("rel", [
        "SKILL.md",
        "scripts/run.py",
        ".gitkeep",
        "references/.gitignore",
        ".environment-notes.md",
        "keyboard.md",
        "LICENSE.txt",
    ])
    def test_file_is_kept(self, rel):
        assert should_exclude_path(rel) is False


class TestExcludedDirectories:
    @pytest.mark.parametrize("rel", [
        ".git",
        ".svn",
        ".hg",
        "node_modules",
        "scripts/__pycache__",
        "venv",
        ".venv",
        "env",
        "dist",
        ".idea",
        ".vscode",
        ".terraform",
        ".ssh",
        ".cache",
        "assets/.hidden",
    ])
    def test_directory_is_excluded(self, rel):
        assert should_exclude_path(rel, is_directory=True) is True

    @pytest.mark.parametrize("rel", ["scripts", "references", "assets/images"])
    def test_directory_is_kept(self, rel):
        assert should_exclude_path(rel, is_directory=True) is False

    @pytest.mark.parametrize("rel", [
        ".git/config",
        "sub/.git/HEAD",
        "node_modules/pkg/index.js",
        "scripts/__pycache__/mod.cpython-312.pyc",
        "dist/bundle.js",
        ".hidden/notes.md",
    ])
    def test_files_under_excluded_directories(self, rel):
        assert should_exclude_path(rel) is True


class TestPathNormalization:
    def test_backslashes_are_normalized(self):
        assert should_exclude_path("sub\\.git\\config") is True
        assert should_exclude_path("scripts\\run.py") is False

    def test_dot_prefixed_file_vs_directory(self):
        assert should_exclude_path(".config") is False
        assert should_exclude_path(".config", is_directory=True) is True
