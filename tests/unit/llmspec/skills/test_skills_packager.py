"""Tests for llmspec.skills.packager."""

import os
import zipfile

import pytest

from llmspec.errors import OutputBoundaryError
from llmspec.report import BuildReport
from llmspec.skills.packager import (
    archive_path_for,
    create_skill_zip,
    detect_skill_contents,
    package_skill,
)


@pytest.fixture
def skill_dir(make_skill):
    return make_skill(
        "DevTools",
        "pdf-tools",
        description="Work with PDFs",
        files={
            "scripts/extract.py": "print('x')\n",
            "scripts/__pycache__/extract.cpython-312.pyc": "junk",
            "references/guide.md": "# Guide\n",
            ".gitkeep": "",
            ".env": "SECRET=1\n",
            ".git/config": "[core]\n",
            "node_modules/pkg/index.js": "module.exports = 1\n",
            "keys/deploy.pem": "-----BEGIN-----\n",
            "LICENSE.txt": "MIT\n",
        },
    )


class TestArchivePath:
    def test_inside_downloads(self, tmp_path):
        path = archive_path_for(tmp_path / "downloads", "pdf-tools")
        assert path == tmp_path / "downloads" / "pdf-tools.zip"

    def test_escaping_identity_is_rejected(self, tmp_path):
        with pytest.raises(OutputBoundaryError):
            archive_path_for(tmp_path / "downloads", "../../evil")


class TestCreateSkillZip:
    def test_entries_are_rooted_at_folder_and_filtered(self, skill_dir, tmp_path):
        zip_path = tmp_path / "pdf-tools.zip"
        written = create_skill_zip(skill_dir, "pdf-tools", zip_path)

        with zipfile.ZipFile(zip_path) as zf:
            names = sorted(zf.namelist())
        assert names == [
            "pdf-tools/.gitkeep",
            "pdf-tools/LICENSE.txt",
            "pdf-tools/SKILL.md",
            "pdf-tools/references/guide.md",
            "pdf-tools/scripts/extract.py",
        ]
        assert written == len(names)
        assert not os.path.exists(f"{zip_path}.tmp")

    def test_uses_deflate(self, skill_dir, tmp_path):
        zip_path = tmp_path / "pdf-tools.zip"
        create_skill_zip(skill_dir, "pdf-tools", zip_path)
        with zipfile.ZipFile(zip_path) as zf:
            assert all(info.compress_type == zipfile.ZIP_DEFLATED for info in zf.infolist())

    def test_symlinks_are_skipped(self, skill_dir, tmp_path):
        outside = tmp_path / "outside.txt"
        outside.write_text("secret", encoding="utf-8")
        os.symlink(outside, skill_dir / "link.txt")
        os.symlink(tmp_path, skill_dir / "linked-dir")

        zip_path = tmp_path / "pdf-tools.zip"
        create_skill_zip(skill_dir, "pdf-tools", zip_path)
        with zipfile.ZipFile(zip_path) as zf:
            names = zf.namelist()
        assert "pdf-tools/link.txt" not in names
        assert not any(name.startswith("pdf-tools/linked-dir/") for name in names)


class TestPackageSkill:
    def test_file_count_matches_archive_entries(self, skill_dir, tmp_path):
        zip_path = tmp_path / "pdf-tools.zip"
        result = package_skill(skill_dir, "pdf-tools", zip_path, BuildReport("skills"))

        assert result.ok
        with zipfile.ZipFile(zip_path) as zf:
            assert result.file_count == len(zf.namelist()) == 5
        assert result.zip_size_bytes == os.path.getsize(zip_path)

    def test_failure_yields_zero_metrics(self, skill_dir, tmp_path):
        zip_path = tmp_path / "missing-dir" / "pdf-tools.zip"
        result = package_skill(skill_dir, "pdf-tools", zip_path, BuildReport("skills"))

        assert not result.ok
        assert result.zip_size_bytes == 0
        assert result.file_count == 0
        assert result.error


class TestDetectContents:
    def test_flags(self, skill_dir):
        contents = detect_skill_contents(skill_dir)
        assert contents.has_scripts
        assert contents.has_references
        assert contents.has_license

    def test_bare_skill(self, make_skill):
        contents = detect_skill_contents(make_skill("DevTools", "bare"))
        assert not contents.has_scripts
        assert not contents.has_references
        assert not contents.has_license
