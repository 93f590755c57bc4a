"""End-to-end tests for the skills pipeline."""

import json
import os
import zipfile

import jsonschema
import pytest

from llmspec.errors import CorpusRootMissingError
from llmspec.skills import build_skills

GENERATED_AT = "2025-01-31T12:00:00.000Z"


def _load(path):
    return json.loads(path.read_text(encoding="utf-8"))


class TestBuildSkills:
    def test_manifest_structure(self, config, make_skill):
        make_skill(
            "ProductManagement",
            "roadmap",
            name="Roadmap Planner",
            description="Plan roadmaps",
            files={"scripts/plan.py": "", "LICENSE": "MIT"},
        )
        make_skill("DevTools", "pdf-tools", name="PDF Tools", description="PDF helpers")

        report = build_skills(config, generated_at=GENERATED_AT)

        assert report.error_count == 0
        assert report.group_count == 2
        assert report.unit_count == 2
        assert report.packaged_count == 2

        manifest = _load(config.skills_manifest_path)
        assert manifest["version"] == "1.0.0"
        assert manifest["generated_at"] == GENERATED_AT
        assert manifest["base_url"] == "https://www.llmspec.dev"
        assert manifest["total_groups"] == 2
        assert manifest["total_skills"] == 2
        assert [g["name"] for g in manifest["groups"]] == ["DevTools", "ProductManagement"]

        group = manifest["groups"][1]
        assert group["slug"] == "product-management"
        assert group["skill_count"] == 1
        skill = group["skills"][0]
        assert skill["id"] == "roadmap"
        assert skill["name"] == "Roadmap Planner"
        assert skill["group"] == "product-management"
        assert skill["download_url"] == "/skills/downloads/roadmap.zip"
        assert skill["file_count"] == 3
        assert skill["contents"] == {
            "has_scripts": True,
            "has_references": False,
            "has_license": True,
        }
        zip_path = config.downloads_dir / "roadmap.zip"
        assert skill["zip_size_bytes"] == os.path.getsize(zip_path)
        with zipfile.ZipFile(zip_path) as zf:
            assert len(zf.namelist()) == skill["file_count"]

    def test_counts_match_structure(self, config, make_skill):
        for folder in ("a", "b", "c"):
            make_skill("One", folder)
        make_skill("Two", "d")
        build_skills(config, generated_at=GENERATED_AT)

        manifest = _load(config.skills_manifest_path)
        assert manifest["total_groups"] == len(manifest["groups"])
        assert manifest["total_skills"] == sum(len(g["skills"]) for g in manifest["groups"])
        for group in manifest["groups"]:
            assert group["skill_count"] == len(group["skills"])

    def test_public_description_is_truncated(self, config, make_skill):
        long_text = "x" * 600
        make_skill("DevTools", "verbose", description=long_text)
        build_skills(config, generated_at=GENERATED_AT)

        public = _load(config.skills_manifest_path)["groups"][0]["skills"][0]
        internal = _load(config.skills_catalog_path)["groups"][0]["skills"][0]
        assert len(public["description"]) == 500
        assert public["description"].endswith("…")
        assert internal["description"] == long_text

    def test_duplicate_identity_is_skipped(self, config, make_skill):
        make_skill("GroupA", "foo", name="First")
        make_skill("GroupB", "Foo", name="Second")

        report = build_skills(config, generated_at=GENERATED_AT)

        manifest = _load(config.skills_manifest_path)
        names = [s["name"] for g in manifest["groups"] for s in g["skills"]]
        assert names == ["First"]
        assert report.error_count == 1
        assert report.unit_count == 1
        assert any("Duplicate identity" in w for w in report.warnings)
        zip_path = config.downloads_dir / "foo.zip"
        assert zip_path.is_file()
        with zipfile.ZipFile(zip_path) as zf:
            assert "foo/SKILL.md" in zf.namelist()
            assert "name: First" in zf.read("foo/SKILL.md").decode("utf-8")

    def test_unreadable_group_is_reported(self, config, make_skill, monkeypatch):
        locked = make_skill("Locked", "hidden", description="Never listed").parent
        make_skill("Open", "visible", description="Still listed")
        blocked = str(locked)
        real_scandir = os.scandir

        def scandir(path="."):
            if os.path.abspath(os.fspath(path)) == blocked:
                raise PermissionError(13, "Permission denied", blocked)
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", scandir)
        report = build_skills(config, generated_at=GENERATED_AT)

        assert report.error_count == 1
        assert any("Failed to read directory" in w for w in report.warnings)
        assert report.unit_count == 1
        manifest = _load(config.skills_manifest_path)
        ids = [s["id"] for g in manifest["groups"] for s in g["skills"]]
        assert ids == ["visible"]

    def test_metadata_defects_are_counted(self, config, make_skill):
        make_skill("DevTools", "no-desc", name="No Desc")
        make_skill("DevTools", "broken", raw="---\nname: [oops\n---\n")

        report = build_skills(config, generated_at=GENERATED_AT)

        assert report.error_count == 2
        skills = _load(config.skills_manifest_path)["groups"][0]["skills"]
        broken = next(s for s in skills if s["id"] == "broken")
        assert broken["name"] == "broken"
        assert broken["description"] == ""

    def test_public_manifest_matches_schema(self, config, make_skill):
        make_skill("DevTools", "pdf-tools", description="PDF helpers")
        build_skills(config, generated_at=GENERATED_AT)

        schema = _load(config.skills_schema_path)
        jsonschema.Draft202012Validator.check_schema(schema)
        jsonschema.Draft202012Validator(schema).validate(_load(config.skills_manifest_path))

    def test_deterministic_output(self, config, make_skill):
        make_skill("DevTools", "pdf-tools", description="PDF helpers")
        make_skill("Writing", "essay", description="Essays")

        build_skills(config, generated_at=GENERATED_AT)
        first = config.skills_manifest_path.read_bytes(), config.skills_catalog_path.read_bytes()
        build_skills(config, generated_at=GENERATED_AT)
        second = config.skills_manifest_path.read_bytes(), config.skills_catalog_path.read_bytes()
        assert first == second

    def test_empty_corpus(self, repo, config):
        (repo / "skills").mkdir()
        report = build_skills(config, generated_at=GENERATED_AT)
        manifest = _load(config.skills_manifest_path)
        assert manifest["total_skills"] == 0
        assert manifest["groups"] == []
        assert report.ok

    def test_missing_root_is_fatal(self, config):
        with pytest.raises(CorpusRootMissingError):
            build_skills(config)
        assert not config.skills_manifest_path.exists()
