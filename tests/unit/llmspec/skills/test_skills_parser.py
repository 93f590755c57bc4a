"""Tests for SKILL.md metadata parsing and skill discovery."""

import textwrap

from llmspec.report import BuildReport
from llmspec.skills.parser import parse_skill_metadata, read_skill_metadata
from llmspec.skills.walker import list_groups, list_skill_dirs


class TestParseSkillMetadata:
    def test_name_and_description(self):
        text = textwrap.dedent("""\
            ---
            name: PDF Tools
            description: Extract text from PDFs
            license: MIT
            ---
            # Body
        """)
        metadata, warnings = parse_skill_metadata(text, "pdf-tools")
        assert metadata.name == "PDF Tools"
        assert metadata.description == "Extract text from PDFs"
        assert warnings == []

    def test_missing_name_falls_back_to_folder(self):
        metadata, warnings = parse_skill_metadata("---\ndescription: d\n---\n", "pdf-tools")
        assert metadata.name == "pdf-tools"
        assert len(warnings) == 1
        assert "name" in warnings[0]

    def test_non_string_name_is_ignored(self):
        metadata, warnings = parse_skill_metadata("---\nname: 42\ndescription: d\n---\n", "x")
        assert metadata.name == "x"
        assert len(warnings) == 1

    def test_missing_description_is_empty(self):
        metadata, warnings = parse_skill_metadata("---\nname: X\n---\n", "x")
        assert metadata.description == ""
        assert len(warnings) == 1

    def test_broken_yaml(self):
        metadata, warnings = parse_skill_metadata("---\nname: [oops\n---\n", "pdf-tools")
        assert metadata.name == "pdf-tools"
        assert metadata.description == ""
        assert len(warnings) == 1

    def test_unreadable_file(self, tmp_path):
        metadata, warnings = read_skill_metadata(str(tmp_path / "nope" / "SKILL.md"), "nope")
        assert metadata.name == "nope"
        assert len(warnings) == 1


class TestWalker:
    def test_groups_and_skills(self, repo, make_skill):
        make_skill("Writing", "essay")
        make_skill("DevTools", "zeta")
        make_skill("DevTools", "Alpha")
        (repo / "skills" / "DevTools" / "not-a-skill").mkdir()
        make_skill("node_modules", "pkg")
        make_skill("DevTools", ".hidden")

        root = repo / "skills"
        report = BuildReport("skills")
        assert list_groups(root, report) == ["DevTools", "Writing"]
        names = [s.dir_name for s in list_skill_dirs(root / "DevTools", report)]
        assert names == ["Alpha", "zeta"]
        assert report.error_count == 0
