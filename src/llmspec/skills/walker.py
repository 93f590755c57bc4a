"""Discovery of skill groups and skill folders."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from llmspec.exclusion import should_exclude_path
from llmspec.report import BuildReport
from llmspec.utils.fs import is_real_dir, safe_scandir
from llmspec.utils.text import name_sort_key

SKILL_FILE = "SKILL.md"

PathLike = Union[str, Path]


@dataclass(frozen=True)
class SkillDir:
    """A folder that qualifies as a skill."""

    dir_name: str
    path: str

    @property
    def skill_file(self) -> str:
        return os.path.join(self.path, SKILL_FILE)


def list_groups(skills_root: PathLike, report: Optional[BuildReport] = None) -> List[str]:
    """Names of the group folders directly under the skills root."""
    names = [
        entry.name
        for entry in safe_scandir(skills_root, report, "skills root")
        if is_real_dir(entry) and not should_exclude_path(entry.name, is_directory=True)
    ]
    return sorted(names, key=name_sort_key)


def list_skill_dirs(group_dir: PathLike, report: Optional[BuildReport] = None) -> List[SkillDir]:
    """Folders directly under a group that contain a SKILL.md file."""
    group_name = os.path.basename(os.path.abspath(group_dir))
    skills = []
    for entry in safe_scandir(group_dir, report, f"group {group_name}"):
        if not is_real_dir(entry):
            continue
        if should_exclude_path(f"{group_name}/{entry.name}", is_directory=True):
            continue
        if os.path.isfile(os.path.join(entry.path, SKILL_FILE)):
            skills.append(SkillDir(dir_name=entry.name, path=os.path.abspath(entry.path)))

    skills.sort(key=lambda s: name_sort_key(s.dir_name))
    return skills
