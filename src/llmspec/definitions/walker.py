"""Discovery of provider directories and model TOML files."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple, Union

from llmspec.exclusion import should_exclude_path
from llmspec.report import BuildReport
from llmspec.utils.fs import is_real_dir, iter_included_files, safe_scandir
from llmspec.utils.text import name_sort_key

PathLike = Union[str, Path]

MODELS_DIR = "models"
LOGO_FILE = "logo.svg"


def list_provider_dirs(root: PathLike, report: BuildReport) -> List[str]:
    """Provider folder names directly under ``root``, sorted case-insensitively."""
    names = [
        entry.name
        for entry in safe_scandir(root, report, "providers root")
        if is_real_dir(entry) and not should_exclude_path(entry.name, is_directory=True)
    ]
    return sorted(names, key=name_sort_key)


def list_model_files(models_root: PathLike, report: BuildReport) -> List[Tuple[str, str]]:
    """
    All ``*.toml`` files below a provider's ``models/`` directory.

    Returns ``(absolute_path, relative_posix_path)`` pairs sorted by the
    relative path. Nested folders are part of the model identity.
    """
    found = [
        (abs_path, rel)
        for abs_path, rel in iter_included_files(models_root, report, label=str(models_root))
        if rel.lower().endswith(".toml")
    ]
    found.sort(key=lambda pair: pair[1])
    return found
