"""
Filesystem walking helpers shared by both pipelines.

Directory read failures never raise: they are reported (when a report is
given) and treated as an empty directory. Symlinks and other non-regular
entries are skipped without comment.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple, Union

from llmspec.exclusion import should_exclude_path

if TYPE_CHECKING:
    from llmspec.report import BuildReport

PathLike = Union[str, Path]


def safe_scandir(
    dir_path: PathLike,
    report: Optional["BuildReport"] = None,
    label: str = "",
) -> List[os.DirEntry]:
    """List a directory, returning an empty list if it cannot be read."""
    try:
        with os.scandir(dir_path) as it:
            entries = list(it)
    except OSError as e:
        if report is not None:
            what = f" ({label})" if label else ""
            report.error(f"Failed to read directory{what}: {dir_path}: {e}")
        return []
    entries.sort(key=lambda entry: entry.name)
    return entries


def is_real_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def is_real_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file(follow_symlinks=False)
    except OSError:
        return False


def iter_included_files(
    root: PathLike,
    report: Optional["BuildReport"] = None,
    label: str = "",
) -> Iterator[Tuple[str, str]]:
    """
    Depth-first walk yielding ``(absolute_path, relative_posix_path)`` of
    every regular file under ``root`` that survives the exclusion filter.
    Excluded directories are not descended into.
    """

    def walk(dir_abs: str, rel_from_root: str) -> Iterator[Tuple[str, str]]:
        scan_label = f"{label}: {rel_from_root or '<root>'}" if label else ""
        for entry in safe_scandir(dir_abs, report, scan_label):
            child_rel = f"{rel_from_root}/{entry.name}" if rel_from_root else entry.name
            is_dir = is_real_dir(entry)

            if should_exclude_path(child_rel, is_directory=is_dir):
                continue

            if is_dir:
                yield from walk(entry.path, child_rel)
            elif is_real_file(entry):
                yield entry.path, child_rel

    yield from walk(os.path.abspath(root), "")


def count_included_files(root: PathLike, report: Optional["BuildReport"] = None) -> int:
    """Count regular files under ``root`` that pass the exclusion filter."""
    return sum(1 for _ in iter_included_files(root, report))
