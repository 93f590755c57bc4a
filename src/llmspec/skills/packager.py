"""
Skill packaging: one ZIP archive per skill folder.

The archive writer and the file counter walk the tree independently but
both consult ``should_exclude_path`` with paths relative to the skill
folder, so the reported ``file_count`` matches the archive's file entries.
The count never inspects the archive.
"""

from __future__ import annotations

import contextlib
import logging
import os
import stat
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from llmspec.exclusion import should_exclude_path, to_posix
from llmspec.report import BuildReport
from llmspec.skills.models import SkillContents
from llmspec.utils.boundary import assert_inside_dir
from llmspec.utils.fs import count_included_files

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
MemberFilter = Callable[[str, bool], bool]

ZIP_COMPRESS_LEVEL = 9
LICENSE_CANDIDATES = ("LICENSE.txt", "LICENSE.md", "LICENSE")


@dataclass
class PackageResult:
    """Outcome of packaging one skill."""

    zip_path: str
    zip_size_bytes: int = 0
    file_count: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def archive_path_for(downloads_dir: PathLike, identity: str) -> Path:
    """
    Destination of a skill archive: ``<downloads_dir>/<identity>.zip``.

    Raises:
        OutputBoundaryError: If the identity would place the archive outside
            downloads_dir (e.g. ``../../evil``).
    """
    candidate = os.path.join(os.path.abspath(downloads_dir), f"{identity}.zip")
    return assert_inside_dir(downloads_dir, candidate, label=f"archive {identity}")


def _raise(err: OSError) -> None:
    raise err


def create_skill_zip(
    skill_dir: PathLike,
    folder_name: str,
    zip_path: PathLike,
    member_filter: MemberFilter = should_exclude_path,
) -> int:
    """
    Write ``skill_dir`` into a DEFLATE archive rooted at ``folder_name/``.

    The archive is written to a temporary sibling and moved into place, so
    a failed run never leaves a truncated archive at ``zip_path``.

    Returns:
        Number of file entries written.
    """
    root = os.path.abspath(skill_dir)
    zip_path = os.fspath(zip_path)
    tmp_path = f"{zip_path}.tmp"
    written = 0

    try:
        with zipfile.ZipFile(
            tmp_path,
            "w",
            compression=zipfile.ZIP_DEFLATED,
            compresslevel=ZIP_COMPRESS_LEVEL,
        ) as zf:
            for dirpath, dirnames, filenames in os.walk(root, onerror=_raise, followlinks=False):
                rel_dir = os.path.relpath(dirpath, root)
                rel_dir = "" if rel_dir == "." else to_posix(rel_dir)

                kept = []
                for name in sorted(dirnames):
                    rel = f"{rel_dir}/{name}" if rel_dir else name
                    if os.path.islink(os.path.join(dirpath, name)):
                        continue
                    if member_filter(rel, True):
                        continue
                    kept.append(name)
                dirnames[:] = kept

                for name in sorted(filenames):
                    rel = f"{rel_dir}/{name}" if rel_dir else name
                    if member_filter(rel, False):
                        continue
                    abs_path = os.path.join(dirpath, name)
                    if not stat.S_ISREG(os.lstat(abs_path).st_mode):
                        continue
                    zf.write(abs_path, arcname=f"{folder_name}/{rel}")
                    written += 1
        os.replace(tmp_path, zip_path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.remove(tmp_path)
        raise

    return written


def detect_skill_contents(skill_dir: PathLike) -> SkillContents:
    """Flags for optional bundle parts."""
    root = os.fspath(skill_dir)
    return SkillContents(
        has_scripts=os.path.isdir(os.path.join(root, "scripts")),
        has_references=os.path.isdir(os.path.join(root, "references")),
        has_license=any(os.path.exists(os.path.join(root, name)) for name in LICENSE_CANDIDATES),
    )


def package_skill(
    skill_dir: PathLike,
    folder_name: str,
    zip_path: PathLike,
    report: Optional[BuildReport] = None,
) -> PackageResult:
    """
    Count and archive one skill.

    Archive failures are recovered: the result carries zero size and zero
    count plus the error text, and the caller moves on to the next skill.
    """
    result = PackageResult(zip_path=os.fspath(zip_path))
    try:
        file_count = count_included_files(skill_dir, report)
        create_skill_zip(skill_dir, folder_name, zip_path)
        result.zip_size_bytes = os.stat(zip_path).st_size
        result.file_count = file_count
    except (OSError, zipfile.BadZipFile, ValueError) as e:
        logger.debug("Packaging %s failed", folder_name, exc_info=True)
        result.zip_size_bytes = 0
        result.file_count = 0
        result.error = f"{type(e).__name__}: {e}"
    return result
