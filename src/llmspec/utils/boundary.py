"""Lexical output-boundary checks."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from llmspec.errors import OutputBoundaryError

PathLike = Union[str, Path]


def is_inside_dir(base_dir: PathLike, target: PathLike) -> bool:
    """
    Check that ``target`` stays within ``base_dir`` after normalization.

    The check is lexical (``..`` segments are collapsed, symlinks are not
    followed). ``target == base_dir`` counts as inside.
    """
    base = os.path.abspath(base_dir)
    resolved = os.path.abspath(target)
    try:
        rel = os.path.relpath(resolved, base)
    except ValueError:
        # Different drives on Windows
        return False
    rel_posix = rel.replace(os.sep, "/")
    if os.path.isabs(rel) or rel_posix == ".." or rel_posix.startswith("../"):
        return False
    return True


def assert_inside_dir(base_dir: PathLike, target: PathLike, label: str = "") -> Path:
    """
    Return ``target`` as an absolute path, or raise if it escapes ``base_dir``.

    Raises:
        OutputBoundaryError: If the normalized target is outside base_dir.
    """
    if not is_inside_dir(base_dir, target):
        raise OutputBoundaryError(
            target=os.path.abspath(target),
            base_dir=os.path.abspath(base_dir),
            label=label,
        )
    return Path(os.path.abspath(target))
