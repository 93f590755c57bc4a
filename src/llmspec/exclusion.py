"""
Exclusion filter for corpus scanning and archiving.

A single predicate decides which filesystem entries are invisible to the
walkers, the skill packager and the file counter. Every caller goes through
``should_exclude_path`` so archive contents and reported counts agree.

The rules are fixed: there is no way to pass extra patterns
or to switch a rule off.
"""

from __future__ import annotations

import os
import posixpath

VCS_DIR_NAMES = frozenset({".git", ".svn", ".hg"})

SENSITIVE_FILE_NAMES = frozenset({".env", ".npmrc", ".yarnrc", ".yarnrc.yml", ".pypirc"})

# Compared against the lower-cased basename
SECRET_FILE_NAMES = frozenset({"id_rsa", "id_ed25519"})
SECRET_SUFFIXES = (".pem", ".key", ".p12", ".pfx")

ARTIFACT_SUFFIXES = (".pyc", ".swp", ".swo")

EXCLUDED_DIR_NAMES = frozenset({
    "__pycache__",
    ".ssh",
    "node_modules",
    ".venv",
    "venv",
    "env",
    "dist",
    ".idea",
    ".vscode",
    ".terraform",
})


def to_posix(path_like: str) -> str:
    """Normalize a relative path to forward slashes."""
    return str(path_like).replace(os.sep, "/").replace("\\", "/")


def should_exclude_path(rel_path: str, is_directory: bool = False) -> bool:
    """
    Decide whether an entry must be skipped.

    Args:
        rel_path: Path relative to the scan root, e.g. ``"skill/.git/config"``.
        is_directory: Whether the entry is a directory. Only directories are
            excluded for being dot-prefixed; dotfiles such as ``.gitkeep`` are kept.

    Returns:
        True if the entry (and, for a directory, everything beneath it)
        must not be scanned, archived or counted.
    """
    rel = to_posix(rel_path)
    base = posixpath.basename(rel.rstrip("/"))
    base_lower = base.lower()

    if base == ".DS_Store":
        return True
    if base_lower.endswith(ARTIFACT_SUFFIXES):
        return True

    # VCS metadata, as the entry itself or anywhere above it
    if base in VCS_DIR_NAMES:
        return True
    if any(f"/{name}/" in f"/{rel}" for name in VCS_DIR_NAMES):
        return True

    if base in SENSITIVE_FILE_NAMES or base.startswith(".env."):
        return True

    if base_lower in SECRET_FILE_NAMES:
        return True
    if base_lower.endswith(SECRET_SUFFIXES):
        return True

    segments = [seg for seg in rel.split("/") if seg and seg not in (".", "..")]
    if any(seg in EXCLUDED_DIR_NAMES for seg in segments):
        return True

    # Every segment above the basename is a directory
    if any(seg.startswith(".") for seg in segments[:-1]):
        return True

    if is_directory and base.startswith("."):
        return True

    return False
