"""
JSON writer for manifests, catalogs and schemas.

Output is deterministic: two-space indentation, keys in the order the
models declare them, non-ASCII kept as-is, trailing newline.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Union

from llmspec.utils.boundary import assert_inside_dir

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def to_json_text(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def write_json_pretty(path: PathLike, data: Any, base_dir: PathLike, label: str = "") -> Path:
    """
    Write ``data`` as pretty JSON to ``path``.

    The boundary check runs before anything touches the disk.

    Raises:
        OutputBoundaryError: If ``path`` resolves outside ``base_dir``.
        OSError: If the file cannot be written.
    """
    target = assert_inside_dir(base_dir, path, label=label)
    text = to_json_text(data)

    try:
        os.makedirs(target.parent, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    except OSError as e:
        logger.error("Failed to write %s: %s", target, e)
        raise

    logger.debug("Wrote %s (%d bytes)", target, len(text.encode("utf-8")))
    return target
