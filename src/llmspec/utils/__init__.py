"""Shared helpers for the build pipelines."""

from llmspec.utils.boundary import assert_inside_dir, is_inside_dir
from llmspec.utils.fs import count_included_files, iter_included_files, safe_scandir
from llmspec.utils.text import format_bytes, name_sort_key, slugify, truncate

__all__ = [
    "assert_inside_dir",
    "count_included_files",
    "format_bytes",
    "is_inside_dir",
    "iter_included_files",
    "name_sort_key",
    "safe_scandir",
    "slugify",
    "truncate",
]
