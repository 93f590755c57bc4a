"""
Run report for a single pipeline invocation.

Counters are threaded through the pipeline as an explicit BuildReport and
returned to the caller, so a pipeline can be run repeatedly in one process
and inspected by tests.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional

from llmspec.utils.text import format_bytes

logger = logging.getLogger(__name__)


class BuildReport:
    """Report of what a build pipeline did."""

    def __init__(self, pipeline: str) -> None:
        self.pipeline: str = pipeline
        self.group_count: int = 0
        self.unit_count: int = 0
        self.packaged_count: int = 0
        self.total_zip_bytes: int = 0
        self.error_count: int = 0
        self.warnings: List[str] = []
        self.outputs: Dict[str, str] = {}

    def warning(self, message: str) -> None:
        """Record an informational warning that is not an input defect."""
        self.warnings.append(message)
        logger.warning(message)

    def error(self, message: str) -> None:
        """Record a recovered defect: logged as a warning, counted as an error."""
        self.warnings.append(message)
        self.error_count += 1
        logger.warning(message)

    def extend_errors(self, messages: List[str]) -> None:
        for message in messages:
            self.error(message)

    @property
    def ok(self) -> bool:
        return self.error_count == 0

    def summary(self, relative_to: Optional[str] = None) -> str:
        lines = [
            f"--- {self.pipeline} summary ---",
            f"Groups:        {self.group_count}",
            f"Units:         {self.unit_count}",
        ]
        if self.pipeline == "skills":
            lines.append(f"Packaged:      {self.packaged_count}")
            lines.append(f"ZIP total:     {format_bytes(self.total_zip_bytes)}")
        lines.append(f"Warnings:      {len(self.warnings)}")
        lines.append(f"Errors:        {self.error_count}")
        for label, path in self.outputs.items():
            shown = os.path.relpath(path, relative_to) if relative_to else path
            lines.append(f"{label + ':':<15}{shown}")
        return "\n".join(lines)
