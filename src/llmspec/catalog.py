"""
Catalog assembly shared by the skills and definitions pipelines.

The assembler collects normalized units under their owning group, rejects
duplicate identities, and hands back a deterministically sorted structure.
Each pipeline projects that structure into its public manifest and its
internal catalog; counts are computed from the sorted result, never tracked
while units are being added.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from llmspec.report import BuildReport
from llmspec.utils.text import name_sort_key

logger = logging.getLogger(__name__)

G = TypeVar("G")
U = TypeVar("U")


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. ``2025-01-31T12:00:00.000Z``."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class GroupEntry(Generic[G, U]):
    """A group record with the units accepted into it."""

    slug: str
    name: str
    record: G
    units: List[U] = field(default_factory=list)


class CatalogAssembler(Generic[G, U]):
    """
    Accumulate units per group for one run.

    Identities are compared case-insensitively: two skills ``Foo`` and
    ``foo`` would map to archives that collide on case-insensitive
    filesystems. The first claimant wins; later ones are rejected and
    counted as errors.

    Example:
        assembler = CatalogAssembler(report, unit_name=lambda s: s.name)
        assembler.add_group("dev-tools", "DevTools", group_record)
        if assembler.claim("my-skill", "DevTools/my-skill"):
            assembler.add_unit("dev-tools", skill_record)
        groups = assembler.sorted_groups()
    """

    def __init__(self, report: BuildReport, unit_name: Callable[[U], str]):
        self.report = report
        self._unit_name = unit_name
        self._groups: Dict[str, GroupEntry[G, U]] = {}
        self._identities: Dict[str, str] = {}

    def add_group(self, slug: str, name: str, record: G) -> bool:
        """Register a group. Returns False if its slug is already taken."""
        existing = self._groups.get(slug)
        if existing is not None:
            self.report.error(
                f"Duplicate group slug '{slug}' for '{name}' "
                f"(already used by '{existing.name}'). Skipping group."
            )
            return False
        self._groups[slug] = GroupEntry(slug=slug, name=name, record=record)
        return True

    def claim(self, identity: str, label: str) -> bool:
        """
        Reserve a unit identity for this run.

        Call before producing any per-unit output so that a duplicate never
        overwrites the first unit's artifacts.
        """
        key = identity.casefold()
        first = self._identities.get(key)
        if first is not None:
            self.report.error(
                f"Duplicate identity '{identity}' at {label} collides with {first}. Skipping."
            )
            return False
        self._identities[key] = label
        return True

    def add_unit(self, slug: str, unit: U) -> None:
        """Attach a unit to a registered group."""
        self._groups[slug].units.append(unit)

    def sorted_groups(self) -> List[GroupEntry[G, U]]:
        """Groups sorted by display name, each with units sorted by display name."""
        out = []
        for entry in sorted(self._groups.values(), key=lambda e: name_sort_key(e.name)):
            units = sorted(entry.units, key=lambda u: name_sort_key(self._unit_name(u)))
            out.append(GroupEntry(slug=entry.slug, name=entry.name, record=entry.record, units=units))
        return out
