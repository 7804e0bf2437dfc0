"""Read-only skill index."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Optional

from skillful.skills.models import SkillDefinition


def _listing_key(skill: SkillDefinition) -> tuple[str, str]:
    return skill.name, skill.identifier


class SkillIndex:
    """Skills keyed by identifier.

    The index copies what it is given and exposes no mutation API; a rebuild
    produces a new index instead of changing this one.
    """

    def __init__(self, skills: Iterable[SkillDefinition] = ()) -> None:
        entries: dict[str, SkillDefinition] = {}
        for skill in skills:
            entries[skill.identifier] = skill
        self._entries = MappingProxyType(entries)
        self._listing = tuple(sorted(entries.values(), key=_listing_key))
        self._ids = tuple(sorted(entries))

    def get(self, identifier: str) -> Optional[SkillDefinition]:
        return self._entries.get(identifier)

    def has(self, identifier: str) -> bool:
        return identifier in self._entries

    def list(self) -> list[SkillDefinition]:
        """All skills sorted by display name (identifier breaks ties)."""
        return list(self._listing)

    def ids(self) -> list[str]:
        return list(self._ids)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SkillDefinition]:
        return iter(self._listing)

    def __repr__(self) -> str:
        return f"SkillIndex(size={len(self)})"
