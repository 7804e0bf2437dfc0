"""Build a SkillIndex from an ordered list of skill roots."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Sequence

from skillful.constants import DEFAULT_MAX_WORKERS
from skillful.errors import NoSkillRootsError, SkillfulError
from skillful.registry.diagnostics import RegistryDiagnostics
from skillful.registry.index import SkillIndex
from skillful.skills.filesystem import ISkillFileSystem
from skillful.skills.models import DiscoveredSkillPath, SkillDefinition
from skillful.skills.parser import SkillParser
from skillful.skills.scanner import SkillScanner

logger = logging.getLogger(__name__)


class DuplicatePolicy(str, Enum):
    """Which definition keeps an identifier claimed by more than one file.

    Roots are given in ascending priority, so ``LAST_WINS`` lets a later
    (project-local) root override an earlier (global) one, and
    ``FIRST_WINS`` keeps whatever the earliest root provided.
    """

    LAST_WINS = "last-wins"
    FIRST_WINS = "first-wins"


@dataclass(frozen=True)
class _LoadOutcome:
    discovered: DiscoveredSkillPath
    skill: Optional[SkillDefinition] = None
    error: Optional[str] = None


class RegistryBuilder:
    def __init__(
        self,
        scanner: SkillScanner | None = None,
        parser: SkillParser | None = None,
        policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        self._scanner = scanner or SkillScanner()
        self._parser = parser or SkillParser()
        self._policy = policy
        self._max_workers = max_workers

    @classmethod
    def create_default(
        cls,
        filesystem: ISkillFileSystem | None = None,
        policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> "RegistryBuilder":
        return cls(
            scanner=SkillScanner(filesystem),
            parser=SkillParser(filesystem),
            policy=policy,
            max_workers=max_workers,
        )

    @property
    def policy(self) -> DuplicatePolicy:
        return self._policy

    def build(
        self,
        roots: Sequence[Path],
        diagnostics: RegistryDiagnostics | None = None,
    ) -> tuple[SkillIndex, RegistryDiagnostics]:
        """Scan ``roots`` (ascending priority) and return the finished index.

        Individual files never abort the build: read, validation and
        duplicate problems become rejections in ``diagnostics``. Only an
        empty root list is fatal. A root listed more than once is scanned
        once, at the priority of its last position.
        """
        if not roots:
            raise NoSkillRootsError()
        if diagnostics is None:
            diagnostics = RegistryDiagnostics()

        discovered = self._discover(roots)
        diagnostics.record_discovered(len(discovered))

        entries: dict[str, SkillDefinition] = {}
        for outcome in self._load_all(discovered):
            if outcome.skill is None:
                error = outcome.error or f"Failed to parse skill: {outcome.discovered.path}"
                logger.warning("Rejected skill: %s", error)
                diagnostics.record_rejection(error)
                continue
            self._insert(entries, outcome.skill, diagnostics)

        index = SkillIndex(entries.values())
        logger.info(
            "Skill registry built: discovered=%d parsed=%d rejected=%d duplicates=%d",
            diagnostics.discovered,
            diagnostics.parsed,
            diagnostics.rejected,
            diagnostics.duplicates,
        )
        return index, diagnostics

    def _discover(self, roots: Sequence[Path]) -> list[DiscoveredSkillPath]:
        priorities: dict[Path, int] = {}
        for priority, root in enumerate(roots):
            resolved = Path(root).expanduser().resolve()
            if resolved in priorities:
                logger.debug("Repeated skill root %s now at priority %d", resolved, priority)
            priorities[resolved] = priority

        found: list[DiscoveredSkillPath] = []
        for resolved, priority in priorities.items():
            found.extend(self._scanner.scan(resolved, priority=priority))
        found.sort(key=DiscoveredSkillPath.sort_key)
        return found

    def _load_all(
        self, discovered: list[DiscoveredSkillPath]
    ) -> Iterator[_LoadOutcome]:
        if self._max_workers <= 1 or len(discovered) <= 1:
            yield from map(self._load_one, discovered)
            return
        # Executor.map yields in submission order, which keeps insertion
        # deterministic even though files are parsed concurrently.
        with ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix="skillful-parse"
        ) as pool:
            yield from pool.map(self._load_one, discovered)

    def _load_one(self, discovered: DiscoveredSkillPath) -> _LoadOutcome:
        try:
            return _LoadOutcome(discovered=discovered, skill=self._parser.load(discovered))
        except SkillfulError as exc:
            return _LoadOutcome(discovered=discovered, error=str(exc))
        except Exception as exc:
            logger.debug("Unexpected error loading %s", discovered.path, exc_info=True)
            return _LoadOutcome(
                discovered=discovered,
                error=f"Unexpected error while loading skill ({exc!r}): {discovered.path}",
            )

    def _insert(
        self,
        entries: dict[str, SkillDefinition],
        skill: SkillDefinition,
        diagnostics: RegistryDiagnostics,
    ) -> None:
        existing = entries.get(skill.identifier)
        if existing is None:
            entries[skill.identifier] = skill
            diagnostics.record_parsed()
            return

        if self._prefers(candidate=skill, existing=existing):
            kept, dropped = skill, existing
        else:
            kept, dropped = existing, skill
        entries[skill.identifier] = kept
        message = (
            f"Duplicate skill identifier '{skill.identifier}' "
            f"({self._policy.value}, kept {kept.path}): {dropped.path}"
        )
        logger.warning("%s", message)
        diagnostics.record_duplicate(message)

    def _prefers(self, candidate: SkillDefinition, existing: SkillDefinition) -> bool:
        if self._policy == DuplicatePolicy.LAST_WINS:
            return candidate.priority >= existing.priority
        return candidate.priority < existing.priority


def build_registry(
    roots: Sequence[Path],
    policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS,
    max_workers: int = DEFAULT_MAX_WORKERS,
    filesystem: ISkillFileSystem | None = None,
) -> tuple[SkillIndex, RegistryDiagnostics]:
    builder = RegistryBuilder.create_default(
        filesystem=filesystem, policy=policy, max_workers=max_workers
    )
    return builder.build(roots)
