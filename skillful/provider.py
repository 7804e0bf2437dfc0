"""Own the skill index lifecycle and serve lookups and searches from it."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Sequence

from skillful.config import SkillfulConfig
from skillful.constants import DEFAULT_READY_TIMEOUT
from skillful.errors import RegistryNotReadyError, SkillNotFoundError
from skillful.registry.builder import RegistryBuilder
from skillful.registry.diagnostics import RegistryDiagnostics
from skillful.registry.index import SkillIndex
from skillful.registry.readiness import ReadinessGate, ReadyState
from skillful.resources import ResolvedResource, SkillResourceResolver
from skillful.search.models import SearchResult
from skillful.search.query import QueryInput
from skillful.search.searcher import SkillSearcher
from skillful.skills.filesystem import ISkillFileSystem, LocalSkillFileSystem
from skillful.skills.models import ResourceKind, SkillDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Snapshot:
    index: SkillIndex
    diagnostics: RegistryDiagnostics
    searcher: SkillSearcher


@dataclass(frozen=True)
class LoadResult:
    loaded: list[SkillDefinition] = field(default_factory=list)
    not_found: list[str] = field(default_factory=list)


class SkillProvider:
    """Entry point for consumers.

    Every read goes through the readiness gate: calls block until the index
    is ready and raise ``RegistryNotReadyError`` if the build failed or
    ``ready_timeout`` elapsed first. A rebuild replaces the whole snapshot.
    """

    def __init__(
        self,
        roots: Sequence[Path],
        builder: RegistryBuilder | None = None,
        filesystem: ISkillFileSystem | None = None,
        ready_timeout: Optional[float] = DEFAULT_READY_TIMEOUT,
    ) -> None:
        self._roots = tuple(Path(root) for root in roots)
        self._filesystem = filesystem or LocalSkillFileSystem()
        self._builder = builder or RegistryBuilder.create_default(self._filesystem)
        self._resolver = SkillResourceResolver(self._filesystem)
        self._ready_timeout = ready_timeout
        self._gate = ReadinessGate()
        self._build_lock = threading.Lock()
        self._snapshot: Optional[_Snapshot] = None

    @classmethod
    def from_config(
        cls,
        config: SkillfulConfig,
        roots: Sequence[Path] | None = None,
        filesystem: ISkillFileSystem | None = None,
    ) -> "SkillProvider":
        builder = RegistryBuilder.create_default(
            filesystem=filesystem,
            policy=config.duplicate_policy,
            max_workers=config.max_workers,
        )
        return cls(
            roots=roots if roots else config.base_paths,
            builder=builder,
            filesystem=filesystem,
            ready_timeout=config.ready_timeout,
        )

    @property
    def roots(self) -> tuple[Path, ...]:
        return self._roots

    @property
    def state(self) -> ReadyState:
        return self._gate.state

    def build(self) -> RegistryDiagnostics:
        """Build a fresh index and publish it; returns its diagnostics."""
        with self._build_lock:
            self._gate.mark_building()
            try:
                index, diagnostics = self._builder.build(self._roots)
            except BaseException as exc:
                self._gate.mark_failed(exc)
                raise
            self._snapshot = _Snapshot(
                index=index, diagnostics=diagnostics, searcher=SkillSearcher(index)
            )
            self._gate.mark_ready()
            return diagnostics

    def rebuild(self) -> RegistryDiagnostics:
        return self.build()

    def start(self) -> threading.Thread:
        """Build in a background thread; readers block until it finishes."""
        self._gate.mark_building()
        thread = threading.Thread(
            target=self._build_in_background, name="skillful-build", daemon=True
        )
        thread.start()
        return thread

    def wait_until_ready(self, timeout: Optional[float] = None) -> None:
        self._gate.wait_ready(self._ready_timeout if timeout is None else timeout)

    @property
    def index(self) -> SkillIndex:
        return self._ready_snapshot().index

    @property
    def diagnostics(self) -> RegistryDiagnostics:
        return self._ready_snapshot().diagnostics

    def get(self, identifier: str) -> Optional[SkillDefinition]:
        return self._ready_snapshot().index.get(identifier)

    def list(self) -> list[SkillDefinition]:
        return self._ready_snapshot().index.list()

    def ids(self) -> list[str]:
        return self._ready_snapshot().index.ids()

    def search(self, query: QueryInput) -> SearchResult:
        return self._ready_snapshot().searcher.search(query)

    def load(self, identifiers: Iterable[str]) -> LoadResult:
        index = self._ready_snapshot().index
        result = LoadResult()
        for identifier in identifiers:
            skill = index.get(identifier)
            if skill is None:
                result.not_found.append(identifier)
            else:
                result.loaded.append(skill)
        return result

    def read_resource(
        self, identifier: str, kind: ResourceKind | str, relative_path: str
    ) -> ResolvedResource:
        skill = self.get(identifier)
        if skill is None:
            raise SkillNotFoundError(identifier)
        return self._resolver.resolve(skill, kind, relative_path)

    def _ready_snapshot(self) -> _Snapshot:
        self._gate.wait_ready(self._ready_timeout)
        snapshot = self._snapshot
        if snapshot is None:
            raise RegistryNotReadyError(self._gate.state.value)
        return snapshot

    def _build_in_background(self) -> None:
        try:
            self.build()
        except Exception:
            logger.error("Skill registry build failed", exc_info=True)
