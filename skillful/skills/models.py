"""Skill data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from skillful.constants import ASSETS_DIRNAME, REFERENCES_DIRNAME, SCRIPTS_DIRNAME


class ResourceKind(str, Enum):
    SCRIPT = "script"
    REFERENCE = "reference"
    ASSET = "asset"

    @property
    def dirname(self) -> str:
        return _RESOURCE_DIRNAMES[self]


_RESOURCE_DIRNAMES: dict[ResourceKind, str] = {
    ResourceKind.SCRIPT: SCRIPTS_DIRNAME,
    ResourceKind.REFERENCE: REFERENCES_DIRNAME,
    ResourceKind.ASSET: ASSETS_DIRNAME,
}


@dataclass(frozen=True)
class DiscoveredSkillPath:
    """A SKILL.md found under a root.

    ``priority`` is the root's position in the ascending-priority root list.
    """

    root: Path
    path: Path
    priority: int = 0

    @property
    def relative_path(self) -> Path:
        return self.path.relative_to(self.root)

    def sort_key(self) -> tuple[int, str]:
        return self.priority, self.relative_path.as_posix()


@dataclass(frozen=True)
class SkillResource:
    """A file under ``scripts/``, ``references/`` or ``assets/``.

    Scripts carry no content type.
    """

    relative_path: str
    absolute_path: Path
    mime_type: Optional[str] = None


def _frozen_mapping(value: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(value or {}))


@dataclass(frozen=True)
class SkillDefinition:
    identifier: str
    name: str
    description: str
    content: str
    path: Path
    root: Path
    license: Optional[str] = None
    allowed_tools: tuple[str, ...] = ()
    metadata: Mapping[str, Any] = field(default_factory=lambda: _frozen_mapping(None))
    scripts: tuple[SkillResource, ...] = ()
    references: tuple[SkillResource, ...] = ()
    assets: tuple[SkillResource, ...] = ()
    priority: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.metadata, MappingProxyType):
            object.__setattr__(self, "metadata", _frozen_mapping(self.metadata))

    @property
    def directory(self) -> Path:
        return self.path.parent

    def resources(self, kind: ResourceKind) -> tuple[SkillResource, ...]:
        if kind == ResourceKind.SCRIPT:
            return self.scripts
        if kind == ResourceKind.REFERENCE:
            return self.references
        return self.assets

    def find_resource(
        self, kind: ResourceKind, relative_path: str
    ) -> Optional[SkillResource]:
        for resource in self.resources(kind):
            if resource.relative_path == relative_path:
                return resource
        return None
