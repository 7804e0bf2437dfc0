"""Resolve and read files bundled with a skill."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillful.constants import FALLBACK_MIME_TYPE
from skillful.errors import ResourceNotFoundError, ResourceReadError
from skillful.skills.filesystem import ISkillFileSystem, LocalSkillFileSystem
from skillful.skills.models import ResourceKind, SkillDefinition
from skillful.utils import is_under


@dataclass(frozen=True)
class ResolvedResource:
    identifier: str
    kind: ResourceKind
    relative_path: str
    absolute_path: Path
    mime_type: str
    content: str


class SkillResourceResolver:
    """Look up a resource in a skill's resource map and read it.

    Only paths recorded at build time are served, and only while they still
    resolve inside the skill directory.
    """

    def __init__(self, filesystem: ISkillFileSystem | None = None) -> None:
        self._filesystem = filesystem or LocalSkillFileSystem()

    def resolve(
        self, skill: SkillDefinition, kind: ResourceKind | str, relative_path: str
    ) -> ResolvedResource:
        kind = ResourceKind(kind)
        requested = relative_path.replace("\\", "/")
        while requested.startswith("./"):
            requested = requested[2:]
        resource = skill.find_resource(kind, requested)
        if resource is None and not requested.startswith(f"{kind.dirname}/"):
            resource = skill.find_resource(kind, f"{kind.dirname}/{requested}")
        if resource is None:
            raise ResourceNotFoundError(
                skill.directory / relative_path, skill.identifier, kind.value
            )
        if not is_under(resource.absolute_path, skill.directory):
            raise ResourceNotFoundError(
                resource.absolute_path, skill.identifier, kind.value
            )

        try:
            content = self._filesystem.read_text(resource.absolute_path)
        except (OSError, UnicodeDecodeError) as exc:
            raise ResourceReadError(resource.absolute_path, str(exc)) from exc

        mime_type = resource.mime_type or self._filesystem.detect_mime_type(
            resource.absolute_path
        )
        return ResolvedResource(
            identifier=skill.identifier,
            kind=kind,
            relative_path=resource.relative_path,
            absolute_path=resource.absolute_path,
            mime_type=mime_type or FALLBACK_MIME_TYPE,
            content=content,
        )
