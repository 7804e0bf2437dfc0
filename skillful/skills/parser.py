"""Turn a discovered SKILL.md into a validated SkillDefinition."""

from __future__ import annotations

import logging

import yaml

from skillful.errors import SkillPathError, SkillReadError, SkillValidationError
from skillful.skills.filesystem import ISkillFileSystem, LocalSkillFileSystem
from skillful.skills.identifiers import display_name, skill_identifier
from skillful.skills.frontmatter import parse_frontmatter
from skillful.skills.models import (
    DiscoveredSkillPath,
    ResourceKind,
    SkillDefinition,
    SkillResource,
)
from skillful.skills.validation import RejectedFrontmatter, validate_frontmatter

logger = logging.getLogger(__name__)


class SkillParser:
    def __init__(self, filesystem: ISkillFileSystem | None = None) -> None:
        self._filesystem = filesystem or LocalSkillFileSystem()

    def load(self, discovered: DiscoveredSkillPath) -> SkillDefinition:
        """Read and parse one discovered file."""
        try:
            text = self._filesystem.read_text(discovered.path)
        except (OSError, UnicodeDecodeError) as exc:
            raise SkillReadError(discovered.path, str(exc)) from exc
        return self.parse(discovered, text)

    def parse(self, discovered: DiscoveredSkillPath, text: str) -> SkillDefinition:
        path = discovered.path
        try:
            relative = path.relative_to(discovered.root)
        except ValueError as exc:
            raise SkillPathError(path, f"not under root {discovered.root}") from exc
        if str(relative) in ("", "."):
            raise SkillPathError(path, "empty path relative to root")

        identifier = skill_identifier(relative)
        if not identifier:
            raise SkillPathError(path, "SKILL.md must live in a directory below its root")

        try:
            raw, body = parse_frontmatter(text)
        except yaml.YAMLError as exc:
            problem = getattr(exc, "problem", None) or str(exc)
            raise SkillValidationError(
                path, [f"frontmatter is not valid YAML ({problem})"]
            ) from exc

        outcome = validate_frontmatter(raw)
        if isinstance(outcome, RejectedFrontmatter):
            raise SkillValidationError(path, outcome.violations)

        skill = SkillDefinition(
            identifier=identifier,
            name=display_name(path),
            description=outcome.description,
            content=body.strip(),
            path=path,
            root=discovered.root,
            license=outcome.license,
            allowed_tools=outcome.allowed_tools,
            metadata=outcome.metadata,
            scripts=self._resources(discovered, ResourceKind.SCRIPT),
            references=self._resources(discovered, ResourceKind.REFERENCE),
            assets=self._resources(discovered, ResourceKind.ASSET),
            priority=discovered.priority,
        )
        logger.debug("Parsed skill %s from %s", identifier, path)
        return skill

    def _resources(
        self, discovered: DiscoveredSkillPath, kind: ResourceKind
    ) -> tuple[SkillResource, ...]:
        skill_dir = discovered.path.parent
        resources: list[SkillResource] = []
        for file_path in self._filesystem.list_files(skill_dir / kind.dirname):
            mime_type = (
                None
                if kind == ResourceKind.SCRIPT
                else self._filesystem.detect_mime_type(file_path)
            )
            resources.append(
                SkillResource(
                    relative_path=file_path.relative_to(skill_dir).as_posix(),
                    absolute_path=file_path,
                    mime_type=mime_type,
                )
            )
        return tuple(resources)
