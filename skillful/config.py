"""Runtime configuration and default skill root resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence

from jsonschema import Draft202012Validator

from skillful.constants import (
    APP_NAME,
    CONFIG_FILENAME,
    DEFAULT_MAX_WORKERS,
    DEFAULT_READY_TIMEOUT,
    HOST_APP_NAME,
    PROJECT_DIRNAME,
    SKILLS_DIRNAME,
)
from skillful.errors import InvalidConfigSchemaError, InvalidJsonFormatError
from skillful.registry.builder import DuplicatePolicy
from skillful.utils import format_schema_error, read_json_safe


CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "debug": {"type": "boolean"},
        "basePaths": {
            "oneOf": [
                {"type": "string", "minLength": 1},
                {"type": "array", "items": {"type": "string", "minLength": 1}},
            ]
        },
        "duplicatePolicy": {"enum": [policy.value for policy in DuplicatePolicy]},
        "maxWorkers": {"type": "integer", "minimum": 1},
        "readyTimeout": {"type": "number", "exclusiveMinimum": 0},
    },
}


def config_home() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg).expanduser()
    return Path.home() / ".config"


def default_skill_roots(project_dir: Path) -> list[Path]:
    """Roots in ascending priority: user-global first, project-local last."""
    return [
        config_home() / HOST_APP_NAME / SKILLS_DIRNAME,
        project_dir / PROJECT_DIRNAME / SKILLS_DIRNAME,
    ]


@dataclass(frozen=True)
class SkillfulConfig:
    base_paths: tuple[Path, ...]
    debug: bool = False
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS
    max_workers: int = DEFAULT_MAX_WORKERS
    ready_timeout: float = DEFAULT_READY_TIMEOUT


class ConfigRepository:
    def __init__(
        self, path: Optional[Path] = None, project_dir: Optional[Path] = None
    ) -> None:
        self._path = path or (config_home() / APP_NAME / CONFIG_FILENAME)
        self._project_dir = (project_dir or Path.cwd()).expanduser().resolve()
        self._validator = Draft202012Validator(CONFIG_SCHEMA)

    @property
    def config_path(self) -> Path:
        return self._path

    @property
    def project_dir(self) -> Path:
        return self._project_dir

    def load_raw(self) -> dict[str, Any]:
        payload, error = read_json_safe(self._path)
        if error is not None:
            raise InvalidJsonFormatError(self._path, error)
        if payload is None:
            return {}
        schema_error = next(iter(self._validator.iter_errors(payload)), None)
        if schema_error is not None:
            raise InvalidConfigSchemaError(self._path, format_schema_error(schema_error))
        return payload

    def load(self) -> SkillfulConfig:
        raw = self.load_raw()
        return SkillfulConfig(
            base_paths=tuple(self._resolve_roots(raw.get("basePaths"))),
            debug=bool(raw.get("debug", False)),
            duplicate_policy=DuplicatePolicy(
                raw.get("duplicatePolicy", DuplicatePolicy.LAST_WINS.value)
            ),
            max_workers=int(raw.get("maxWorkers", DEFAULT_MAX_WORKERS)),
            ready_timeout=float(raw.get("readyTimeout", DEFAULT_READY_TIMEOUT)),
        )

    def resolve_paths(self, paths: Sequence[str | Path]) -> list[Path]:
        resolved: list[Path] = []
        for item in paths:
            path = Path(item).expanduser()
            if not path.is_absolute():
                path = self._project_dir / path
            resolved.append(path)
        return resolved

    def _resolve_roots(self, raw: Any) -> list[Path]:
        if raw is None:
            return default_skill_roots(self._project_dir)
        if isinstance(raw, str):
            raw = [raw]
        return self.resolve_paths(raw)
