"""Validate SKILL.md frontmatter against a JSON schema.

The outcome is either an :class:`AcceptedFrontmatter` with the typed fields
or a :class:`RejectedFrontmatter` listing every violated constraint.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from jsonschema import Draft202012Validator

from skillful.constants import MIN_DESCRIPTION_LENGTH
from skillful.utils import format_schema_error


FRONTMATTER_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["description"],
    "properties": {
        "name": {"type": "string"},
        "description": {"type": "string", "minLength": MIN_DESCRIPTION_LENGTH},
        "license": {"type": "string"},
        "allowed-tools": {"type": "array", "items": {"type": "string"}},
        "metadata": {"type": "object"},
    },
}

_VALIDATOR = Draft202012Validator(FRONTMATTER_SCHEMA)


@dataclass(frozen=True)
class AcceptedFrontmatter:
    description: str
    name: str | None = None
    license: str | None = None
    allowed_tools: tuple[str, ...] = ()
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RejectedFrontmatter:
    violations: tuple[str, ...]


FrontmatterOutcome = Union[AcceptedFrontmatter, RejectedFrontmatter]


def _schema_violations(payload: Any) -> list[str]:
    errors = sorted(
        _VALIDATOR.iter_errors(payload),
        key=lambda error: [str(part) for part in error.path],
    )
    return [format_schema_error(error) for error in errors]


def validate_frontmatter(raw: Any) -> FrontmatterOutcome:
    violations: list[str] = []
    if raw is None:
        violations.append("missing YAML frontmatter block")
        raw = {}
    elif not isinstance(raw, dict):
        violations.append(
            f"frontmatter must be a mapping, got {type(raw).__name__}"
        )
        raw = {}

    violations.extend(_schema_violations(raw))
    if violations:
        return RejectedFrontmatter(violations=tuple(violations))

    return AcceptedFrontmatter(
        description=raw["description"],
        name=raw.get("name"),
        license=raw.get("license"),
        allowed_tools=tuple(raw.get("allowed-tools") or ()),
        metadata=dict(raw.get("metadata") or {}),
    )
