from pathlib import Path
from typing import Optional, Sequence


class SkillfulError(Exception):
    """Base user-facing application error."""


class SkillfulFileError(SkillfulError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class SkillPathError(SkillfulFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid skill location ({detail})")


class SkillReadError(SkillfulFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Unable to read skill file ({detail})")


class SkillValidationError(SkillfulFileError):
    """Raised with every constraint a SKILL.md violates, not just the first."""

    def __init__(self, path: Path, violations: Sequence[str]) -> None:
        self.violations = tuple(violations)
        detail = "; ".join(self.violations)
        super().__init__(path=path, message=f"Invalid skill frontmatter ({detail})")


class InvalidJsonFormatError(SkillfulFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidConfigSchemaError(SkillfulFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class ResourceNotFoundError(SkillfulFileError):
    def __init__(self, path: Path, identifier: str, kind: str) -> None:
        self.identifier = identifier
        self.kind = kind
        super().__init__(
            path=path, message=f"Skill '{identifier}' has no {kind} resource at"
        )


class ResourceReadError(SkillfulFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Failed to read resource ({detail})")


class NoSkillRootsError(SkillfulError):
    def __init__(self) -> None:
        super().__init__("No skill roots configured; nothing to scan")


class SkillNotFoundError(SkillfulError):
    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Skill not found: {identifier}")


class RegistryNotReadyError(SkillfulError):
    def __init__(self, state: str, cause: Optional[BaseException] = None) -> None:
        self.state = state
        self.cause = cause
        detail = f" ({cause})" if cause is not None else ""
        super().__init__(f"Skill registry is not ready: {state}{detail}")
