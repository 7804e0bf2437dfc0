from typing import Final


APP_NAME: Final[str] = "skillful"
HOST_APP_NAME: Final[str] = "opencode"
PROJECT_DIRNAME: Final[str] = ".opencode"

SKILL_FILENAME: Final[str] = "SKILL.md"
SKILLS_DIRNAME: Final[str] = "skills"
CONFIG_FILENAME: Final[str] = "config.json"

SCRIPTS_DIRNAME: Final[str] = "scripts"
REFERENCES_DIRNAME: Final[str] = "references"
ASSETS_DIRNAME: Final[str] = "assets"

MIN_DESCRIPTION_LENGTH: Final[int] = 20

DEFAULT_MAX_WORKERS: Final[int] = 8
DEFAULT_READY_TIMEOUT: Final[float] = 30.0

LIST_ALL_QUERY: Final[str] = "*"
NEGATION_PREFIX: Final[str] = "-"

NAME_MATCH_WEIGHT: Final[int] = 3
DESCRIPTION_MATCH_WEIGHT: Final[int] = 1
EXACT_NAME_BONUS: Final[int] = 10

FALLBACK_MIME_TYPE: Final[str] = "application/octet-stream"
