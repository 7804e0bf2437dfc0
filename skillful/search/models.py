"""Search data models."""

from __future__ import annotations

from dataclasses import dataclass, field

from skillful.skills.models import SkillDefinition


@dataclass(frozen=True)
class ParsedQuery:
    include: tuple[str, ...]
    exclude: tuple[str, ...]
    fragments: tuple[str, ...]
    term_count: int

    @property
    def has_exclusions(self) -> bool:
        return bool(self.exclude)

    @property
    def original_query(self) -> str:
        return " ".join(self.fragments)

    @property
    def lists_everything(self) -> bool:
        return not self.include and not self.exclude


@dataclass(frozen=True)
class RankedMatch:
    skill: SkillDefinition
    name_matches: int
    desc_matches: int
    total_score: int


@dataclass(frozen=True)
class SearchResult:
    matches: list[SkillDefinition]
    total_matches: int
    total_in_index: int
    feedback: str
    query: ParsedQuery
    ranks: list[RankedMatch] = field(default_factory=list)
