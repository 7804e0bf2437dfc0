"""Filter and rank skills against parsed query terms.

Matching is plain case-insensitive substring containment. Include terms are
checked against identifier, display name and description; exclude terms only
against display name and description.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from skillful.constants import (
    DESCRIPTION_MATCH_WEIGHT,
    EXACT_NAME_BONUS,
    NAME_MATCH_WEIGHT,
)
from skillful.search.models import RankedMatch
from skillful.skills.models import SkillDefinition


def _include_haystack(skill: SkillDefinition) -> str:
    return f"{skill.identifier} {skill.name} {skill.description}".lower()


def _exclude_haystack(skill: SkillDefinition) -> str:
    return f"{skill.name} {skill.description}".lower()


def matches_all(skill: SkillDefinition, include: Sequence[str]) -> bool:
    haystack = _include_haystack(skill)
    return all(term in haystack for term in include)


def is_excluded(skill: SkillDefinition, exclude: Sequence[str]) -> bool:
    if not exclude:
        return False
    haystack = _exclude_haystack(skill)
    return any(term in haystack for term in exclude)


def rank_skill(skill: SkillDefinition, include: Sequence[str]) -> RankedMatch:
    name = skill.name.lower()
    description = skill.description.lower()

    name_matches = 0
    desc_matches = 0
    for term in include:
        if term in name:
            name_matches += 1
        elif term in description:
            desc_matches += 1

    exact_bonus = EXACT_NAME_BONUS if len(include) == 1 and name == include[0] else 0
    total = (
        name_matches * NAME_MATCH_WEIGHT
        + desc_matches * DESCRIPTION_MATCH_WEIGHT
        + exact_bonus
    )
    return RankedMatch(
        skill=skill,
        name_matches=name_matches,
        desc_matches=desc_matches,
        total_score=total,
    )


def rank_order(match: RankedMatch) -> tuple[int, int, str, str]:
    return (
        -match.total_score,
        -match.name_matches,
        match.skill.name,
        match.skill.identifier,
    )


def rank_skills(
    skills: Iterable[SkillDefinition],
    include: Sequence[str],
    exclude: Sequence[str] = (),
) -> list[RankedMatch]:
    """Filter ``skills`` by the query terms and return them best first."""
    ranked = [
        rank_skill(skill, include)
        for skill in skills
        if matches_all(skill, include) and not is_excluded(skill, exclude)
    ]
    ranked.sort(key=rank_order)
    return ranked
