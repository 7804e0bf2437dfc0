"""Discover, index and search SKILL.md capability documents."""

from skillful.provider import SkillProvider
from skillful.registry import RegistryDiagnostics, SkillIndex, build_registry
from skillful.search import SearchResult, SkillSearcher

__all__ = [
    "RegistryDiagnostics",
    "SearchResult",
    "SkillIndex",
    "SkillProvider",
    "SkillSearcher",
    "build_registry",
]
