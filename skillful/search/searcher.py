"""Run parsed queries against a built SkillIndex."""

from __future__ import annotations

import logging

from skillful.registry.index import SkillIndex
from skillful.search.feedback import generate_feedback, list_all_feedback
from skillful.search.models import SearchResult
from skillful.search.query import QueryInput, parse_query
from skillful.search.ranking import rank_skills

logger = logging.getLogger(__name__)


class SkillSearcher:
    """Stateless search over one index snapshot; safe to share across threads."""

    def __init__(self, index: SkillIndex) -> None:
        self._index = index

    @property
    def index(self) -> SkillIndex:
        return self._index

    def search(self, query: QueryInput) -> SearchResult:
        parsed = parse_query(query)
        skills = self._index.list()
        total = len(skills)

        if parsed.lists_everything:
            return SearchResult(
                matches=skills,
                total_matches=total,
                total_in_index=total,
                feedback=list_all_feedback(total),
                query=parsed,
            )

        ranks = rank_skills(skills, parsed.include, parsed.exclude)
        logger.debug(
            "Query %r matched %d of %d skill(s)", parsed.original_query, len(ranks), total
        )
        return SearchResult(
            matches=[rank.skill for rank in ranks],
            total_matches=len(ranks),
            total_in_index=total,
            feedback=generate_feedback(parsed, len(ranks)),
            query=parsed,
            ranks=ranks,
        )
