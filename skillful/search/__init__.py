from skillful.search.feedback import generate_feedback
from skillful.search.models import ParsedQuery, RankedMatch, SearchResult
from skillful.search.query import parse_query
from skillful.search.ranking import rank_skill, rank_skills
from skillful.search.searcher import SkillSearcher

__all__ = [
    "ParsedQuery",
    "RankedMatch",
    "SearchResult",
    "SkillSearcher",
    "generate_feedback",
    "parse_query",
    "rank_skill",
    "rank_skills",
]
