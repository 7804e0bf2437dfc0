"""Parse free-text skill queries.

Supported syntax, per fragment::

    git commit          two include terms, both must match
    "code review"       one include term containing a space
    -python             exclude term
    -"legacy api"       exclude phrase
    *                   nothing; a query of only ``*`` lists everything
"""

from __future__ import annotations

import re
from typing import Sequence, Union

from skillful.constants import LIST_ALL_QUERY, NEGATION_PREFIX
from skillful.search.models import ParsedQuery

QueryInput = Union[str, Sequence[str]]

_TOKEN_RE = re.compile(r'(?P<neg>-?)(?:"(?P<phrase>[^"]*)"?|(?P<word>\S+))')


def tokenize(fragment: str) -> list[tuple[str, bool]]:
    """Return ``(term, negated)`` pairs in query order, lower-cased."""
    tokens: list[tuple[str, bool]] = []
    for match in _TOKEN_RE.finditer(fragment):
        negated = match.group("neg") == NEGATION_PREFIX
        phrase = match.group("phrase")
        text = phrase if phrase is not None else match.group("word")
        if not negated and text in (NEGATION_PREFIX, LIST_ALL_QUERY):
            continue
        term = text.strip().lower()
        if term:
            tokens.append((term, negated))
    return tokens


def _append_unique(terms: list[str], term: str) -> None:
    if term not in terms:
        terms.append(term)


def parse_query(query: QueryInput) -> ParsedQuery:
    fragments = (query,) if isinstance(query, str) else tuple(query)
    include: list[str] = []
    exclude: list[str] = []
    for fragment in fragments:
        for term, negated in tokenize(fragment):
            _append_unique(exclude if negated else include, term)

    return ParsedQuery(
        include=tuple(include),
        exclude=tuple(exclude),
        fragments=fragments,
        term_count=len(include) + len(exclude),
    )
