"""Tests for SkillSearcher."""

from skillful.registry.index import SkillIndex
from skillful.search.searcher import SkillSearcher


def _searcher(*skills) -> SkillSearcher:
    return SkillSearcher(SkillIndex(skills))


def test_empty_and_star_list_everything_unranked(make_skill) -> None:
    searcher = _searcher(
        make_skill("beta", "second skill"),
        make_skill("alpha", "first skill"),
    )

    for query in ("", "*", "   ", ["*"]):
        result = searcher.search(query)
        assert [skill.name for skill in result.matches] == ["alpha", "beta"]
        assert result.total_matches == result.total_in_index == 2
        assert result.ranks == []
        assert result.feedback == "Listing all 2 skills"


def test_exact_name_ranks_first(make_skill) -> None:
    searcher = _searcher(
        make_skill("git-commit", "write commits"),
        make_skill("documentation", "git commit guide"),
        make_skill("api", "git commit api"),
    )

    result = searcher.search("git-commit")

    assert result.matches[0].name == "git-commit"
    assert result.ranks[0].total_score == 13


def test_exclusion_removes_matches_and_ties_sort_alphabetically(make_skill) -> None:
    searcher = _searcher(
        make_skill("python-guide", "a guide for python"),
        make_skill("javascript-guide", "a guide for javascript"),
        make_skill("general-guide", "a general guide"),
    )

    result = searcher.search("guide -python")

    assert [skill.name for skill in result.matches] == ["general-guide", "javascript-guide"]
    assert result.total_matches == 2
    assert result.total_in_index == 3
    assert result.feedback == "Searching for: guide | Excluding: python | Found 2 matches"


def test_only_exclusions_keeps_everything_else(make_skill) -> None:
    searcher = _searcher(
        make_skill("python-guide", "a guide for python"),
        make_skill("rust-guide", "a guide for rust"),
        make_skill("go-guide", "a guide for go"),
    )

    result = searcher.search("-python")

    assert [skill.name for skill in result.matches] == ["go-guide", "rust-guide"]
    assert result.feedback == "Excluding: python | Found 2 matches"


def test_every_include_term_must_match(make_skill) -> None:
    searcher = _searcher(
        make_skill("pdf-tools", "extract tables"),
        make_skill("pdf-viewer", "render pages"),
    )

    result = searcher.search("pdf tables")

    assert [skill.name for skill in result.matches] == ["pdf-tools"]
    assert result.feedback == "Searching for: pdf, tables | Found 1 match"


def test_no_matches_is_a_normal_result(make_skill) -> None:
    result = _searcher(make_skill("pdf-tools", "extract tables")).search("kubernetes")

    assert result.matches == []
    assert result.total_matches == 0
    assert result.feedback == "Searching for: kubernetes | No matches found"


def test_empty_index_still_generates_feedback() -> None:
    searcher = _searcher()

    assert searcher.search("anything").feedback == "Searching for: anything | No matches found"
    assert searcher.search("").feedback == "Listing all 0 skills"


def test_fragments_are_combined(make_skill) -> None:
    searcher = _searcher(
        make_skill("pdf-tools", "extract tables from pdf"),
        make_skill("pdf-legacy", "old pdf tables code"),
    )

    result = searcher.search(["pdf", "tables -old"])

    assert [skill.name for skill in result.matches] == ["pdf-tools"]


def test_ordering_is_stable_across_calls(make_skill) -> None:
    searcher = _searcher(
        *[make_skill(f"skill-{n}", f"shared keyword number {n % 3}") for n in range(12)]
    )

    first = [skill.identifier for skill in searcher.search("keyword").matches]
    for _ in range(5):
        assert [skill.identifier for skill in searcher.search("keyword").matches] == first


def test_identifier_breaks_display_name_ties(make_skill) -> None:
    searcher = _searcher(
        make_skill("docx", "office docs", identifier="office_docx"),
        make_skill("docx", "converter docs", identifier="converters_docx"),
    )

    result = searcher.search("docs")

    assert [skill.identifier for skill in result.matches] == ["converters_docx", "office_docx"]
