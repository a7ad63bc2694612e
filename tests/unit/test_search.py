"""Tests for component search."""

from skillsync.search import levenshtein, match_score, search


def test_levenshtein() -> None:
    assert levenshtein("", "abc") == 3
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein("same", "same") == 0


def test_match_score_ranking() -> None:
    """Exact beats prefix beats substring beats description."""
    assert match_score("react", "react", "React") == 100
    assert match_score("fast", "fastapi", "FastAPI") == 80
    assert match_score("api", "fastapi", "FastAPI") == 60
    assert match_score("boot", "spring-boot-java", "Spring Boot (Java)") == 60
    assert match_score("(java)", "spring-boot-java", "Spring Boot (Java)") == 40
    assert match_score("zzz", "react", "React") == 0


def test_match_score_fuzzy() -> None:
    """Small typos still match with a reduced score."""
    assert match_score("djagno", "django", "Django") == 20


def test_search_exact_first() -> None:
    """Exact name matches rank first."""
    hits = search("react")
    assert hits[0].component.name == "react"
    assert hits[0].score == 100


def test_search_matches_tags() -> None:
    """Tags are searched when the name and description do not match."""
    names = [hit.component.name for hit in search("golang", "framework")]
    assert "gin" in names
    assert "echo" in names


def test_search_type_filter() -> None:
    """A type filter restricts results to that type."""
    hits = search("python", "language")
    assert {hit.component.type for hit in hits} == {"language"}
