from pathlib import Path

import pytest

from filesearch.models import Candidate, SearchQuery
from filesearch.ranking.models import SpanKind
from filesearch.search import rank_candidates, search_files


def test_search_ranks_workspace_files(workspace: Path):
    hits = search_files(workspace, SearchQuery(text="readme"))
    assert [h.description for h in hits] == [
        "README.md",
        "docs/readme.txt",
        "src/readme_utils.py",
        "tests/test_readme.py",
    ]
    assert [h.rank.tier for h in hits] == [1, 1, 2, 3]


def test_search_hit_carries_highlight(workspace: Path):
    hits = search_files(workspace, SearchQuery(text="readme"))
    top = hits[0]
    assert top.name == "README.md"
    assert top.bolded_label == "**README**.md"
    assert [(s.kind, s.text) for s in top.spans] == [
        (SpanKind.MATCHED, "README"),
        (SpanKind.LITERAL, ".md"),
    ]


def test_search_case_sensitive(workspace: Path):
    hits = search_files(workspace, SearchQuery(text="README", case_sensitive=True))
    assert [h.name for h in hits] == ["README.md"]


def test_search_include_filter_runs_after_ranking(workspace: Path):
    hits = search_files(workspace, SearchQuery(text="readme"), include="py")
    assert [h.name for h in hits] == ["readme_utils.py", "test_readme.py"]


def test_search_limit(workspace: Path):
    hits = search_files(workspace, SearchQuery(text="readme"), limit=2)
    assert [h.name for h in hits] == ["README.md", "readme.txt"]


def test_search_regex_mode(workspace: Path):
    hits = search_files(workspace, SearchQuery(text="^read", use_regex=True))
    assert {h.name for h in hits} == {"README.md", "readme.txt", "readme_utils.py", "reader.py"}
    readme = next(h for h in hits if h.name == "README.md")
    assert readme.bolded_label == "**READ**ME.md"


def test_search_invalid_regex_returns_nothing(workspace: Path):
    assert search_files(workspace, SearchQuery(text="([", use_regex=True)) == []


def test_empty_query_short_circuits(tmp_path: Path):
    # No filesystem access happens for an empty query.
    assert search_files(tmp_path / "missing", SearchQuery(text="")) == []


def test_missing_root_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        search_files(tmp_path / "missing", SearchQuery(text="x"))


def test_rank_candidates_in_memory():
    candidates = [
        Candidate(name="main.py", ident="a/main.py"),
        Candidate(name="domain.py", ident="b/domain.py"),
        Candidate(name="notes.md", ident="c/notes.md"),
    ]
    hits = rank_candidates(candidates, SearchQuery(text="main"))
    assert [h.ident for h in hits] == ["a/main.py", "b/domain.py"]
    assert hits[1].bolded_label == "do**main**.py"


def test_regex_only_hits_are_ordered_by_edit_distance():
    candidates = [
        Candidate(name="a1b_long_name.md", ident=1),
        Candidate(name="za2b.py", ident=2),
        Candidate(name="a3b.txt", ident=3),
    ]
    hits = rank_candidates(candidates, SearchQuery(text="a.b", use_regex=True))
    assert [h.name for h in hits] == ["a3b.txt", "za2b.py", "a1b_long_name.md"]
    assert [h.rank.tier for h in hits] == [5, 5, 5]
    assert [h.rank.edit_distance for h in hits] == [2, 3, 12]


def test_expanding_lowercase_name_is_highlighted():
    hits = rank_candidates([Candidate(name="İi.txt", ident="İi.txt")], SearchQuery(text="i̇"))
    assert len(hits) == 1
    assert hits[0].rank.tier == 2
    assert hits[0].bolded_label == "**İ**i.txt"
