from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Optional, Pattern, TypeVar

from ..models import SearchQuery
from .classifier import classify, fold
from .models import RankTuple

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _name_of(item: Any) -> str:
    if isinstance(item, str):
        return item
    return str(item.name)


def collation_key(name: str) -> tuple[str, str, str]:
    # Case-insensitive first, then lowercase before uppercase, then codepoints.
    return (name.casefold(), name.swapcase(), name)


def compile_query(query: SearchQuery) -> Optional[Pattern[str]]:
    """Compile a regex query, or return None if the pattern is invalid."""
    flags = 0 if query.case_sensitive else re.IGNORECASE
    try:
        return re.compile(query.text, flags)
    except re.error as e:
        logger.debug(f"Invalid regex {query.text!r}: {e}")
        return None


def matches(name: str, query: SearchQuery) -> bool:
    """Candidate gate applied before ranking."""
    if query.use_regex:
        pattern = compile_query(query)
        return pattern is not None and pattern.search(name) is not None
    return fold(query.text, query.case_sensitive) in fold(name, query.case_sensitive)


def filter_candidates(candidates: Iterable[T], query: SearchQuery) -> list[T]:
    items = list(candidates)
    if not query.use_regex:
        return [c for c in items if matches(_name_of(c), query)]

    pattern = compile_query(query)
    if pattern is None:
        return []
    return [c for c in items if pattern.search(_name_of(c)) is not None]


def _sort_key(name: str, rank_tuple: RankTuple) -> tuple:
    return (*rank_tuple.sort_key(), collation_key(name))


def rank_with_tuples(candidates: Iterable[T], query: SearchQuery) -> list[tuple[T, RankTuple]]:
    """Order candidates by relevance to the query, keeping each one's RankTuple.

    Each candidate is classified exactly once, then sorted on
    (tier, edit distance, name length, match position, alphabetical).
    Candidates may be strings or objects with a ``name`` attribute; the same
    objects come back in ranked order. No filtering happens here.
    """
    decorated = []
    for c in candidates:
        name = _name_of(c)
        rank_tuple = classify(name, query.text, query.case_sensitive)
        decorated.append((_sort_key(name, rank_tuple), c, rank_tuple))
    decorated.sort(key=lambda t: t[0])
    return [(c, rank_tuple) for _, c, rank_tuple in decorated]


def rank(candidates: Iterable[T], query: SearchQuery) -> list[T]:
    return [c for c, _ in rank_with_tuples(candidates, query)]


def rank_names(names: Iterable[str], query_text: str, case_sensitive: bool = False) -> list[str]:
    return rank(names, SearchQuery(text=query_text, case_sensitive=case_sensitive))


def compare(a: str, b: str, query_text: str, case_sensitive: bool) -> int:
    """Three-way comparison consistent with ``rank``."""
    ka = _sort_key(a, classify(a, query_text, case_sensitive))
    kb = _sort_key(b, classify(b, query_text, case_sensitive))
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0
