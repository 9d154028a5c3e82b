from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .discovery import DEFAULT_EXCLUDE_GLOBS, iter_files
from .models import Candidate, SearchQuery
from .ranking import filter_candidates, highlight_query, rank_with_tuples
from .ranking.models import RankTuple, Span
from .render import to_markdown
from .suffix_filter import has_suffix, parse_suffixes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchHit:
    ident: Any
    name: str
    description: str
    rank: RankTuple
    spans: list[Span]
    bolded_label: str


def build_candidates(root: Path, exclude_globs: list[str]) -> list[Candidate]:
    return [
        Candidate(name=p.name, ident=p.relative_to(root).as_posix())
        for p in iter_files(root, exclude_globs)
    ]


def rank_candidates(
    candidates: list[Candidate],
    query: SearchQuery,
    *,
    include: Optional[str] = None,
    limit: Optional[int] = None,
) -> list[SearchHit]:
    """Filter, rank, suffix-filter and annotate an in-memory candidate set."""
    if query.is_empty:
        return []

    passed = filter_candidates(candidates, query)
    suffixes = parse_suffixes(include)
    ordered = [(c, r) for c, r in rank_with_tuples(passed, query) if has_suffix(c.name, suffixes)]
    if limit is not None and limit >= 0:
        ordered = ordered[:limit]

    hits: list[SearchHit] = []
    for c, rank_tuple in ordered:
        spans = highlight_query(c.name, query)
        hits.append(
            SearchHit(
                ident=c.ident,
                name=c.name,
                description=str(c.ident) if c.ident is not None else "",
                rank=rank_tuple,
                spans=spans,
                bolded_label=to_markdown(spans),
            )
        )
    return hits


def search_files(
    root: Path,
    query: SearchQuery,
    *,
    exclude_globs: Optional[list[str]] = None,
    include: Optional[str] = None,
    limit: Optional[int] = None,
) -> list[SearchHit]:
    if query.is_empty:
        return []
    if not root.exists():
        raise FileNotFoundError(f"Search root does not exist: {root}")
    if not root.is_dir():
        raise FileNotFoundError(f"Search root is not a directory: {root}")

    globs = DEFAULT_EXCLUDE_GLOBS if exclude_globs is None else exclude_globs
    candidates = build_candidates(root, globs)
    hits = rank_candidates(candidates, query, include=include, limit=limit)
    logger.info(f"Query {query.text!r}: {len(hits)} of {len(candidates)} files matched")
    return hits
