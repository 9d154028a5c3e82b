"""Relevance ranking and highlighting for file name search.

Everything here is a pure function of its inputs: no I/O, no configuration,
no shared state. Callers enumerate files and render results.
"""

from .classifier import basename, classify, edit_distance, fold
from .highlight import highlight, highlight_query, highlight_regex
from .models import RankTuple, Span, SpanKind, Tier
from .sorter import compare, filter_candidates, matches, rank, rank_names, rank_with_tuples

__all__ = [
    "RankTuple",
    "Span",
    "SpanKind",
    "Tier",
    "basename",
    "classify",
    "compare",
    "edit_distance",
    "filter_candidates",
    "fold",
    "highlight",
    "highlight_query",
    "highlight_regex",
    "matches",
    "rank",
    "rank_names",
    "rank_with_tuples",
]
