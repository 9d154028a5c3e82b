"""Span annotation of matched text in a file name.

Two strategies produce the same shape of output: substring search with
overlap merging for plain queries, and regex match boundaries for regex
queries. Both return a gap-free list of spans whose texts concatenate back
to the original name.
"""

from __future__ import annotations

import re

from ..models import SearchQuery
from .classifier import fold
from .models import Span, SpanKind


def find_occurrences(name: str, query: str) -> list[tuple[int, int]]:
    """All (start, end) occurrences of ``query`` in ``name``, overlaps included."""
    if not query:
        return []
    found: list[tuple[int, int]] = []
    pos = 0
    while pos < len(name):
        idx = name.find(query, pos)
        if idx == -1:
            break
        found.append((idx, idx + len(query)))
        pos = idx + 1
    return found


def merge_spans(ranges: list[tuple[int, int]]) -> list[tuple[int, int]]:
    merged: list[tuple[int, int]] = []
    for start, end in sorted(ranges):
        if merged and start <= merged[-1][1]:
            prev_start, prev_end = merged[-1]
            merged[-1] = (prev_start, max(prev_end, end))
        else:
            merged.append((start, end))
    return merged


def _emit(name: str, ranges: list[tuple[int, int]]) -> list[Span]:
    if not ranges:
        return [Span(SpanKind.LITERAL, name)]
    spans: list[Span] = []
    last_end = 0
    for start, end in ranges:
        if start > last_end:
            spans.append(Span(SpanKind.LITERAL, name[last_end:start]))
        spans.append(Span(SpanKind.MATCHED, name[start:end]))
        last_end = end
    if last_end < len(name):
        spans.append(Span(SpanKind.LITERAL, name[last_end:]))
    return spans


def highlight(filename: str, query: str, case_sensitive: bool) -> list[Span]:
    if not query:
        return [Span(SpanKind.LITERAL, filename)]

    fn, origin = _fold_with_origin(filename, case_sensitive)
    q = fold(query, case_sensitive)
    merged = merge_spans(find_occurrences(fn, q))
    # A match ending inside a character's expansion covers the whole character.
    ranges = [(origin[start], origin[end - 1] + 1) for start, end in merged]
    return _emit(filename, merge_spans(ranges))


def _fold_with_origin(name: str, case_sensitive: bool) -> tuple[str, list[int]]:
    """Folded name plus, for each folded offset, its index in the original name.

    ``str.lower()`` can expand a character ("İ" becomes two code points).
    """
    if case_sensitive:
        return name, list(range(len(name)))
    parts: list[str] = []
    origin: list[int] = []
    for i, ch in enumerate(name):
        lowered = fold(ch, case_sensitive)
        parts.append(lowered)
        origin.extend([i] * len(lowered))
    return "".join(parts), origin


def highlight_regex(filename: str, pattern: str, case_sensitive: bool) -> list[Span]:
    """Mark every non-empty regex match; invalid patterns mark nothing."""
    if not pattern:
        return [Span(SpanKind.LITERAL, filename)]
    try:
        compiled = re.compile(pattern, 0 if case_sensitive else re.IGNORECASE)
    except re.error:
        return [Span(SpanKind.LITERAL, filename)]
    ranges = [m.span() for m in compiled.finditer(filename) if m.end() > m.start()]
    return _emit(filename, merge_spans(ranges))


def highlight_query(filename: str, query: SearchQuery) -> list[Span]:
    if query.use_regex:
        return highlight_regex(filename, query.text, query.case_sensitive)
    return highlight(filename, query.text, query.case_sensitive)
