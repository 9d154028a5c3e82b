from __future__ import annotations

from .models import RankTuple, Tier


def basename(name: str) -> str:
    """Strip the final extension. Leading-dot names (".bashrc") are kept whole."""
    last_dot = name.rfind(".")
    if last_dot > 0:
        return name[:last_dot]
    return name


def edit_distance(s1: str, s2: str) -> int:
    """Levenshtein distance with unit cost for insert, delete and substitute."""
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    prev = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, start=1):
        cur = [i] + [0] * len(s2)
        for j, c2 in enumerate(s2, start=1):
            if c1 == c2:
                cur[j] = prev[j - 1]
            else:
                cur[j] = min(prev[j], cur[j - 1], prev[j - 1]) + 1
        prev = cur
    return prev[-1]


def fold(text: str, case_sensitive: bool) -> str:
    """Lowercase one character at a time unless matching case.

    Per-character lowering lets the highlighter map folded offsets back to
    the original name, so every caller folds through here.
    """
    if case_sensitive:
        return text
    return "".join(c.lower() for c in text)


def classify(filename: str, query: str, case_sensitive: bool) -> RankTuple:
    fn = fold(filename, case_sensitive)
    q = fold(query, case_sensitive)
    base = basename(fn)
    query_base = basename(q)

    tier = Tier.FUZZY
    position = fn.find(q)

    if fn == q:
        tier = Tier.EXACT
        position = 0
    elif base == query_base or base == q:
        tier = Tier.BASENAME
        position = 0
    elif base.startswith(q):
        tier = Tier.PREFIX
        position = 0
    elif q in base:
        tier = Tier.BASENAME_SUBSTRING
        position = base.find(q)
    elif q in fn:
        tier = Tier.NAME_SUBSTRING
        position = fn.find(q)

    # Computed for every tier; it is the first tie-break within any tier.
    dist = edit_distance(base, query_base)

    return RankTuple(
        tier=int(tier),
        edit_distance=dist,
        name_length=len(filename),
        match_position=position if position >= 0 else None,
    )
