from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Union


class Tier(IntEnum):
    """Coarse relevance bucket, lower is better."""

    EXACT = 0
    BASENAME = 1
    PREFIX = 2
    BASENAME_SUBSTRING = 3
    NAME_SUBSTRING = 4
    FUZZY = 5


@dataclass(frozen=True)
class RankTuple:
    tier: int
    edit_distance: int
    name_length: int
    match_position: Optional[int]  # None when the query was not found

    def sort_key(self) -> tuple[int, int, int, Union[int, float]]:
        position = math.inf if self.match_position is None else self.match_position
        return (self.tier, self.edit_distance, self.name_length, position)


class SpanKind(str, Enum):
    LITERAL = "literal"
    MATCHED = "matched"


@dataclass(frozen=True)
class Span:
    kind: SpanKind
    text: str

    @property
    def matched(self) -> bool:
        return self.kind is SpanKind.MATCHED
