"""The "files to include" filter: comma-separated extension suffixes."""

from __future__ import annotations

from typing import Any, Iterable, Optional, TypeVar

T = TypeVar("T")


def parse_suffixes(text: Optional[str]) -> list[str]:
    """Split ".ts, js,,.JSON" into [".ts", ".js", ".json"]."""
    if not text:
        return []
    suffixes: list[str] = []
    for part in text.split(","):
        s = part.strip().lower()
        if not s:
            continue
        suffixes.append(s if s.startswith(".") else "." + s)
    return suffixes


def _name_of(item: Any) -> str:
    if isinstance(item, str):
        return item
    return str(item.name)


def has_suffix(name: str, suffixes: list[str]) -> bool:
    """True when no suffixes are given or the name ends with one of them."""
    return not suffixes or name.lower().endswith(tuple(suffixes))


def apply_suffix_filter(items: Iterable[T], text: Optional[str]) -> list[T]:
    """Keep items whose name ends with one of the suffixes; order is preserved."""
    suffixes = parse_suffixes(text)
    return [item for item in items if has_suffix(_name_of(item), suffixes)]
