"""Renderers for span annotations."""

from __future__ import annotations

import html
from typing import Iterable

from rich.text import Text

from .ranking.models import Span


def to_markdown(spans: Iterable[Span]) -> str:
    return "".join(f"**{s.text}**" if s.matched else s.text for s in spans)


def to_html(spans: Iterable[Span]) -> str:
    parts = []
    for s in spans:
        escaped = html.escape(s.text)
        parts.append(f"<strong>{escaped}</strong>" if s.matched else escaped)
    return "".join(parts)


def to_rich_text(spans: Iterable[Span], style: str = "bold yellow") -> Text:
    text = Text()
    for s in spans:
        text.append(s.text, style=style if s.matched else None)
    return text
