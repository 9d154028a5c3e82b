"""Pydantic models for file search queries and candidates."""

from typing import Any

from pydantic import BaseModel, Field


class SearchQuery(BaseModel):
    """A search as typed by the user, with its two toggles."""

    text: str = Field(description="Raw query text; empty means no query")
    case_sensitive: bool = Field(default=False, description="Match case")
    use_regex: bool = Field(default=False, description="Treat text as a regular expression")

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        return not self.text


class Candidate(BaseModel):
    """A file base name plus an opaque identifier the caller resolves later."""

    name: str = Field(description="File base name, no directory part")
    ident: Any = Field(default=None, description="Caller-owned identifier, never inspected")

    model_config = {"frozen": True}
