"""Configuration management for filesearch."""

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from .discovery import DEFAULT_EXCLUDE_GLOBS

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Python < 3.11


def _find_repo_root(start_dir: Path) -> Path:
    """Find repository root by walking upward looking for .git or pyproject.toml."""
    current_dir = start_dir

    while True:
        if (current_dir / ".git").exists() or (current_dir / "pyproject.toml").exists():
            return current_dir

        parent_dir = current_dir.parent
        if parent_dir == current_dir:
            # No repo found, return original directory
            return start_dir

        current_dir = parent_dir


def _load_repo_config_data(repo_root: Path) -> Optional[dict]:
    """Load repo config data from .filesearch/config.toml if it exists."""
    config_file = repo_root / ".filesearch" / "config.toml"

    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        # If config file is malformed, ignore it
        return None


def _as_bool(value: Any, *, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        v = value.strip().lower()
        if v in {"1", "true", "yes", "y", "on"}:
            return True
        if v in {"0", "false", "no", "n", "off", ""}:
            return False
    raise ValueError(f"Invalid config: {name} must be a bool")


def _as_optional_int(value: Any, *, name: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid config: {name} must be an int")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        v = value.strip()
        if v.lower() in {"", "none", "unlimited"}:
            return None
        if v.isdigit():
            return int(v)
    raise ValueError(f"Invalid config: {name} must be an int")


def _as_globs(value: Any, *, name: str) -> list[str]:
    if isinstance(value, str):
        return [g.strip() for g in value.split(",") if g.strip()]
    if isinstance(value, list) and all(isinstance(g, str) for g in value):
        return list(value)
    raise ValueError(f"Invalid config: {name} must be a list of glob strings")


class FileSearchConfig(BaseModel):
    """Defaults for a search run: where to look and how to match."""

    root: Path = Field(default_factory=Path.cwd)
    case_sensitive: bool = Field(default=False)
    use_regex: bool = Field(default=False)
    exclude_globs: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_GLOBS))
    include: str = Field(default="", description="Comma-separated suffixes, e.g. '.py,.md'")
    max_results: Optional[int] = Field(default=200)

    model_config = {"frozen": False}

    @classmethod
    def from_env(cls, cli_root: Optional[str] = None) -> "FileSearchConfig":
        """Load configuration with the following precedence:

        1. CLI --root option (root only)
        2. repo-local .filesearch/config.toml [search] table
        3. FILESEARCH_* environment variables
        4. Defaults
        """
        data = _load_repo_config_data(_find_repo_root(Path.cwd())) or {}
        section = data.get("search") if isinstance(data, dict) else {}
        if not isinstance(section, dict):
            section = {}

        def pick(key: str, env: str, default: Any) -> Any:
            if key in section:
                return section[key]
            return os.environ.get(env, default)

        root_value = cli_root or pick("root", "FILESEARCH_ROOT", None)
        root = Path(str(root_value)).expanduser().resolve() if root_value else Path.cwd()

        return cls(
            root=root,
            case_sensitive=_as_bool(
                pick("case_sensitive", "FILESEARCH_CASE_SENSITIVE", False),
                name="[search].case_sensitive",
            ),
            use_regex=_as_bool(
                pick("use_regex", "FILESEARCH_USE_REGEX", False),
                name="[search].use_regex",
            ),
            exclude_globs=_as_globs(
                pick("exclude_globs", "FILESEARCH_EXCLUDE_GLOBS", list(DEFAULT_EXCLUDE_GLOBS)),
                name="[search].exclude_globs",
            ),
            include=str(pick("include", "FILESEARCH_INCLUDE", "")),
            max_results=_as_optional_int(
                pick("max_results", "FILESEARCH_MAX_RESULTS", 200),
                name="[search].max_results",
            ),
        )
