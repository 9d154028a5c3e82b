"""Pytest fixtures for filesearch tests."""

from pathlib import Path

import pytest

ENV_VARS = [
    "FILESEARCH_ROOT",
    "FILESEARCH_CASE_SENSITIVE",
    "FILESEARCH_USE_REGEX",
    "FILESEARCH_EXCLUDE_GLOBS",
    "FILESEARCH_INCLUDE",
    "FILESEARCH_MAX_RESULTS",
]


def _touch(root: Path, rel: str) -> None:
    p = root / rel
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("x\n", encoding="utf-8")


@pytest.fixture
def workspace(tmp_path):
    """Create a small project tree to search.

    Returns:
        Path to the workspace root
    """
    root = tmp_path / "workspace"
    root.mkdir()
    for rel in [
        "README.md",
        "docs/readme.txt",
        "src/readme_utils.py",
        "src/reader.py",
        "tests/test_readme.py",
        ".git/readme",
        "node_modules/readme/index.js",
    ]:
        _touch(root, rel)
    return root


@pytest.fixture
def clean_env(tmp_path, monkeypatch):
    """Isolate config loading from the real environment and repo.

    Returns:
        Path used as the current working directory (marked as a repo root)
    """
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    (cwd / ".git").mkdir()
    monkeypatch.chdir(cwd)
    return cwd
