from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDE_GLOBS = [
    ".git/**",
    "**/.git/**",
    "node_modules/**",
    "**/node_modules/**",
    "__pycache__/**",
    "**/__pycache__/**",
]


def is_excluded(rel_posix: str, exclude_globs: list[str]) -> bool:
    for pat in exclude_globs:
        if fnmatch.fnmatchcase(rel_posix, pat):
            return True
    return False


def _log_walk_error(err: OSError) -> None:
    logger.warning(f"Skipping unreadable directory {err.filename}: {err.strerror}")


def iter_files(root: Path, exclude_globs: list[str]) -> list[Path]:
    """Every regular file under root, sorted by relative POSIX path."""
    paths: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        base = Path(dirpath)
        rel_dir = base.relative_to(root).as_posix()
        prefix = "" if rel_dir == "." else rel_dir + "/"

        # Prune excluded directories so their subtrees are never walked.
        dirnames[:] = [d for d in dirnames if not is_excluded(prefix + d + "/", exclude_globs)]

        for name in filenames:
            rel_posix = prefix + name
            if is_excluded(rel_posix, exclude_globs):
                continue
            p = base / name
            if not p.is_file():
                continue
            paths.append(p)
    paths.sort(key=lambda p: p.relative_to(root).as_posix())
    logger.debug(f"Discovered {len(paths)} files under {root}")
    return paths
