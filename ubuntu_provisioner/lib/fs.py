from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..errors import WorkspaceError

logger = logging.getLogger(__name__)


def ensure_dir(path: str | Path, *, dry_run: bool = False) -> Path:
    """Create ``path`` and missing parents; an existing directory is fine."""

    p = Path(path)
    if dry_run:
        logger.info("Would ensure directory %s", str(p))
        return p
    if p.exists() and not p.is_dir():
        raise WorkspaceError(f"Not a directory: {p}")
    try:
        p.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WorkspaceError(f"Cannot create directory {p}: {e}") from e
    return p


def ensure_clean_dir(path: str | Path, *, dry_run: bool = False) -> Path:
    """Remove ``path`` and everything beneath it, then recreate it empty."""

    p = Path(path)
    if dry_run:
        logger.info("Would reset directory %s", str(p))
        return p
    try:
        if p.is_dir() and not p.is_symlink():
            shutil.rmtree(p)
        elif p.exists() or p.is_symlink():
            p.unlink()
        p.mkdir(parents=True)
    except OSError as e:
        raise WorkspaceError(f"Cannot reset directory {p}: {e}") from e
    logger.debug("Directory reset: %s", str(p))
    return p


def remove_dir(path: str | Path, *, dry_run: bool = False) -> None:
    p = Path(path)
    if dry_run:
        logger.info("Would remove directory %s", str(p))
        return
    if not p.exists():
        return
    try:
        shutil.rmtree(p)
    except OSError as e:
        raise WorkspaceError(f"Cannot remove directory {p}: {e}") from e


def backup_file(path: str | Path, backup: str | Path, *, dry_run: bool = False) -> None:
    src = Path(path)
    if dry_run:
        logger.info("Would copy %s -> %s", str(src), str(backup))
        return
    shutil.copy2(src, backup)


def write_text(path: str | Path, contents: str, *, dry_run: bool = False) -> None:
    p = Path(path)
    if dry_run:
        logger.info("Would write %s", str(p))
        return
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(contents, encoding="utf-8")


def append_text(path: str | Path, contents: str, *, dry_run: bool = False) -> None:
    # Appends are not deduplicated: re-running repeats the block.
    p = Path(path)
    if dry_run:
        logger.info("Would append to %s", str(p))
        return
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("a", encoding="utf-8") as f:
        f.write(contents)
