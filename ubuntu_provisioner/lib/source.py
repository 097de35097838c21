"""Fetch-then-build installation of tools hosted in git repositories."""

from __future__ import annotations

import logging
import shutil
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple, Union

from ..errors import BuildFailed, WorkspaceError
from ..logging_utils import STEP
from .actions import Action, Call, ShellCommand
from .command import fmt_argv
from .retry import DEFAULT_ATTEMPTS, DEFAULT_DELAY, retry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecipeCommand:
    """A build command run inside the source tree (or ``subdir`` of it)."""

    argv: Tuple[str, ...]
    subdir: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "argv", tuple(self.argv))

    @property
    def label(self) -> str:
        where = f" (in {self.subdir})" if self.subdir else ""
        return fmt_argv(self.argv) + where

    def bind(self, src_dir: Path, *, dry_run: bool = False) -> Action:
        cwd = src_dir / self.subdir if self.subdir else src_dir
        return ShellCommand(self.argv, cwd=cwd, dry_run=dry_run)


@dataclass(frozen=True)
class InstallGlob:
    """Copy build outputs matching ``pattern`` into ``dest``."""

    pattern: str
    dest: str
    subdir: Optional[str] = None

    @property
    def label(self) -> str:
        return f"install {self.pattern} -> {self.dest}"

    def bind(self, src_dir: Path, *, dry_run: bool = False) -> Action:
        base = src_dir / self.subdir if self.subdir else src_dir

        def _copy() -> None:
            matches = sorted(p for p in base.glob(self.pattern) if p.is_file())
            if dry_run:
                logger.info("Would copy %s/%s -> %s", str(base), self.pattern, self.dest)
                return
            if not matches:
                raise FileNotFoundError(f"No files match {self.pattern} under {base}")
            dest = Path(self.dest)
            dest.mkdir(parents=True, exist_ok=True)
            for m in matches:
                shutil.copy2(m, dest / m.name)
                logger.info("Installed %s -> %s", str(m), str(dest))

        return Call(self.label, _copy)


RecipeItem = Union[RecipeCommand, InstallGlob]


@dataclass(frozen=True)
class BuildTask:
    source_url: str
    local_name: str
    recipe: Sequence[RecipeItem] = field(default_factory=tuple)


def clone_action(url: str, dest: Path, *, dry_run: bool = False) -> Action:
    # Shallow: only the latest revision is needed to build.
    return ShellCommand(("git", "clone", "--depth", "1", url, str(dest)), dry_run=dry_run)


def install_from_source(
    task: BuildTask,
    *,
    workspace: Path,
    attempts: int = DEFAULT_ATTEMPTS,
    delay: float = DEFAULT_DELAY,
    dry_run: bool = False,
    sleep: Callable[[float], None] = time.sleep,
) -> Path:
    """Clone ``task.source_url`` into the workspace and run its recipe.

    The clone is retried; recipe items are not, and the first failing item
    raises ``BuildFailed``. Returns the source directory.
    """

    logger.log(STEP, "Installing %s from source", task.local_name)

    workspace = Path(workspace)
    if not dry_run and not workspace.is_dir():
        raise WorkspaceError(f"Build workspace missing: {workspace}")

    src_dir = workspace / task.local_name
    retry(clone_action(task.source_url, src_dir, dry_run=dry_run), attempts=attempts, delay=delay, sleep=sleep)

    for item in task.recipe:
        action = item.bind(src_dir, dry_run=dry_run)
        try:
            action.run()
        except Exception as e:
            logger.error("Build of %s failed: %s", task.local_name, item.label)
            raise BuildFailed(task.local_name, item.label) from e

    logger.info("Installed %s", task.local_name)
    return src_dir
