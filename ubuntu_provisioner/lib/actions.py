"""Runnable units of work.

An action is anything with a human-readable ``label`` and a ``run()`` that
raises on failure. The retry loop and the source installer only see this
interface, so they do not care whether they wrap a shell command, a download
or a plain Python call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping, Optional, Protocol, Sequence, Tuple

from .command import fmt_argv, run_cmd

logger = logging.getLogger(__name__)


class Action(Protocol):
    label: str

    def run(self) -> None:
        ...


@dataclass(frozen=True)
class ShellCommand:
    argv: Tuple[str, ...]
    cwd: Optional[Path] = None
    env: Optional[Mapping[str, str]] = None
    dry_run: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "argv", tuple(self.argv))

    @property
    def label(self) -> str:
        return fmt_argv(self.argv)

    def run(self) -> None:
        run_cmd(
            self.argv,
            cwd=str(self.cwd) if self.cwd is not None else None,
            env=self.env,
            dry_run=self.dry_run,
        )


@dataclass(frozen=True)
class Download:
    """Fetch ``url`` into ``dest`` (curl, fail on HTTP errors)."""

    url: str
    dest: Path
    dry_run: bool = False

    @property
    def label(self) -> str:
        return f"download {self.url} -> {self.dest}"

    def run(self) -> None:
        dest = Path(self.dest)
        if not self.dry_run:
            dest.parent.mkdir(parents=True, exist_ok=True)
        run_cmd(["curl", "-fsSL", self.url, "-o", str(dest)], dry_run=self.dry_run)


@dataclass(frozen=True)
class Call:
    label: str
    fn: Callable[[], object]

    def run(self) -> None:
        self.fn()


@dataclass(frozen=True)
class Composite:
    """Run child actions in order; the first failure stops the rest."""

    label: str
    actions: Sequence[Action] = field(default_factory=tuple)

    def run(self) -> None:
        for action in self.actions:
            logger.debug("%s: %s", self.label, action.label)
            action.run()
