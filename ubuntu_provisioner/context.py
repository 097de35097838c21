from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Sequence

from .config import ProvisionConfig
from .lib.actions import Action, ShellCommand
from .lib.retry import retry


@dataclass(frozen=True)
class ProvisionCtx:
    """Everything a step needs; nothing here changes during a run."""

    cfg: ProvisionConfig
    home: Path = field(default_factory=Path.home)
    dry_run: bool = False
    sleep: Callable[[float], None] = time.sleep

    @property
    def workspace(self) -> Path:
        return self.cfg.workspace

    @property
    def conda_prefix(self) -> Path:
        prefix = Path(self.cfg.conda_prefix)
        return prefix if prefix.is_absolute() else self.home / prefix

    def cmd(self, argv: Sequence[str], *, cwd: Optional[Path] = None) -> ShellCommand:
        return ShellCommand(tuple(argv), cwd=cwd, dry_run=self.dry_run)

    def retry(self, action: Action) -> int:
        return retry(
            action,
            attempts=self.cfg.retry_attempts,
            delay=self.cfg.retry_delay,
            sleep=self.sleep,
        )
