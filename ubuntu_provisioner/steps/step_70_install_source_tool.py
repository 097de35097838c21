from __future__ import annotations

from ..context import ProvisionCtx
from ..lib.source import BuildTask, install_from_source


class InstallSourceToolStep:
    """Clone and build one tool inside the shared workspace."""

    def __init__(self, task: BuildTask) -> None:
        self.task = task
        self.step_id = f"70_install_{task.local_name}"

    def run(self, ctx: ProvisionCtx) -> None:
        install_from_source(
            self.task,
            workspace=ctx.workspace,
            attempts=ctx.cfg.retry_attempts,
            delay=ctx.cfg.retry_delay,
            dry_run=ctx.dry_run,
            sleep=ctx.sleep,
        )
