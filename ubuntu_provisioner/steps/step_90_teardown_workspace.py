from __future__ import annotations

import logging

from ..context import ProvisionCtx
from ..lib.fs import remove_dir

logger = logging.getLogger(__name__)


class TeardownWorkspaceStep:
    step_id = "90_teardown_workspace"

    def run(self, ctx: ProvisionCtx) -> None:
        logger.info("Cleaning up build directory %s", str(ctx.workspace))
        remove_dir(ctx.workspace, dry_run=ctx.dry_run)
