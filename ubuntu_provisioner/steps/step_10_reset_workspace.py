from __future__ import annotations

import logging

from ..context import ProvisionCtx
from ..lib.fs import ensure_clean_dir

logger = logging.getLogger(__name__)


class ResetWorkspaceStep:
    step_id = "10_reset_workspace"

    def run(self, ctx: ProvisionCtx) -> None:
        # Leftovers from an earlier run would make the clones collide.
        ensure_clean_dir(ctx.workspace, dry_run=ctx.dry_run)
        logger.info("Build workspace ready: %s", str(ctx.workspace))
