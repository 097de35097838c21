from __future__ import annotations

from ..context import ProvisionCtx
from ..lib.pkg import apt_update, apt_upgrade


class SystemUpdateStep:
    step_id = "25_system_update"

    def run(self, ctx: ProvisionCtx) -> None:
        ctx.retry(apt_update(dry_run=ctx.dry_run))
        ctx.retry(apt_upgrade(dry_run=ctx.dry_run))
