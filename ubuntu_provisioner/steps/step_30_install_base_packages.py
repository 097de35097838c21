from __future__ import annotations

import logging

from ..context import ProvisionCtx
from ..lib.pkg import apt_install

logger = logging.getLogger(__name__)


class InstallBasePackagesStep:
    step_id = "30_install_base_packages"

    def run(self, ctx: ProvisionCtx) -> None:
        packages = ctx.cfg.base_packages
        if not packages:
            logger.info("No base packages configured")
            return
        ctx.retry(apt_install(packages, dry_run=ctx.dry_run))
        logger.info("Installed %d base packages", len(packages))
