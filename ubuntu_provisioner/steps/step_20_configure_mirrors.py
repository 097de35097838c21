from __future__ import annotations

import logging

from ..context import ProvisionCtx
from ..lib.pkg import set_apt_mirror

logger = logging.getLogger(__name__)


class ConfigureMirrorsStep:
    step_id = "20_configure_mirrors"

    def run(self, ctx: ProvisionCtx) -> None:
        mirror = ctx.cfg.apt_mirror_url
        if not mirror:
            logger.info("No APT mirror configured; keeping %s", ctx.cfg.apt_sources_list)
            return
        set_apt_mirror(
            ctx.cfg.apt_sources_list,
            archive_url=ctx.cfg.apt_archive_url,
            mirror_url=mirror,
            dry_run=ctx.dry_run,
        )
