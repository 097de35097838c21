from __future__ import annotations

import logging

from ..context import ProvisionCtx
from ..lib.actions import Composite, Download
from ..lib.conda import conda_add_channel, conda_create, conda_init, miniconda_install
from ..lib.fs import ensure_dir

logger = logging.getLogger(__name__)


class InstallMinicondaStep:
    step_id = "60_install_miniconda"

    def run(self, ctx: ProvisionCtx) -> None:
        prefix = ensure_dir(ctx.conda_prefix, dry_run=ctx.dry_run)
        installer = prefix / "miniconda.sh"

        ctx.retry(Download(ctx.cfg.conda_installer_url, installer, dry_run=ctx.dry_run))
        Composite(
            "install miniconda",
            [
                miniconda_install(installer, prefix, dry_run=ctx.dry_run),
                ctx.cmd(["rm", "-f", str(installer)]),
                conda_init(prefix, dry_run=ctx.dry_run),
            ],
        ).run()
        logger.info("Miniconda installed at %s", str(prefix))


class ConfigureCondaStep:
    step_id = "65_configure_conda"

    def run(self, ctx: ProvisionCtx) -> None:
        # --add prepends, so the last channel listed ends up with top priority.
        for channel in ctx.cfg.conda_channels:
            conda_add_channel(ctx.conda_prefix, channel, dry_run=ctx.dry_run).run()


class CreateCondaEnvsStep:
    step_id = "68_create_conda_envs"

    def run(self, ctx: ProvisionCtx) -> None:
        for name, specs in ctx.cfg.conda_envs:
            ctx.retry(conda_create(ctx.conda_prefix, name, specs, dry_run=ctx.dry_run))
            logger.info("Conda env ready: %s", name)
