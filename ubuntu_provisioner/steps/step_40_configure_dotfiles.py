from __future__ import annotations

import logging

from ..context import ProvisionCtx
from ..lib.actions import Download
from ..lib.dotfiles import BASHRC_PROMPT, VIMRC
from ..lib.fs import append_text, write_text

logger = logging.getLogger(__name__)


class ConfigureBashrcStep:
    step_id = "40_configure_bashrc"

    def run(self, ctx: ProvisionCtx) -> None:
        bashrc = ctx.home / ".bashrc"
        # Known limitation: appended again on every run.
        append_text(bashrc, BASHRC_PROMPT, dry_run=ctx.dry_run)
        logger.info("Prompt appended to %s (takes effect in new shells)", str(bashrc))


class ConfigureVimrcStep:
    step_id = "45_configure_vimrc"

    def run(self, ctx: ProvisionCtx) -> None:
        plug = ctx.home / ".vim" / "autoload" / "plug.vim"
        ctx.retry(Download(ctx.cfg.vim_plug_url, plug, dry_run=ctx.dry_run))

        vimrc = ctx.home / ".vimrc"
        write_text(vimrc, VIMRC, dry_run=ctx.dry_run)
        logger.info(".vimrc created at %s", str(vimrc))
