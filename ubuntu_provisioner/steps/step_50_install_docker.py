from __future__ import annotations

import logging
from pathlib import Path

from ..context import ProvisionCtx
from ..lib.actions import Download
from ..lib.docker import docker_pull, docker_sources_line, dpkg_architecture, os_codename
from ..lib.fs import ensure_dir, write_text
from ..lib.pkg import apt_install, apt_update

logger = logging.getLogger(__name__)


class InstallDockerStep:
    step_id = "50_install_docker"

    def run(self, ctx: ProvisionCtx) -> None:
        cfg = ctx.cfg
        keyring_dir = ensure_dir(cfg.docker_keyring_dir, dry_run=ctx.dry_run)
        keyring = Path(keyring_dir) / "docker.asc"

        ctx.retry(Download(cfg.docker_gpg_url, keyring, dry_run=ctx.dry_run))
        ctx.cmd(["chmod", "a+r", str(keyring)]).run()

        line = docker_sources_line(
            arch=dpkg_architecture(dry_run=ctx.dry_run),
            keyring=str(keyring),
            repo_url=cfg.docker_repo_url,
            codename=os_codename(),
        )
        write_text(cfg.docker_sources_list, line, dry_run=ctx.dry_run)
        logger.info("Docker APT source: %s", line.strip())

        ctx.retry(apt_update(dry_run=ctx.dry_run))
        ctx.retry(apt_install(cfg.docker_packages, dry_run=ctx.dry_run))

        ctx.cmd(["systemctl", "enable", "--now", "docker"]).run()


class PullDockerImagesStep:
    step_id = "55_pull_docker_images"

    def run(self, ctx: ProvisionCtx) -> None:
        for image in ctx.cfg.docker_images:
            ctx.retry(docker_pull(image, dry_run=ctx.dry_run))
        logger.info("Pulled %d images", len(ctx.cfg.docker_images))
