from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from .actions import ShellCommand
from .fs import backup_file, write_text

logger = logging.getLogger(__name__)

# Non-interactive apt: no debconf prompts during unattended runs.
APT_ENV = {"DEBIAN_FRONTEND": "noninteractive"}


def apt_update(*, dry_run: bool = False) -> ShellCommand:
    return ShellCommand(("apt-get", "update"), env=APT_ENV, dry_run=dry_run)


def apt_upgrade(*, dry_run: bool = False) -> ShellCommand:
    return ShellCommand(("apt-get", "-y", "upgrade"), env=APT_ENV, dry_run=dry_run)


def apt_install(packages: Sequence[str], *, dry_run: bool = False) -> ShellCommand:
    if not packages:
        raise ValueError("apt_install needs at least one package")
    return ShellCommand(("apt-get", "install", "-y", *packages), env=APT_ENV, dry_run=dry_run)


def rewrite_mirror(text: str, archive_url: str, mirror_url: str) -> str:
    """Point ``deb``/``deb-src`` lines at ``mirror_url`` instead of ``archive_url``."""

    old = archive_url.rstrip("/")
    new = mirror_url.rstrip("/")
    out: list[str] = []
    for line in text.splitlines(keepends=True):
        stripped = line.lstrip()
        if stripped.startswith(("deb ", "deb-src ")):
            line = line.replace(f" {old} ", f" {new} ").replace(f" {old}/ ", f" {new}/ ")
        out.append(line)
    return "".join(out)


def set_apt_mirror(
    sources_list: str,
    *,
    archive_url: str,
    mirror_url: str,
    dry_run: bool = False,
) -> bool:
    """Back up ``sources_list`` and rewrite its archive URL. Returns True if changed."""

    p = Path(sources_list)
    if not p.exists():
        raise FileNotFoundError(sources_list)

    before = p.read_text(encoding="utf-8")
    after = rewrite_mirror(before, archive_url, mirror_url)
    if after == before:
        logger.info("APT sources already use %s (or no %s entries)", mirror_url, archive_url)
        return False

    backup_file(p, p.with_name(p.name + ".bkp"), dry_run=dry_run)
    write_text(p, after, dry_run=dry_run)
    logger.info("Configured APT mirror: %s -> %s", archive_url, mirror_url)
    return True
