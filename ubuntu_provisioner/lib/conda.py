from __future__ import annotations

from pathlib import Path
from typing import Sequence

from .actions import ShellCommand


def conda_bin(prefix: Path) -> str:
    # Called by absolute path: a fresh install is not on PATH until a new login shell.
    return str(Path(prefix) / "bin" / "conda")


def miniconda_install(installer: Path, prefix: Path, *, dry_run: bool = False) -> ShellCommand:
    # -b batch, -u update an existing prefix, -p install prefix
    return ShellCommand(("bash", str(installer), "-b", "-u", "-p", str(prefix)), dry_run=dry_run)


def conda_init(prefix: Path, shell: str = "bash", *, dry_run: bool = False) -> ShellCommand:
    return ShellCommand((conda_bin(prefix), "init", shell), dry_run=dry_run)


def conda_add_channel(prefix: Path, channel: str, *, dry_run: bool = False) -> ShellCommand:
    return ShellCommand((conda_bin(prefix), "config", "--add", "channels", channel), dry_run=dry_run)


def conda_create(prefix: Path, name: str, specs: Sequence[str], *, dry_run: bool = False) -> ShellCommand:
    return ShellCommand((conda_bin(prefix), "create", "-y", "-n", name, *specs), dry_run=dry_run)
