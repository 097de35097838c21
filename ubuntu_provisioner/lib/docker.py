from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import Dict

from .actions import ShellCommand
from .command import run_cmd

logger = logging.getLogger(__name__)


def parse_os_release(text: str) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        try:
            parts = shlex.split(value)
        except ValueError:
            parts = [value]
        out[key.strip()] = parts[0] if parts else ""
    return out


def os_codename(os_release: str = "/etc/os-release") -> str:
    info = parse_os_release(Path(os_release).read_text(encoding="utf-8"))
    codename = info.get("UBUNTU_CODENAME") or info.get("VERSION_CODENAME")
    if not codename:
        raise RuntimeError(f"No UBUNTU_CODENAME/VERSION_CODENAME in {os_release}")
    return codename


def dpkg_architecture(*, dry_run: bool = False) -> str:
    r = run_cmd(["dpkg", "--print-architecture"], dry_run=dry_run)
    # Dry runs get a placeholder so the planned sources line still renders.
    return r.stdout.strip() or "amd64"


def docker_sources_line(*, arch: str, keyring: str, repo_url: str, codename: str) -> str:
    return f"deb [arch={arch} signed-by={keyring}] {repo_url} {codename} stable\n"


def docker_pull(image: str, *, dry_run: bool = False) -> ShellCommand:
    return ShellCommand(("docker", "pull", image), dry_run=dry_run)
