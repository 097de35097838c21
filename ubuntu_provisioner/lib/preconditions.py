from __future__ import annotations

import logging
import os
import shutil

from ..errors import PreconditionError

logger = logging.getLogger(__name__)

ROOT_EXIT_CODE = 1
SHELL_EXIT_CODE = 21


def require_root() -> None:
    if os.geteuid() != 0:
        raise PreconditionError("This must be run as root (sudo)", exit_code=ROOT_EXIT_CODE)
    logger.debug("Running as root")


def require_shell(shell: str = "bash") -> str:
    """Installers and build recipes are handed to ``shell``; it must be on PATH."""

    path = shutil.which(shell)
    if not path:
        raise PreconditionError(
            f"Required shell {shell!r} not found on PATH; install it before provisioning",
            exit_code=SHELL_EXIT_CODE,
        )
    logger.debug("Using shell %s", path)
    return path
