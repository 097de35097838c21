from __future__ import annotations

import logging

from ..context import ProvisionCtx
from ..errors import PreconditionError
from ..lib.preconditions import require_root, require_shell

logger = logging.getLogger(__name__)


class RequireRootStep:
    step_id = "00_require_root"

    def run(self, ctx: ProvisionCtx) -> None:
        try:
            require_root()
        except PreconditionError as e:
            if not ctx.dry_run:
                raise
            logger.warning("%s (ignored for dry run)", e)


class RequireShellStep:
    step_id = "05_require_shell"

    def __init__(self, shell: str = "bash") -> None:
        self.shell = shell

    def run(self, ctx: ProvisionCtx) -> None:
        require_shell(self.shell)
