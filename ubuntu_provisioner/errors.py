from __future__ import annotations

from typing import Optional, Sequence


class ProvisionError(RuntimeError):
    """Base class for every failure the provisioner reports."""


class ConfigError(ProvisionError):
    pass


class PreconditionError(ProvisionError):
    """The host or process is not fit to run the pipeline at all."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class CommandError(ProvisionError):
    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        detail = f"\n{stderr.strip()}" if stderr and stderr.strip() else ""
        super().__init__(f"Command failed ({returncode}): {' '.join(self.argv)}{detail}")


class RetryExhausted(ProvisionError):
    def __init__(self, label: str, attempts: int) -> None:
        self.label = label
        self.attempts = attempts
        super().__init__(f"Command failed after {attempts} attempts: {label}")


class BuildFailed(ProvisionError):
    def __init__(self, name: str, label: str) -> None:
        self.name = name
        self.label = label
        super().__init__(f"Build of {name} failed at: {label}")


class WorkspaceError(ProvisionError):
    pass


class StepFailed(ProvisionError):
    def __init__(self, step_id: str, *, exit_code: int = 1, reason: Optional[str] = None) -> None:
        self.step_id = step_id
        self.exit_code = exit_code
        msg = f"Step {step_id} failed"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


def exit_code_for(exc: BaseException, default: int = 1) -> int:
    """Walk the exception chain and return the first failing command's exit status."""

    seen = set()
    cur: Optional[BaseException] = exc
    while cur is not None and id(cur) not in seen:
        seen.add(id(cur))
        if isinstance(cur, CommandError) and cur.returncode > 0:
            return cur.returncode
        cur = cur.__cause__ or cur.__context__
    return default
