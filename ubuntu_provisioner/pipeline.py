from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Protocol, Sequence

from .context import ProvisionCtx
from .errors import PreconditionError, StepFailed, exit_code_for
from .logging_utils import STEP

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single idempotent step."""

    step_id: str

    def run(self, ctx: ProvisionCtx) -> None:
        ...


@dataclass(frozen=True)
class PipelineResult:
    ran_steps: List[str]


def run_pipeline(*, ctx: ProvisionCtx, steps: Sequence[Step]) -> PipelineResult:
    """Run steps strictly in order; the first failure ends the run.

    Nothing already applied is undone. Steps are idempotent, so the recovery
    path is fixing the cause and running the whole pipeline again.
    """

    ran: List[str] = []

    for step in steps:
        logger.log(STEP, "Running step %s", step.step_id)
        try:
            step.run(ctx)
        except PreconditionError:
            raise
        except Exception as e:
            logger.error("Step %s failed: %s", step.step_id, e)
            raise StepFailed(step.step_id, exit_code=exit_code_for(e), reason=str(e)) from e
        ran.append(step.step_id)

    return PipelineResult(ran_steps=ran)
