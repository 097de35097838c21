from __future__ import annotations

import logging
import time
from typing import Callable

from ..errors import RetryExhausted
from .actions import Action

logger = logging.getLogger(__name__)

DEFAULT_ATTEMPTS = 3
DEFAULT_DELAY = 2.0


def retry(
    action: Action,
    *,
    attempts: int = DEFAULT_ATTEMPTS,
    delay: float = DEFAULT_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Run ``action`` until it succeeds, at most ``attempts`` times.

    Returns the number of invocations it took. A failed attempt that will be
    retried is logged at WARNING and followed by ``delay`` seconds of sleep.
    The last failure is logged at ERROR instead, with no sleep, and
    ``RetryExhausted`` is raised, chained to the underlying error.
    Only meant for operations that can fail transiently (network fetches,
    package index refreshes, registry pulls, clones).
    """

    if attempts < 1:
        raise ValueError(f"attempts must be >= 1, got {attempts}")
    if delay < 0:
        raise ValueError(f"delay must be >= 0, got {delay}")

    last_error: Exception | None = None
    for i in range(1, attempts + 1):
        try:
            action.run()
            return i
        except Exception as e:
            last_error = e
            logger.debug("Attempt %d/%d error: %s", i, attempts, e)
            if i == attempts:
                break
            logger.warning("Attempt %d/%d failed: %s", i, attempts, action.label)
            if delay:
                sleep(delay)

    logger.error("Command failed after %d attempts: %s (%s)", attempts, action.label, last_error)
    raise RetryExhausted(action.label, attempts) from last_error
