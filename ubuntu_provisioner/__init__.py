"""Ubuntu host provisioner (Python-first, fail-fast).

Core design goals:
- Idempotent steps, re-run to recover
- Retry network operations, never builds
- Explicit paths instead of working-directory changes
- Centralized logging
"""

__version__ = "0.3.0"

__all__ = ["__version__"]
