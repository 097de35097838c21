from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

DEFAULT_LOG_PATH = "/var/log/ubuntu-provisioner.log"

# Sits between INFO and WARNING so step banners survive a WARNING-only console.
STEP = 25
logging.addLevelName(STEP, "STEP")

_SEVERITY_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "ERROR",
}

_COLORS = {
    "INFO": "\033[1;32m",
    "WARN": "\033[1;33m",
    "ERROR": "\033[1;31m",
    "STEP": "\033[1;34m",
}
_RESET = "\033[0m"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "STEP": STEP,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def severity_name(levelname: str) -> str:
    name = levelname.upper()
    return _SEVERITY_ALIASES.get(name, name)


def format_line(
    severity: str,
    message: str,
    *,
    when: Optional[datetime] = None,
    color: bool = False,
) -> str:
    """Render one operator-facing line: ``[timestamp] [SEVERITY] message``."""

    sev = severity_name(severity)
    ts = (when or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    line = f"[{ts}] [{sev}] {message}"
    if color and sev in _COLORS:
        return f"{_COLORS[sev]}{line}{_RESET}"
    return line


class ConsoleFormatter(logging.Formatter):
    def __init__(self, *, color: bool = False) -> None:
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        line = format_line(
            record.levelname,
            record.getMessage(),
            when=datetime.fromtimestamp(record.created),
            color=self.color,
        )
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def log(severity: str, message: str, *, logger: Optional[logging.Logger] = None) -> None:
    """Emit a single record at the named severity (INFO, WARN, ERROR, STEP)."""

    level = _LEVELS.get(severity.upper())
    if level is None:
        raise ValueError(f"Unknown severity: {severity}")
    (logger or logging.getLogger("ubuntu_provisioner")).log(level, message)


def configure_logging(
    log_path: Optional[str] = DEFAULT_LOG_PATH,
    level: int = logging.INFO,
    also_console: bool = True,
) -> Optional[str]:
    """Configure logging.

    Every record goes to the log file with full logger names, and to the
    console in the short ``[time] [LEVEL] message`` form.

    Notes:
    - Writing to /var/log needs root. If it fails we fall back to a local
      file in the working directory and keep reporting the intended path.
    - log_path=None logs to the console only (used before root is confirmed).
    - Calling this twice keeps the first configuration.

    Returns the actual file path being used, or None.
    """

    logger = logging.getLogger()
    logger.setLevel(level)

    if getattr(logger, "_provisioner_configured", False):
        return getattr(logger, "_provisioner_log_path", log_path)

    chosen_path = log_path
    handlers: list[logging.Handler] = []

    file_fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    if log_path is not None:
        try:
            Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path)
        except OSError:
            chosen_path = str(Path.cwd() / "ubuntu-provisioner.log")
            file_handler = logging.FileHandler(chosen_path)
        file_handler.setFormatter(file_fmt)
        handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(ConsoleFormatter(color=sys.stdout.isatty()))
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_provisioner_configured", True)
    setattr(logger, "_provisioner_log_path", chosen_path)

    logging.getLogger(__name__).debug(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path
