from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .config import ProvisionConfig, load_config
from .context import ProvisionCtx
from .errors import ConfigError, PreconditionError, StepFailed
from .lib.preconditions import require_root
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import PipelineResult, Step, run_pipeline
from .steps import (
    ConfigureBashrcStep,
    ConfigureCondaStep,
    ConfigureMirrorsStep,
    ConfigureVimrcStep,
    CreateCondaEnvsStep,
    InstallBasePackagesStep,
    InstallDockerStep,
    InstallMinicondaStep,
    InstallSourceToolStep,
    PullDockerImagesStep,
    RequireRootStep,
    RequireShellStep,
    ResetWorkspaceStep,
    SystemUpdateStep,
    TeardownWorkspaceStep,
)

logger = logging.getLogger(__name__)


def build_steps(cfg: ProvisionConfig) -> List[Step]:
    return [
        RequireRootStep(),
        RequireShellStep(),
        ResetWorkspaceStep(),
        ConfigureMirrorsStep(),
        SystemUpdateStep(),
        InstallBasePackagesStep(),
        ConfigureBashrcStep(),
        ConfigureVimrcStep(),
        InstallDockerStep(),
        PullDockerImagesStep(),
        InstallMinicondaStep(),
        ConfigureCondaStep(),
        CreateCondaEnvsStep(),
        *[InstallSourceToolStep(task) for task in cfg.source_tools],
        TeardownWorkspaceStep(),
    ]


def run(
    *,
    config_path: Optional[str] = None,
    log_path: str = DEFAULT_LOG_PATH,
    home: Optional[str] = None,
    dry_run: bool = False,
    verbose: bool = False,
) -> PipelineResult:
    """Provision this host. Raises on the first failing step."""

    level = logging.DEBUG if verbose else logging.INFO
    if not dry_run:
        # Nothing, not even the log file, is written before root is confirmed.
        try:
            require_root()
        except PreconditionError:
            configure_logging(log_path=None, level=level)
            raise
    configure_logging(log_path=log_path, level=level)

    cfg = load_config(config_path)
    ctx = ProvisionCtx(
        cfg=cfg,
        home=Path(home).expanduser() if home else Path.home(),
        dry_run=dry_run,
    )

    logger.info("Starting Ubuntu setup (dry_run=%s, home=%s)", dry_run, str(ctx.home))
    result = run_pipeline(ctx=ctx, steps=build_steps(cfg))
    logger.info("Setup completed successfully (%d steps)", len(result.ran_steps))
    return result


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="ubuntu-provision")
    p.add_argument("--config", default=None, help="YAML file merged over the packaged manifest")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to provisioner log")
    p.add_argument("--home", default=None, help="Home directory to configure (default: current user's)")
    p.add_argument("--dry-run", action="store_true", help="Log commands and file changes without applying them")
    p.add_argument("--list-steps", action="store_true", help="Print the ordered step ids and exit")
    p.add_argument("--verbose", action="store_true", help="Also log command output")

    args = p.parse_args(argv)

    if args.list_steps:
        try:
            steps = build_steps(load_config(args.config))
        except ConfigError as e:
            configure_logging(log_path=None)
            logger.error("Invalid configuration: %s", e)
            return 2
        for step in steps:
            print(step.step_id)
        return 0

    try:
        run(
            config_path=args.config,
            log_path=args.log,
            home=args.home,
            dry_run=bool(args.dry_run),
            verbose=bool(args.verbose),
        )
    except PreconditionError as e:
        logger.error("%s", e)
        return e.exit_code
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 2
    except StepFailed as e:
        logger.error("Provisioning aborted at %s (exit %d)", e.step_id, e.exit_code)
        return e.exit_code
    except Exception:
        logger.exception("Provisioning failed")
        raise
    return 0
