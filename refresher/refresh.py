"""Post-install cache refresh, run by package managers after installing the app.

Steps (each independent, none can fail the run):
- compile GLib schemas under <prefix>/share/glib-2.0/schemas
- update the desktop database under <prefix>/share/applications
- update the hicolor icon cache under <prefix>/share/icons/hicolor

A step runs only if its directory exists; a missing tool is a warning, a
failing tool is ignored. The process always exits 0.
"""
from __future__ import annotations

import os
import sys

from .cli import parse_args
from .config import RefreshConfig
from .domain.steps import STEPS, CacheStep
from .logging_conf import get_logger, setup_logging
from .tools import ExecutableProbe, ToolRunner, is_executable_available, run_tool
from .types import RefreshError, StepOutcome, StepResult
from .utils import summarize

logger = get_logger("refresher")


def run_step(
    step: CacheStep,
    prefix: str,
    *,
    is_available: ExecutableProbe = is_executable_available,
    run: ToolRunner = run_tool,
) -> StepResult:
    """Run one cache step best-effort and report what happened."""
    directory = step.directory(prefix)
    if not os.path.isdir(directory):
        logger.debug(
            "%s does not exist, nothing to refresh",
            directory,
            extra={"event": "step_absent", "step": step.name, "directory": directory},
        )
        return StepResult(step=step.name, directory=directory, outcome=StepOutcome.absent)

    if not is_available(step.tool):
        logger.warning(
            step.missing_tool_line,
            extra={"event": "step_missing_tool", "step": step.name, "tool": step.tool},
        )
        return StepResult(step=step.name, directory=directory, outcome=StepOutcome.missing_tool)

    logger.info(
        step.status_line,
        extra={
            "event": "step_run",
            "step": step.name,
            "tool": step.tool,
            "directory": directory,
        },
    )
    try:
        code = run([step.tool, directory])
    except RefreshError as e:
        logger.debug(
            "%s could not be started, ignoring",
            step.tool,
            extra={"event": "step_failed", "step": step.name, "error": str(e)},
        )
        return StepResult(
            step=step.name, directory=directory, outcome=StepOutcome.failed, error=str(e)
        )

    if code != 0:
        logger.debug(
            "%s exited with status %d, ignoring",
            step.tool,
            code,
            extra={"event": "step_failed", "step": step.name, "returncode": code},
        )
        return StepResult(
            step=step.name, directory=directory, outcome=StepOutcome.failed, returncode=code
        )
    return StepResult(
        step=step.name, directory=directory, outcome=StepOutcome.ran, returncode=code
    )


def refresh_caches(
    config: RefreshConfig,
    *,
    is_available: ExecutableProbe = is_executable_available,
    run: ToolRunner = run_tool,
    steps: tuple[CacheStep, ...] = STEPS,
) -> list[StepResult]:
    """Run every step in order under the configured prefix.

    Never raises for a step: anything a step throws is recorded as `failed`
    and the next step still runs.
    """
    prefix = config.prefix
    if config.staging:
        logger.info(
            "DESTDIR is set, skipping cache refresh",
            extra={"event": "refresh_staging", "destdir": config.destdir},
        )

    results: list[StepResult] = []
    for step in steps:
        if config.staging:
            directory = step.directory(prefix)
            outcome = StepOutcome.skipped if os.path.isdir(directory) else StepOutcome.absent
            results.append(StepResult(step=step.name, directory=directory, outcome=outcome))
            continue
        try:
            results.append(run_step(step, prefix, is_available=is_available, run=run))
        except Exception as e:
            logger.debug(
                "%s step raised, ignoring",
                step.name,
                exc_info=True,
                extra={"event": "step_failed", "step": step.name, "error": str(e)},
            )
            results.append(
                StepResult(
                    step=step.name,
                    directory=step.directory(prefix),
                    outcome=StepOutcome.failed,
                    error=str(e),
                )
            )
    return results


def main(argv: list[str] | None = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(level=args.log_level, fmt=args.log_format)
    config = RefreshConfig.from_env(
        install_prefix=args.prefix, respect_destdir=args.respect_destdir
    )
    if args.passthrough:
        logger.debug(
            "Ignoring arguments: %s",
            " ".join(args.passthrough),
            extra={"event": "ignored_args", "argv": args.passthrough},
        )
    results = refresh_caches(config)
    logger.debug("Cache refresh finished", extra=summarize(results))
    raise SystemExit(0)


if __name__ == "__main__":
    main()
