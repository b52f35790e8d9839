from __future__ import annotations

import shutil
import subprocess
from collections.abc import Callable, Sequence

from .logging_conf import get_logger
from .types import ToolLaunchError

logger = get_logger("refresher.tools")

ExecutableProbe = Callable[[str], bool]
ToolRunner = Callable[[Sequence[str]], int]


def is_executable_available(name: str) -> bool:
    """Return True if `name` resolves to an executable on PATH."""
    return shutil.which(name) is not None


def run_tool(argv: Sequence[str]) -> int:
    """Run an external cache tool and return its exit status.

    - stderr is discarded; stdout is inherited from this process
    - a non-zero exit is returned, not raised
    - raises ToolLaunchError if the process cannot be started
    """
    try:
        completed = subprocess.run(list(argv), stderr=subprocess.DEVNULL, check=False)
    except OSError as e:
        logger.debug(
            "Could not start %s: %s",
            argv[0],
            e,
            extra={"event": "tool_launch_error", "argv": list(argv), "error": str(e)},
        )
        raise ToolLaunchError(f"could not run {argv[0]}: {e}") from e
    return completed.returncode
