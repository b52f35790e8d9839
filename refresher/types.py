from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class StepOutcome(str, Enum):
    absent = "absent"
    missing_tool = "missing_tool"
    ran = "ran"
    failed = "failed"
    skipped = "skipped"


@dataclass
class StepResult:
    """What happened to a single refresh step."""

    step: str
    directory: str
    outcome: StepOutcome
    returncode: Optional[int] = None
    error: Optional[str] = None


class RefreshError(RuntimeError):
    """Base class for errors raised while refreshing a cache."""


class ToolLaunchError(RefreshError):
    """Raised when an external cache tool cannot be started at all."""
