from __future__ import annotations

from collections.abc import Iterable

from .types import StepOutcome, StepResult


def summarize(results: Iterable[StepResult]) -> dict:
    """Compute a summary dict of per-outcome counts and per-step detail."""
    counts = {outcome.value: 0 for outcome in StepOutcome}
    steps: list[dict] = []
    for r in results:
        counts[r.outcome.value] += 1
        detail = {"step": r.step, "directory": r.directory, "outcome": r.outcome.value}
        if r.returncode is not None:
            detail["returncode"] = r.returncode
        if r.error:
            detail["error"] = r.error
        steps.append(detail)
    return {
        "component": "refresher",
        "event": "refresh_summary",
        "counts": counts,
        "steps": steps,
    }
