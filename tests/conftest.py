from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from refresher.domain.steps import STEPS


class FakeRunner:
    """Records every argv it is asked to run and returns a fixed exit code."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: list[list[str]] = []

    def __call__(self, argv: Sequence[str]) -> int:
        self.calls.append(list(argv))
        return self.returncode


class FakeProbe:
    """Reports only the named tools as present on PATH."""

    def __init__(self, available: set[str] | None = None) -> None:
        self.available = set(available or ())
        self.queried: list[str] = []

    def __call__(self, name: str) -> bool:
        self.queried.append(name)
        return name in self.available


ALL_TOOLS = {s.tool for s in STEPS}


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def all_tools() -> FakeProbe:
    return FakeProbe(ALL_TOOLS)


@pytest.fixture
def no_tools() -> FakeProbe:
    return FakeProbe()


@pytest.fixture
def prefix(tmp_path: Path) -> Path:
    return tmp_path / "prefix"


def make_dirs(prefix: Path, *names: str) -> None:
    """Create the directories of the named steps under `prefix`."""
    by_name = {s.name: s for s in STEPS}
    for name in names:
        Path(by_name[name].directory(str(prefix))).mkdir(parents=True)
