"""End-to-end runs of the hook in a child interpreter, checking the exact stdout."""
from __future__ import annotations

import os
import stat
import subprocess
import sys
from pathlib import Path

import pytest
from conftest import make_dirs

from refresher.domain.steps import SCHEMAS, STEPS

ROOT = Path(__file__).resolve().parents[1]


def _fake_tool(bin_dir: Path, name: str, script: str) -> None:
    path = bin_dir / name
    path.write_text(f"#!/bin/sh\n{script}\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


def _run_hook(env: dict[str, str], *args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "refresher.refresh", *args],
        cwd=ROOT,
        env={"PYTHONPATH": str(ROOT), **env},
        capture_output=True,
        text=True,
        timeout=60,
    )


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    d = tmp_path / "bin"
    d.mkdir()
    return d


def test_status_and_warning_lines_reach_stdout(tmp_path, bin_dir):
    prefix = tmp_path / "prefix"
    make_dirs(prefix, "schemas", "applications")
    _fake_tool(bin_dir, "glib-compile-schemas", 'echo "TOOL $1"\necho "noise" >&2\nexit 3')

    proc = _run_hook(
        {"PATH": str(bin_dir), "RPM_INSTALL_PREFIX": str(prefix)}, "configure", "1.0"
    )

    assert proc.returncode == 0
    assert proc.stderr == ""
    assert proc.stdout == (
        "Compiling GLib schemas...\n"
        f"TOOL {SCHEMAS.directory(str(prefix))}\n"
        "Warning: update-desktop-database not found, skipping updating desktop database\n"
    )


def test_json_format_on_stdout(tmp_path, bin_dir):
    prefix = tmp_path / "prefix"
    make_dirs(prefix, "icons")

    proc = _run_hook(
        {"PATH": str(bin_dir), "RPM_INSTALL_PREFIX": str(prefix), "LOG_FORMAT": "json"}
    )

    assert proc.returncode == 0
    assert proc.stderr == ""
    assert '"event": "step_missing_tool"' in proc.stdout
    assert '"tool": "gtk-update-icon-cache"' in proc.stdout


def test_unset_prefix_with_nothing_installed_prints_nothing(bin_dir):
    if any(os.path.isdir(step.directory("/usr")) for step in STEPS):
        pytest.skip("host /usr already has desktop cache directories")

    proc = _run_hook({"PATH": str(bin_dir)})

    assert proc.returncode == 0
    assert proc.stdout == ""
    assert proc.stderr == ""
