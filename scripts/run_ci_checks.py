#!/usr/bin/env python3
# =============================================================================
# BINCMP -- CI CHECKS RUNNER
# File:   scripts/run_ci_checks.py
# =============================================================================
#
# PURPOSE
# -------
# Runs the CI gate in two sequential stages:
#   Stage 1: pytest (all tests + coverage enforcement >= 90%)
#   Stage 2: CLI smoke run (bincmp compares a file with itself)
#
# Exit codes:
#   0 -- All stages passed.
#   1 -- Stage 1 (pytest) failed.
#   2 -- Stage 2 (CLI smoke run) failed.
#
# Usage:
#   python scripts/run_ci_checks.py
#
# Requires the test extra: pip install -e .[test]
# =============================================================================

from __future__ import annotations

import subprocess
import sys
import pathlib

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
_REPO_ROOT = pathlib.Path(__file__).parent.parent
_PYTHON    = sys.executable
_SMOKE_FILE = _REPO_ROOT / "pyproject.toml"


def _separator(char: str = "=", width: int = 72) -> str:
    return char * width


def _run(cmd: list[str], label: str, capture: bool = False) -> subprocess.CompletedProcess:
    """
    Run a subprocess command and return the completed process.
    Output streams live unless capture is set.
    """
    print(_separator())
    print(f"CI STAGE: {label}")
    print(f"CMD:      {' '.join(cmd)}")
    print(_separator("-"))
    sys.stdout.flush()

    return subprocess.run(
        cmd,
        cwd=str(_REPO_ROOT),
        capture_output=capture,
        text=capture,
    )


def main() -> int:
    print(_separator())
    print("BINCMP CI GATE -- starting")
    print(_separator())
    sys.stdout.flush()

    # ------------------------------------------------------------------
    # Stage 1: pytest with coverage (pytest-cov).
    # A non-zero exit code means either tests failed or coverage < 90%.
    # ------------------------------------------------------------------
    pytest_rc = _run(
        [
            _PYTHON, "-m", "pytest",
            "--cov=bincmp", "--cov-report=term-missing", "--cov-fail-under=90",
        ],
        "pytest (tests + coverage >= 90%)",
    ).returncode

    if pytest_rc != 0:
        print(_separator())
        print(f"CI RESULT: FAIL  [stage=pytest  exit_code={pytest_rc}]")
        print("Merge BLOCKED: pytest stage did not pass.")
        print(_separator())
        sys.stdout.flush()
        return 1

    print(_separator("-"))
    print("CI STAGE pytest: PASS")
    sys.stdout.flush()

    # ------------------------------------------------------------------
    # Stage 2: CLI smoke run.
    # A file compared with itself must exit 0, print only the header row
    # and leave stderr empty.
    # ------------------------------------------------------------------
    smoke = _run(
        [_PYTHON, "-m", "bincmp", str(_SMOKE_FILE), str(_SMOKE_FILE)],
        "CLI smoke run (identical inputs)",
        capture=True,
    )
    stdout_lines = smoke.stdout.splitlines()
    smoke_ok = (
        smoke.returncode == 0
        and len(stdout_lines) == 1
        and stdout_lines[0].split() == ["OFFSET", "FILE1", "FILE2"]
        and smoke.stderr == ""
    )

    if not smoke_ok:
        print(_separator())
        print(f"CI RESULT: FAIL  [stage=smoke  exit_code={smoke.returncode}]")
        print(f"stdout: {smoke.stdout!r}")
        print(f"stderr: {smoke.stderr!r}")
        print("Merge BLOCKED: CLI smoke run did not pass.")
        print(_separator())
        sys.stdout.flush()
        return 2

    print(_separator("-"))
    print("CI STAGE smoke: PASS")

    # ------------------------------------------------------------------
    # All stages passed.
    # ------------------------------------------------------------------
    print(_separator())
    print("CI RESULT: PASS  [stages=pytest,smoke]")
    print("Merge permitted.")
    print(_separator())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
