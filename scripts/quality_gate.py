"""Run ruff, mypy and pytest and report the results as JSON.

Usage:
    python scripts/quality_gate.py              # run all, JSON output
    python scripts/quality_gate.py --skip-tests # skip pytest (fast)
    python scripts/quality_gate.py --fix        # auto-fix ruff issues first
"""

from __future__ import annotations

import argparse
import json
import re
import subprocess
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

# Mypy modules — keep in sync with pyproject.toml
MYPY_TARGETS = [
    "gridtable/api.py",
    "gridtable/cell.py",
    "gridtable/columns.py",
    "gridtable/rows.py",
    "gridtable/table.py",
    "gridtable/render.py",
    "gridtable/serializers.py",
    "gridtable/exceptions.py",
    "gridtable/_utils.py",
]


def _run(cmd: list[str]) -> tuple[subprocess.CompletedProcess, float]:
    """Run a python -m tool from the project root; returns (result, seconds)."""
    t0 = time.monotonic()
    r = subprocess.run(
        [sys.executable, "-m", *cmd],
        capture_output=True,
        text=True,
        cwd=str(ROOT),
        timeout=300,
    )
    return r, round(time.monotonic() - t0, 1)


def _count(lines: list[str], pattern: str) -> int:
    return sum(1 for line in lines if re.search(pattern, line))


def check_ruff_lint(fix: bool = False) -> dict:
    if fix:
        _run(["ruff", "check", "--fix", "."])
    r, duration = _run(["ruff", "check", "."])
    return {
        "status": "pass" if r.returncode == 0 else "fail",
        "errors": _count(r.stdout.splitlines(), r"^\S+:\d+:\d+:"),
        "duration_s": duration,
        "output": r.stdout.strip(),
    }


def check_ruff_format() -> dict:
    r, duration = _run(["ruff", "format", "--check", "."])
    lines = r.stderr.splitlines() + r.stdout.splitlines()
    return {
        "status": "pass" if r.returncode == 0 else "fail",
        "files_to_reformat": _count(lines, r"^Would reformat"),
        "duration_s": duration,
        "output": r.stderr.strip(),
    }


def check_mypy() -> dict:
    r, duration = _run(["mypy", *MYPY_TARGETS])
    return {
        "status": "pass" if r.returncode == 0 else "fail",
        "errors": _count(r.stdout.splitlines(), r": error:"),
        "duration_s": duration,
        "output": r.stdout.strip(),
    }


def check_pytest() -> dict:
    r, duration = _run(["pytest", "tests/", "-q", "--no-header", "--tb=short"])
    passed = failed = 0
    # Summary line: "58 passed" or "3 failed, 55 passed"
    for line in reversed(r.stdout.strip().splitlines()):
        m_passed = re.search(r"(\d+)\s+passed", line)
        m_failed = re.search(r"(\d+)\s+failed", line)
        if m_passed or m_failed:
            passed = int(m_passed.group(1)) if m_passed else 0
            failed = int(m_failed.group(1)) if m_failed else 0
            break
    return {
        "status": "pass" if r.returncode == 0 else "fail",
        "passed": passed,
        "failed": failed,
        "duration_s": duration,
        "output": r.stdout.strip()[-2000:],
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Run all quality checks")
    parser.add_argument("--skip-tests", action="store_true", help="Skip pytest")
    parser.add_argument("--fix", action="store_true", help="Auto-fix ruff issues first")
    args = parser.parse_args()

    t0 = time.monotonic()
    checks: dict[str, dict] = {}
    print("Running ruff lint...", file=sys.stderr)
    checks["ruff_lint"] = check_ruff_lint(fix=args.fix)
    print("Running ruff format...", file=sys.stderr)
    checks["ruff_format"] = check_ruff_format()
    print("Running mypy...", file=sys.stderr)
    checks["mypy"] = check_mypy()
    if args.skip_tests:
        checks["pytest"] = {"status": "skip", "reason": "--skip-tests"}
    else:
        print("Running pytest...", file=sys.stderr)
        checks["pytest"] = check_pytest()

    # Keep JSON compact: drop output from passing checks
    for check in checks.values():
        if check.get("status") == "pass":
            check.pop("output", None)

    ok = all(c["status"] in ("pass", "skip") for c in checks.values())
    result = {
        "overall": "pass" if ok else "fail",
        "checks": checks,
        "total_duration_s": round(time.monotonic() - t0, 1),
    }
    print(json.dumps(result, indent=2))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
