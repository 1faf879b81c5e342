#!/usr/bin/env python3
# Copyright 2026 SimCom Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the SimCom CI checks locally.

Steps run in order and all of them run even after a failure, so a single
invocation reports every broken check. ``--skip NAME`` leaves a step out.
"""

import argparse
import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

REPO_ROOT = Path(__file__).resolve().parent.parent

# ###############
# Public Interface
# ###############

STEPS: dict[str, list[str]] = {
    "format": ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"],
    "lint": ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"],
    "types": ["uv", "run", "ty", "check", "src/"],
    "tests": ["uv", "run", "pytest", "--cov=simcom", "--cov-report=term-missing"],
    "smoke": ["uv", "run", "simcom", "compile", "tests/data/positive/scene.tipo"],
    "build": ["uv", "build"],
}


def main() -> int:
    """Run the selected CI steps and print a summary."""
    parser = argparse.ArgumentParser(description="Run SimCom CI checks locally.")
    parser.add_argument(
        "--skip",
        action="append",
        default=[],
        choices=sorted(STEPS),
        help="Step to leave out (repeatable)",
    )
    args = parser.parse_args()

    results: list[tuple[str, bool, float]] = []
    for name, cmd in STEPS.items():
        if name in args.skip:
            continue
        _banner(name)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=REPO_ROOT, check=False)
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _banner("summary")
    for name, passed, elapsed in results:
        paint = chalk.green if passed else chalk.red
        print(paint(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}\n{chalk.blue(title)}\n{sep}")


if __name__ == "__main__":
    sys.exit(main())
