#!/usr/bin/env python3
# Copyright 2026 CSSParser Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the CI checks locally: format, lint, type check, tests, and build."""

import argparse
import pathlib
import subprocess
import sys
import time
from dataclasses import dataclass

from yachalk import chalk

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Step:
    """A named CI step and the command that runs it."""

    key: str
    title: str
    command: list[str]


STEPS: list[Step] = [
    Step("format", "Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    Step("lint", "Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    Step("types", "Type check", ["uv", "run", "ty", "check", "src/"]),
    Step("tests", "Tests", ["uv", "run", "pytest", "--cov=cssparser", "--cov-report=term-missing"]),
    Step("build", "Build", ["uv", "build"]),
]


def main(argv: list[str] | None = None) -> int:
    """Run the selected CI steps and print a summary."""
    parser = argparse.ArgumentParser(description="Run CSSParser CI checks locally.")
    parser.add_argument(
        "--only",
        action="append",
        choices=[step.key for step in STEPS],
        help="Run only the given step (may be repeated)",
    )
    parser.add_argument("--fail-fast", action="store_true", help="Stop at the first failing step")
    args = parser.parse_args(argv)

    selected = [step for step in STEPS if not args.only or step.key in args.only]
    results: list[tuple[Step, bool, float]] = []
    for step in selected:
        passed, elapsed = _run(step)
        results.append((step, passed, elapsed))
        if args.fail_fast and not passed:
            break

    _print_summary(results)
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_RULE = "=" * 60


def _run(step: Step) -> tuple[bool, float]:
    print(f"\n{chalk.blue(_RULE)}")
    print(chalk.blue(step.title))
    print(chalk.blue(_RULE))
    start = time.monotonic()
    proc = subprocess.run(step.command, cwd=_repo_root())
    return proc.returncode == 0, time.monotonic() - start


def _print_summary(results: list[tuple[Step, bool, float]]) -> None:
    print(f"\n{chalk.blue(_RULE)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(_RULE))
    for step, passed, elapsed in results:
        color = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        print(color(f"  {status}  {step.title} ({elapsed:.1f}s)"))
    print()


def _repo_root() -> pathlib.Path:
    return pathlib.Path(__file__).parent.parent


if __name__ == "__main__":
    sys.exit(main())
