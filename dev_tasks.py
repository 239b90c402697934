#!/usr/bin/env python3
"""
Development tasks for entityprops.

Usage: python dev_tasks.py <install|format|lint|test|check>
"""

import subprocess
import sys

PACKAGE = "entityprops"
SOURCES = f"{PACKAGE} tests"

STEPS = {
    "install": ["pip install -e .[dev,test]"],
    "format": [f"black {SOURCES}", f"isort {SOURCES}"],
    "lint": [f"mypy {PACKAGE}", f"flake8 {SOURCES}"],
    "test": [f"pytest --cov={PACKAGE} --cov-report=term-missing"],
}
STEPS["check"] = STEPS["lint"] + STEPS["test"]


def run(task):
    failed = []
    for command in STEPS[task]:
        print(f"$ {command}")
        if subprocess.run(command, shell=True).returncode != 0:
            failed.append(command)
    for command in failed:
        print(f"failed: {command}")
    return not failed


def main(argv):
    if len(argv) != 2 or argv[1] not in STEPS:
        print(__doc__.strip())
        return 2
    return 0 if run(argv[1]) else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
