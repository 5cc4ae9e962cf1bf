#!/usr/bin/env python3
"""Membership demo.

Checks target 1 against [1, 2, 3] as int64 and as float64 and prints
each result on its own line, lowercase:

    true
    true
"""

import sys
from typing import TextIO

import numpy as np

from src.contains import contains
from src.types import CheckCase

DEMO_CASES = [
    CheckCase(
        name="int64",
        values=tuple(np.array([1, 2, 3], dtype=np.int64)),
        target=np.int64(1),
        dtype="int64",
    ),
    CheckCase(
        name="float64",
        values=tuple(np.array([1, 2, 3], dtype=np.float64)),
        target=np.float64(1),
        dtype="float64",
    ),
]


def format_result(found: bool) -> str:
    """Render a membership result as 'true' or 'false'."""
    return "true" if found else "false"


def run(cases: list[CheckCase], stream: TextIO) -> list[bool]:
    """Check each case in order and write one line per result."""
    results = []
    for case in cases:
        found = contains(case.values, case.target)
        stream.write(format_result(found) + "\n")
        results.append(found)
    return results


def main() -> int:
    run(DEMO_CASES, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
