#!/usr/bin/env python3
"""
Run aoc CLI flows under debugger.

Usage from IntelliJ IDEA / PyCharm:
- Open this file and run with the debugger.
- Set breakpoints in:
  - client.py
  - calendar_view.py
  - leaderboard.py
"""

import sys

from aoc.cli import main


if __name__ == "__main__":
    # Change argv to simulate different CLI invocations.

    # Read a past puzzle:
    sys.argv = ["aoc", "--debug", "-y", "2022", "-d", "1"]

    # Download input and puzzle.md:
    # sys.argv = ["aoc", "-y", "2022", "-d", "1", "-o", "download"]

    # Calendar with colors:
    # sys.argv = ["aoc", "-y", "2019", "--color", "always", "calendar"]

    # Private leaderboard:
    # sys.argv = ["aoc", "-y", "2022", "private-leaderboard", "12345"]

    raise SystemExit(main())
