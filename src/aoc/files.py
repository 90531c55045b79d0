"""Output files."""

from __future__ import annotations

import pathlib

from aoc.errors import FileWriteError


def save_file(path: str | pathlib.Path, contents: str, *, overwrite: bool) -> None:
    """Write *contents* to *path*; refuse to replace an existing file unless *overwrite*."""
    mode = "w" if overwrite else "x"
    try:
        with open(path, mode, encoding="utf-8") as f:
            f.write(contents)
    except OSError as err:
        raise FileWriteError(str(path), err.strerror or str(err)) from err
