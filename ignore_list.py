#!/usr/bin/env python3
"""Loader for the literal exclusion names kept in a repository's .gitignore."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple, Union

# Captured once per relocation and threaded unchanged through the copy
IgnoreList = Tuple[str, ...]

GITIGNORE_NAME = ".gitignore"


def normalize_entry(line: str) -> str:
    """Drop every '/' and surrounding whitespace: ' build/ ' -> 'build'."""
    return line.replace("/", "").strip()


def read_gitignore(path: Union[str, Path]) -> List[str]:
    """Read a .gitignore-style file into a list of literal names.

    Only exact names are supported, not gitignore glob syntax. Blank lines and
    comments are not filtered: they go through the same normalization and end
    up as ordinary (possibly empty) entries. Order is kept and duplicates are
    not removed. I/O errors propagate to the caller.
    """
    with open(path, "r", encoding="utf-8") as handle:
        return [normalize_entry(line) for line in handle]
