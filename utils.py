#!/usr/bin/env python3
"""Utility functions for git-relocate."""

from __future__ import annotations

import errno
from pathlib import Path
from typing import Optional, Sequence


def resolve_entry_name(entry: Path) -> str:
    """Return the final component of the entry's canonical path.

    Symlinks are followed first, so a link named ``current`` pointing at
    ``project-v2`` yields ``project-v2``. Raises ``FileNotFoundError`` if the
    entry no longer exists or is a dangling link, and ``OSError`` with
    ``ELOOP`` for a symlink loop.
    """
    try:
        resolved = entry.resolve(strict=True)
    except RuntimeError as e:
        # Python < 3.13 reports symlink loops as RuntimeError
        raise OSError(errno.ELOOP, str(e), str(entry)) from e
    if not resolved.name:
        raise ValueError(f"cannot extract a name from {resolved}")
    return resolved.name


def is_excluded(name: str, ignore_list: Optional[Sequence[str]]) -> bool:
    """Literal membership test; no ignore list excludes nothing."""
    return ignore_list is not None and name in ignore_list
