#!/usr/bin/env python3
"""Recursive directory copy honoring a repository's exclusion names."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Optional, Sequence, Union

from logging_utils import Logger
from utils import is_excluded

PathLike = Union[str, Path]


def copy_tree(
    source_dir: PathLike,
    dest_dir: PathLike,
    ignore_list: Optional[Sequence[str]] = None,
) -> None:
    """Copy ``source_dir`` into ``dest_dir``, skipping excluded names.

    The same ``ignore_list`` applies at every depth: a name listed in the
    repository's top-level .gitignore is skipped wherever it appears, and
    nested .gitignore files are copied like any other file but never read.
    File contents are copied byte-for-byte; modes, ownership and timestamps
    are not preserved. Existing destination directories are reused and
    existing files overwritten, so an interrupted run can simply be repeated.
    Any ``OSError`` propagates.
    """
    source = Path(source_dir)
    dest = Path(dest_dir)

    if not dest.exists():
        dest.mkdir(parents=True, exist_ok=True)

    with os.scandir(source) as entries:
        for entry in entries:
            if is_excluded(entry.name, ignore_list):
                Logger.debug(f"excluding: {entry.path}")
                continue
            _copy_entry(entry, dest, ignore_list)


def _copy_entry(
    entry: os.DirEntry,
    dest: Path,
    ignore_list: Optional[Sequence[str]],
) -> None:
    target = dest / entry.name
    if entry.is_dir():
        copy_tree(entry.path, target, ignore_list)
    else:
        shutil.copyfile(entry.path, target)
