#!/usr/bin/env python3
"""Copy-then-delete relocation of a single repository directory."""

from __future__ import annotations

import errno
import os
import shutil
from pathlib import Path
from typing import Optional, Sequence, Union

from copier import copy_tree
from logging_utils import Logger

PathLike = Union[str, Path]


class SourceNotFoundError(FileNotFoundError):
    """Raised when the directory to relocate does not exist."""

    def __init__(self, path: PathLike) -> None:
        super().__init__(errno.ENOENT, "Source directory not found", str(path))


def move_repository(
    source_dir: PathLike,
    dest_dir: PathLike,
    ignore_list: Optional[Sequence[str]] = None,
    copy_only: bool = False,
) -> None:
    """Copy ``source_dir`` to ``dest_dir`` and, unless ``copy_only``, delete it.

    The source is only removed after the copy has fully succeeded; a source
    that is a symlink is unlinked and its target left alone. If removal
    then fails, both trees are left populated and the error propagates;
    nothing is rolled back.
    """
    source = Path(source_dir)
    if not source.exists():
        raise SourceNotFoundError(source)

    try:
        copy_tree(source, dest_dir, ignore_list)
    except OSError as e:
        Logger.error(f"error copying directory {source}: {e}")
        raise

    if copy_only:
        return

    try:
        # A linked repository is relocated by dropping the link, not its target
        if source.is_symlink():
            source.unlink()
        else:
            shutil.rmtree(source)
    except OSError as e:
        Logger.error(f"error removing source directory {source}: {e}")
        Logger.warn(f"copy at {os.fspath(dest_dir)} is complete; source left in place")
        raise
