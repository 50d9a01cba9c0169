#!/usr/bin/env python3
"""Detection of git repositories among scanned directories."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ignore_list import GITIGNORE_NAME, IgnoreList, read_gitignore

GIT_DIR_NAME = ".git"


@dataclass(frozen=True)
class RepositoryDescriptor:
    """Result of inspecting a single directory.

    ``ignore_list`` is ``None`` when the directory has no .gitignore, which
    is not the same as an empty .gitignore (``()``).
    """
    is_git_repo: bool
    ignore_list: Optional[IgnoreList] = None


def inspect_directory(path: Union[str, Path]) -> RepositoryDescriptor:
    """Inspect the immediate children of ``path``.

    Any entry named ``.git`` counts, whatever its type, so worktrees and
    submodule checkouts (where ``.git`` is a file) are detected too. Raises
    ``OSError`` if ``path`` cannot be listed.
    """
    is_git_repo = False
    ignore_list: Optional[IgnoreList] = None

    with os.scandir(path) as entries:
        for entry in entries:
            if entry.name == GIT_DIR_NAME:
                is_git_repo = True
            elif entry.name == GITIGNORE_NAME:
                ignore_list = tuple(read_gitignore(entry.path))

    return RepositoryDescriptor(is_git_repo=is_git_repo, ignore_list=ignore_list)
