"""Tests for path helpers."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from utils import is_excluded, resolve_entry_name


def test_resolve_entry_name_plain(tmp_path: Path) -> None:
    """A regular directory resolves to its own name."""
    (tmp_path / 'repo').mkdir()

    assert resolve_entry_name(tmp_path / 'repo') == 'repo'


def test_resolve_entry_name_follows_symlink(tmp_path: Path) -> None:
    """Symlinks resolve to their target's name."""
    (tmp_path / 'project-v2').mkdir()
    os.symlink(tmp_path / 'project-v2', tmp_path / 'current')

    assert resolve_entry_name(tmp_path / 'current') == 'project-v2'


def test_resolve_entry_name_missing(tmp_path: Path) -> None:
    """Missing entries raise FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        resolve_entry_name(tmp_path / 'gone')


def test_is_excluded() -> None:
    """Exclusion is exact-name membership; no list excludes nothing."""
    assert is_excluded('build', ('build', 'dist')) is True
    assert is_excluded('build.log', ('build',)) is False
    assert is_excluded('build', None) is False
    assert is_excluded('', ('',)) is True


def test_resolve_entry_name_symlink_loop(tmp_path: Path) -> None:
    """A self-referencing link raises OSError rather than RuntimeError."""
    os.symlink(tmp_path / 'loop', tmp_path / 'loop')

    with pytest.raises(OSError):
        resolve_entry_name(tmp_path / 'loop')
