"""Tests for console logging."""

from __future__ import annotations

import pytest

from logging_utils import Logger


def test_info_goes_to_stdout(capsys: pytest.CaptureFixture) -> None:
    """Informational messages are written to stdout with the process header."""
    Logger.info('repo', 'is not a git dir!')

    captured = capsys.readouterr()
    assert '[git-relocate:' in captured.out
    assert 'repo is not a git dir!' in captured.out
    assert captured.err == ''


def test_error_goes_to_stderr(capsys: pytest.CaptureFixture) -> None:
    """Errors are written to stderr."""
    Logger.error('error copying directory')

    captured = capsys.readouterr()
    assert 'error copying directory' in captured.err
    assert captured.out == ''


def test_messages_are_sanitized(capsys: pytest.CaptureFixture) -> None:
    """Control characters never reach the console."""
    Logger.warn('bad\x07name')

    assert 'bad?name' in capsys.readouterr().out
