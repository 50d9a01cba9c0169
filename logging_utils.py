#!/usr/bin/env python3
"""Console logging for git-relocate."""

import os
import sys
import time
from typing import Dict, TextIO, Tuple

import colorama

from security import SecurityValidator

# Initialize colorama for cross-platform colored output
colorama.init(autoreset=True)


class Logger:
    """Colored, sanitized console output.

    Informational levels go to stdout so that piping the tool keeps a clean
    record of what was relocated; errors and validation events go to stderr.
    """

    PROCESS_NAME = "git-relocate"

    # level -> (color, use stderr)
    LEVELS: Dict[str, Tuple[str, bool]] = {
        "debug": (colorama.Fore.LIGHTBLACK_EX, False),
        "info": (colorama.Fore.CYAN, False),
        "success": (colorama.Fore.GREEN, False),
        "warn": (colorama.Fore.YELLOW, False),
        "error": (colorama.Fore.RED, True),
        "security": (colorama.Fore.MAGENTA, True),
    }

    @classmethod
    def debug(cls, *messages: str) -> None:
        cls._log("debug", *messages)

    @classmethod
    def info(cls, *messages: str) -> None:
        cls._log("info", *messages)

    @classmethod
    def success(cls, *messages: str) -> None:
        cls._log("success", *messages)

    @classmethod
    def warn(cls, *messages: str) -> None:
        cls._log("warn", *messages)

    @classmethod
    def error(cls, *messages: str) -> None:
        cls._log("error", *messages)

    @classmethod
    def security_event(cls, event_type: str, details: str) -> None:
        """Log path validation outcomes with a timestamp."""
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
        cls._log("security", f"[SECURITY:{event_type}] {timestamp}: {details}")

    @classmethod
    def _log(cls, level: str, *messages: str) -> None:
        color, to_stderr = cls.LEVELS[level]
        sanitized = [SecurityValidator.sanitize_for_logging(str(m)) for m in messages]
        stream: TextIO = sys.stderr if to_stderr else sys.stdout
        stream.write(cls._format_line(color, *sanitized) + "\n")

    @classmethod
    def _format_line(cls, color: str, *messages: str) -> str:
        header = f"[{cls.PROCESS_NAME}:{os.getpid()}]"
        message = " ".join(messages)
        return f"{color}{header}{colorama.Style.RESET_ALL} {message}"
