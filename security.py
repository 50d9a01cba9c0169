#!/usr/bin/env python3
"""Security validation utilities for git-relocate."""

import os
import re
from pathlib import Path


class SecurityValidator:
    """Security validation utilities for path validation and log sanitization."""

    # Maximum lengths to prevent pathological inputs
    MAX_PATH_LENGTH = 4096

    # C0 control characters and DEL, as found in hostile filenames
    CONTROL_CHARS_PATTERN = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")

    @classmethod
    def validate_directory_path(cls, path: str, label: str = "path") -> str:
        """Validate a directory path argument and return it normalized."""
        if not path or not isinstance(path, str):
            raise ValueError(f"{label} must be a non-empty string")

        if len(path) > cls.MAX_PATH_LENGTH:
            raise ValueError(
                f"{label} exceeds maximum length of {cls.MAX_PATH_LENGTH}"
            )

        # Check for null bytes and control characters
        if "\x00" in path or cls.CONTROL_CHARS_PATTERN.search(path):
            raise ValueError(f"{label} contains null bytes or control characters")

        return os.path.normpath(path)

    @classmethod
    def validate_destination(cls, source: str, destination: str) -> None:
        """Reject destinations that would make a repository copy into itself.

        The destination may live directly under the source root as long as
        it is not one of the repositories being relocated; non-git entries
        are skipped by the scan. It may not lie inside one of the source's
        subdirectories, and it may not be the source root itself.
        """
        source_path = Path(source).resolve()
        dest_path = Path(destination).resolve()

        if dest_path == source_path:
            raise ValueError("destination must differ from source")

        try:
            relative = dest_path.relative_to(source_path)
        except ValueError:
            return

        if len(relative.parts) > 1:
            raise ValueError(
                f"destination lies inside source subdirectory '{relative.parts[0]}'"
            )

        if os.path.lexists(dest_path / ".git"):
            raise ValueError(
                f"destination '{relative.parts[0]}' is a repository under source"
            )

    @classmethod
    def sanitize_for_logging(cls, message: str) -> str:
        """Sanitize message for safe console output."""
        if not message:
            return message

        # Credentials in remote URLs can show up in repository paths and names
        sanitized = re.sub(
            r"(https?://)[^:/@\s]+:[^@\s]+@",
            r"\1[REDACTED]@",
            str(message),
            flags=re.IGNORECASE,
        )

        # Escape sequences in filenames must not reach the terminal
        return cls.CONTROL_CHARS_PATTERN.sub("?", sanitized)
