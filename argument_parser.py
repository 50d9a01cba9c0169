#!/usr/bin/env python3
"""Command line argument parsing and configuration building."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, Tuple

from config import BehaviorConfig, Config, PathConfig, TransferMode
from logging_utils import Logger
from security import SecurityValidator

# Exit codes
EXIT_MISSING_ARGUMENTS = 2


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="git-relocate",
        allow_abbrev=False,
        description=(
            "Move or copy every git repository found directly under SOURCE "
            "into DESTINATION, leaving out names listed in each "
            "repository's .gitignore"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s ~/projects /mnt/backup/projects
  %(prog)s ~/projects /mnt/backup/projects --copy
  %(prog)s ~/projects /mnt/backup/projects -c --dry-run
  %(prog)s ~/projects /mnt/backup/projects --keep-going
        """,
    )
    return parser


def _add_path_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the positional source/destination arguments to parser."""
    parser.add_argument(
        "source",
        help="Directory whose immediate subdirectories are scanned for git repositories",
    )
    parser.add_argument(
        "destination",
        help="Directory under which repositories are recreated by name",
    )
    parser.add_argument(
        "mode_arg",
        nargs="?",
        metavar="MODE",
        help="Ignored; --copy or -c selects copy mode in any position",
    )


def _add_behavior_arguments(parser: argparse.ArgumentParser) -> None:
    """Add behavior arguments to parser."""
    parser.add_argument(
        "-c",
        "--copy",
        action="store_true",
        dest="copy",
        help="Keep source repositories after copying them (default: move)",
    )
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        dest="dry_run",
        help="List actions without doing them",
    )
    parser.add_argument(
        "-k",
        "--keep-going",
        action="store_true",
        dest="keep_going",
        help="Continue with remaining repositories after a failure",
    )


def _warn_ignored_arguments(
    mode_arg: Optional[str], unknown: List[str], mode: TransferMode
) -> None:
    """Extra arguments never select copy mode; say so instead of failing."""
    ignored = ([mode_arg] if mode_arg else []) + list(unknown)
    for arg in ignored:
        Logger.warn(f"ignoring argument '{arg}', relocation mode is {mode.value}")


def _validate_parsed_arguments(args) -> Tuple[str, str]:
    """Validate source and destination paths."""
    try:
        validated_source = SecurityValidator.validate_directory_path(
            args.source, "source"
        )
        validated_destination = SecurityValidator.validate_directory_path(
            args.destination, "destination"
        )
        SecurityValidator.validate_destination(
            validated_source, validated_destination
        )

        Logger.security_event(
            "CONFIG_VALIDATION", "successfully validated source and destination"
        )

        return validated_source, validated_destination

    except ValueError as e:
        Logger.security_event(
            "CONFIG_VALIDATION_FAILED", f"configuration validation failed: {e}"
        )
        Logger.error(f"configuration validation error: {e}")
        sys.exit(EXIT_MISSING_ARGUMENTS)


def parse_arguments(argv: Optional[Sequence[str]] = None) -> Config:
    """Parse command line arguments and return configuration object."""
    parser = _create_argument_parser()
    _add_path_arguments(parser)
    _add_behavior_arguments(parser)

    args, unknown = parser.parse_known_args(argv)

    mode = TransferMode.COPY if args.copy else TransferMode.MOVE
    _warn_ignored_arguments(args.mode_arg, unknown, mode)

    validated_source, validated_destination = _validate_parsed_arguments(args)

    return Config(
        paths=PathConfig(
            source=validated_source,
            destination=validated_destination,
        ),
        behavior=BehaviorConfig(
            mode=mode,
            dry_run=args.dry_run,
            keep_going=args.keep_going,
        ),
    )
