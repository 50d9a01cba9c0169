#!/usr/bin/env python3
"""Main orchestrator for relocating the git repositories found under a root."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

from config import Config
from logging_utils import Logger
from mover import move_repository
from repo_detector import inspect_directory
from utils import resolve_entry_name

# Exit codes
EXIT_SUCCESS = 0
EXIT_EXECUTION_ERROR = 1

# A .gitignore that is not UTF-8 fails the same way as an unreadable one
RELOCATION_ERRORS = (OSError, UnicodeDecodeError)


@dataclass
class RelocationReport:
    """Outcome of one scan over the source root."""
    relocated: List[Tuple[Path, Path]] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    failed: List[Tuple[Path, Exception]] = field(default_factory=list)


class RelocationOrchestrator:
    def __init__(self, cfg: Config) -> None:
        self.cfg = cfg
        self.source_root = Path(cfg.paths.source)
        self.destination_root = Path(cfg.paths.destination)

    def run(self) -> int:
        try:
            report = self.relocate_all()
        except RELOCATION_ERRORS as e:
            Logger.error(f"relocation aborted: {e}")
            return EXIT_EXECUTION_ERROR
        except Exception as e:
            Logger.error(f"unexpected error: {e}")
            return EXIT_EXECUTION_ERROR

        self._log_summary(report)
        if report.failed:
            return EXIT_EXECUTION_ERROR
        return EXIT_SUCCESS

    def relocate_all(self) -> RelocationReport:
        """Relocate every git repository directly under the source root.

        A missing or non-directory root is reported and treated as a no-op.
        Unless ``keep_going`` is set, the first failing entry raises and the
        remaining entries are left unprocessed.
        """
        report = RelocationReport()
        root = self.source_root

        if not root.is_dir():
            Logger.info(f"{root} is not a dir or does not exist")
            return report

        entries = sorted(root.iterdir())
        total = len(entries)
        Logger.info(f"scanning {total} entries under: {root}")

        for idx, entry in enumerate(entries, start=1):
            try:
                self._process_entry(entry, idx, total, report)
            except RELOCATION_ERRORS as e:
                if not self.cfg.behavior.keep_going:
                    raise
                Logger.error(f"[{idx}/{total}] failed: {entry}: {e}")
                report.failed.append((entry, e))

        return report

    def _process_entry(
        self, entry: Path, idx: int, total: int, report: RelocationReport
    ) -> None:
        # The entry may disappear between listing and resolution
        try:
            path_name = resolve_entry_name(entry)
        except FileNotFoundError:
            Logger.warn(f"{entry} vanished or is a dangling link, skipping")
            report.skipped.append(entry)
            return
        except (OSError, ValueError) as e:
            Logger.warn(f"{entry} cannot be resolved ({e}), skipping")
            report.skipped.append(entry)
            return

        if not entry.is_dir():
            Logger.info(f"{entry} is not a dir, skipping")
            report.skipped.append(entry)
            return

        descriptor = inspect_directory(entry)
        if not descriptor.is_git_repo:
            Logger.info(f"{entry} is not a git dir!")
            report.skipped.append(entry)
            return

        destination = self.destination_root / path_name
        behavior = self.cfg.behavior
        verb = behavior.mode.value

        if behavior.dry_run:
            Logger.info(f"[{idx}/{total}] would {verb}: {entry} -> {destination}")
        else:
            Logger.info(f"[{idx}/{total}] {verb}: {entry} -> {destination}")
            move_repository(
                entry,
                destination,
                descriptor.ignore_list,
                copy_only=behavior.copy_only,
            )
        report.relocated.append((entry, destination))

    def _log_summary(self, report: RelocationReport) -> None:
        prefix = "dry-run: would relocate" if self.cfg.behavior.dry_run else "relocated"
        message = (
            f"{prefix} {len(report.relocated)} repositories, "
            f"skipped {len(report.skipped)}, failed {len(report.failed)}"
        )
        if report.failed:
            Logger.error(message)
        else:
            Logger.success(message)
