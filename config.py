#!/usr/bin/env python3
"""Configuration dataclasses for git-relocate."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TransferMode(Enum):
    """What happens to a source repository once it has been copied."""
    MOVE = "move"
    COPY = "copy"


@dataclass
class PathConfig:
    """Source root to scan and destination root to relocate into."""
    source: str
    destination: str


@dataclass
class BehaviorConfig:
    """Relocation behavior configuration."""
    mode: TransferMode = TransferMode.MOVE
    dry_run: bool = False
    keep_going: bool = False

    @property
    def copy_only(self) -> bool:
        return self.mode == TransferMode.COPY


@dataclass
class Config:
    """Main configuration for a relocation run."""
    paths: PathConfig
    behavior: BehaviorConfig
