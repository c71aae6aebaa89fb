"""Data models used by the version synchronization engine."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class VersionPatternEntry:
    """One version-bearing file and the patterns locating its version tokens.

    Every pattern must expose the version text through a group named
    ``version``.
    """

    file_path: Path
    patterns: Tuple[re.Pattern[str], ...]
    uses_prerelease_version: bool = False


@dataclass(frozen=True, order=True)
class ReplacementSpan:
    """Half-open ``[start, end)`` character range of one stale version token."""

    start: int
    end: int


@dataclass
class FileSyncResult:
    """Outcome of synchronizing a single registry entry."""

    file_path: Path
    rewritten: int = 0
    ignored: int = 0
    written: bool = False
    error: VersionSyncError | None = None


@dataclass
class SyncReport:
    """Per-file outcomes of one synchronization run, in registry order."""

    results: list[FileSyncResult] = field(default_factory=list)

    @property
    def files_written(self) -> int:
        return sum(1 for result in self.results if result.written)

    @property
    def errors(self) -> list[FileSyncResult]:
        return [result for result in self.results if result.error is not None]

    def is_ok(self) -> bool:
        return not self.errors


class VersionSyncError(RuntimeError):
    """Raised when a version-bearing file cannot be synchronized."""


class DestinationFileNotFoundError(VersionSyncError):
    """Raised when a registered version-bearing file does not exist."""

    def __init__(self, file_path: Path) -> None:
        super().__init__(f"{file_path} is not found")
        self.file_path = file_path


class OverlappingSpansError(VersionSyncError):
    """Raised when two patterns of one file match intersecting text."""

    def __init__(self, first: ReplacementSpan, second: ReplacementSpan) -> None:
        super().__init__(
            f"Version spans [{first.start}, {first.end}) and [{second.start}, {second.end}) overlap"
        )
        self.first = first
        self.second = second


class InvalidVersionError(VersionSyncError):
    """Raised for a version literal that is not a dotted three-part number."""
