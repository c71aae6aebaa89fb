"""Public API for the version synchronization package."""

from __future__ import annotations

from services.versioning.engine import collect_spans, synchronize, synchronize_file
from services.versioning.models import (
    DestinationFileNotFoundError,
    FileSyncResult,
    InvalidVersionError,
    OverlappingSpansError,
    ReplacementSpan,
    SyncReport,
    VersionPatternEntry,
    VersionSyncError,
)
from services.versioning.registry import VERSION_REGISTRY, iter_registry
from services.versioning.splice import sort_spans, splice
from services.versioning.versions import compare_versions, is_three_part_version, validate_versions

__all__ = [
    "VERSION_REGISTRY",
    "DestinationFileNotFoundError",
    "FileSyncResult",
    "InvalidVersionError",
    "OverlappingSpansError",
    "ReplacementSpan",
    "SyncReport",
    "VersionPatternEntry",
    "VersionSyncError",
    "collect_spans",
    "compare_versions",
    "is_three_part_version",
    "iter_registry",
    "sort_spans",
    "splice",
    "synchronize",
    "synchronize_file",
    "validate_versions",
]
