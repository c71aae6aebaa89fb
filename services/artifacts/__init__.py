"""Public API for the native artifact publishing package."""

from __future__ import annotations

from services.artifacts.models import (
    ArtifactError,
    ResolvedArtifact,
    SourceArtifactNotFoundError,
    UnsupportedArchitectureError,
    UnsupportedPlatformError,
)
from services.artifacts.publisher import DEFAULT_RESOURCES_DIR, find_source_artifact, publish_artifact
from services.artifacts.resolver import DEFAULT_BUILD_DIR, destination_file_name, resolve
from services.artifacts.targets import (
    TARGET_MATRIX,
    Architecture,
    OperatingSystem,
    PlatformTarget,
    detect_host_target,
    lookup_target,
    supported_targets,
)

__all__ = [
    "DEFAULT_BUILD_DIR",
    "DEFAULT_RESOURCES_DIR",
    "TARGET_MATRIX",
    "Architecture",
    "ArtifactError",
    "OperatingSystem",
    "PlatformTarget",
    "ResolvedArtifact",
    "SourceArtifactNotFoundError",
    "UnsupportedArchitectureError",
    "UnsupportedPlatformError",
    "destination_file_name",
    "detect_host_target",
    "find_source_artifact",
    "lookup_target",
    "publish_artifact",
    "resolve",
    "supported_targets",
]
