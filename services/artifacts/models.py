"""Data models used by the artifact publishing pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class ResolvedArtifact:
    """Where a native library is searched for and what it is published as."""

    search_paths: Tuple[Path, ...]
    source_file_name: str
    destination_file_name: str
    build_triple: str
    android_abi: str | None = None


class ArtifactError(RuntimeError):
    """Raised when a native library cannot be resolved or published."""


class UnsupportedPlatformError(ArtifactError):
    """Raised for an operating system missing from the target matrix."""

    def __init__(self, os_name: str) -> None:
        super().__init__(f"OS {os_name} is not supported")
        self.os_name = os_name


class UnsupportedArchitectureError(ArtifactError):
    """Raised for an architecture the operating system does not support."""

    def __init__(self, os_name: str, arch: str) -> None:
        super().__init__(f"Arch {arch} is not supported on {os_name}")
        self.os_name = os_name
        self.arch = arch


class SourceArtifactNotFoundError(ArtifactError):
    """Raised when no candidate build directory holds the compiled library."""

    def __init__(self, file_name: str, search_paths: Tuple[Path, ...]) -> None:
        searched = ", ".join(str(path) for path in search_paths)
        super().__init__(f"{file_name} is not found in: {searched}")
        self.file_name = file_name
        self.search_paths = search_paths
