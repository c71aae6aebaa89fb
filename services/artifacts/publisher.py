"""Copy a freshly built native library into the resource tree."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from services.artifacts.models import ResolvedArtifact, SourceArtifactNotFoundError
from services.artifacts.resolver import DEFAULT_BUILD_DIR, resolve
from services.artifacts.targets import Architecture, OperatingSystem

DEFAULT_RESOURCES_DIR = Path("src") / "main" / "resources"

_LOGGER = logging.getLogger(__name__)

__all__ = ["DEFAULT_RESOURCES_DIR", "find_source_artifact", "publish_artifact"]


def find_source_artifact(artifact: ResolvedArtifact) -> Path:
    """Return the first existing library file among the candidate directories."""

    for search_path in artifact.search_paths:
        candidate = search_path / artifact.source_file_name
        if candidate.is_file():
            return candidate
        _LOGGER.debug("%s is not found", candidate)
    raise SourceArtifactNotFoundError(artifact.source_file_name, artifact.search_paths)


def publish_artifact(
    os_name: OperatingSystem | str,
    arch: Architecture | str,
    debug: bool,
    version: str,
    *,
    root: Path,
    build_dir: Path = DEFAULT_BUILD_DIR,
    resources_dir: Path = DEFAULT_RESOURCES_DIR,
) -> Path:
    """Publish the compiled library for one target and return the written path.

    An existing file at the destination is replaced unconditionally.
    """

    artifact = resolve(os_name, arch, debug, version, root=root, build_dir=build_dir)
    source_path = find_source_artifact(artifact)

    destination_dir = root / resources_dir
    destination_dir.mkdir(parents=True, exist_ok=True)
    destination_path = destination_dir / artifact.destination_file_name
    if destination_path.exists():
        _LOGGER.debug("Overwriting %s", destination_path)

    shutil.copy2(source_path, destination_path)
    _LOGGER.info("Copied %s to %s", source_path, destination_path)
    return destination_path
