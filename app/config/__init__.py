"""Release configuration loaded from JSON resources."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Mapping

from services.versioning.versions import is_three_part_version

_CONFIG_RESOURCE = "release.json"
_PROJECT_ROOT_ENV = "SWC4J_PROJECT_ROOT"
_DEFAULT_RELEASE_VERSION = "1.6.0"
_DEFAULT_PRERELEASE_VERSION = "1.6.0"
_DEFAULT_NATIVE_BUILD_DIR = Path("rust") / "target"
_DEFAULT_RESOURCES_DIR = Path("src") / "main" / "resources"
_RELEASE_CONFIG_CACHE: ReleaseConfig | None = None


@dataclass(frozen=True)
class VersionsConfig:
    """The two version literals kept in sync across the repository."""

    release: str
    prerelease: str


@dataclass(frozen=True)
class PathsConfig:
    """Build output and resource locations relative to the project root."""

    native_build_dir: Path
    resources_dir: Path


@dataclass(frozen=True)
class ReleaseConfig:
    """Structured configuration values for the release scripts."""

    versions: VersionsConfig
    paths: PathsConfig
    project_root: Path | None = None

    def resolve_project_root(self) -> Path:
        """Return the root every relative path is resolved against.

        ``SWC4J_PROJECT_ROOT`` wins over the configured root, which wins over
        the current working directory.
        """

        env_root = os.environ.get(_PROJECT_ROOT_ENV)
        if env_root:
            return Path(env_root).expanduser().resolve()
        if self.project_root is not None:
            return self.project_root
        return Path.cwd()


def get_release_config() -> ReleaseConfig:
    """Return the cached release configuration."""

    global _RELEASE_CONFIG_CACHE
    if _RELEASE_CONFIG_CACHE is None:
        _RELEASE_CONFIG_CACHE = load_release_config()
    return _RELEASE_CONFIG_CACHE


def reset_release_config_cache() -> None:
    """Reset the cached configuration for subsequent reloads."""

    global _RELEASE_CONFIG_CACHE
    _RELEASE_CONFIG_CACHE = None


def load_release_config(path: str | Path | None = None) -> ReleaseConfig:
    """Load configuration from ``path`` or the bundled JSON resource."""

    if path is not None:
        config_path = Path(path).expanduser()
        data = _load_json_from_path(config_path)
        base_dir = config_path.resolve().parent
    else:
        data = _load_default_config_data()
        base_dir = Path(__file__).resolve().parent
    versions = _parse_versions_section(data.get("versions"))
    paths = _parse_paths_section(data.get("paths"))
    project_root = _parse_project_root(data.get("project_root"), base_dir)
    return ReleaseConfig(versions=versions, paths=paths, project_root=project_root)


def _load_json_from_path(path: Path) -> Mapping[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError:
        return {}
    return _parse_json(raw)


def _load_default_config_data() -> Mapping[str, Any]:
    try:
        resource = resources.files(__package__).joinpath(_CONFIG_RESOURCE)
        raw = resource.read_text(encoding="utf-8")
    except (FileNotFoundError, OSError):
        return {}
    return _parse_json(raw)


def _parse_json(raw: str) -> Mapping[str, Any]:
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        return {}
    if isinstance(parsed, Mapping):
        return parsed
    return {}


def _parse_versions_section(section: Any) -> VersionsConfig:
    if not isinstance(section, Mapping):
        return VersionsConfig(release=_DEFAULT_RELEASE_VERSION, prerelease=_DEFAULT_PRERELEASE_VERSION)
    release = _coerce_version(section.get("release"), default=_DEFAULT_RELEASE_VERSION)
    prerelease = _coerce_version(section.get("prerelease"), default=_DEFAULT_PRERELEASE_VERSION)
    return VersionsConfig(release=release, prerelease=prerelease)


def _parse_paths_section(section: Any) -> PathsConfig:
    if not isinstance(section, Mapping):
        return PathsConfig(native_build_dir=_DEFAULT_NATIVE_BUILD_DIR, resources_dir=_DEFAULT_RESOURCES_DIR)
    build_dir = _coerce_relative_path(section.get("native_build_dir"), default=_DEFAULT_NATIVE_BUILD_DIR)
    resources_dir = _coerce_relative_path(section.get("resources_dir"), default=_DEFAULT_RESOURCES_DIR)
    return PathsConfig(native_build_dir=build_dir, resources_dir=resources_dir)


def _parse_project_root(value: Any, base_dir: Path) -> Path | None:
    if not isinstance(value, str) or not value.strip():
        return None
    root = Path(value.strip()).expanduser()
    if not root.is_absolute():
        root = base_dir / root
    return root.resolve()


def _coerce_version(value: Any, *, default: str) -> str:
    if isinstance(value, str) and is_three_part_version(value.strip()):
        return value.strip()
    return default


def _coerce_relative_path(value: Any, *, default: Path) -> Path:
    if not isinstance(value, str) or not value.strip():
        return default
    candidate = Path(value.strip())
    if candidate.is_absolute():
        return default
    return candidate


__all__ = [
    "PathsConfig",
    "ReleaseConfig",
    "VersionsConfig",
    "get_release_config",
    "load_release_config",
    "reset_release_config_cache",
]
