"""Pure computation of build output locations and published file names."""

from __future__ import annotations

from pathlib import Path

from services.artifacts.models import ResolvedArtifact
from services.artifacts.targets import Architecture, OperatingSystem, lookup_target, parse_os

DEFAULT_BUILD_DIR = Path("rust") / "target"

__all__ = ["DEFAULT_BUILD_DIR", "build_profile", "destination_file_name", "resolve"]


def build_profile(debug: bool) -> str:
    return "debug" if debug else "release"


def destination_file_name(
    os_name: OperatingSystem | str,
    arch: Architecture | str,
    version: str,
) -> str:
    """Return ``<base>-<os>-<arch>.v.<version><ext>`` for the given target."""

    entry, _ = lookup_target(os_name, arch)
    operating_system = parse_os(os_name)
    arch_name = arch.value if isinstance(arch, Architecture) else arch.strip().lower()
    naming = entry.naming
    return f"{naming.target_base_name}-{operating_system.value}-{arch_name}.v.{version}{naming.target_extension}"


def resolve(
    os_name: OperatingSystem | str,
    arch: Architecture | str,
    debug: bool,
    version: str,
    *,
    root: Path,
    build_dir: Path = DEFAULT_BUILD_DIR,
) -> ResolvedArtifact:
    """Compute candidate source directories and the versioned destination name.

    The triple-specific directory comes first; the plain profile directory is
    the fallback used by local single-target builds.  No filesystem access
    happens here.
    """

    entry, arch_target = lookup_target(os_name, arch)
    profile = build_profile(debug)
    target_root = root / build_dir
    search_paths = (
        target_root / arch_target.build_triple / profile,
        target_root / profile,
    )
    return ResolvedArtifact(
        search_paths=search_paths,
        source_file_name=entry.naming.source_file_name,
        destination_file_name=destination_file_name(os_name, arch, version),
        build_triple=arch_target.build_triple,
        android_abi=arch_target.android_abi,
    )
