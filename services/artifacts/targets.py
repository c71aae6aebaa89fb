"""Static matrix of supported operating systems, architectures and triples."""

from __future__ import annotations

import os
import platform
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Mapping

from services.artifacts.models import UnsupportedArchitectureError, UnsupportedPlatformError


class OperatingSystem(str, Enum):
    WINDOWS = "windows"
    LINUX = "linux"
    ANDROID = "android"
    MACOS = "macos"


class Architecture(str, Enum):
    X86 = "x86"
    X86_64 = "x86_64"
    ARM = "arm"
    ARM64 = "arm64"


@dataclass(frozen=True)
class ArchTarget:
    """Compiler target for one architecture of an operating system."""

    build_triple: str
    android_abi: str | None = None


@dataclass(frozen=True)
class NamingConvention:
    """Library file naming rules of one operating system.

    The source names describe what the native build emits, the target names
    what gets published into the resource tree.  Windows emits ``swc4j.dll``
    while every other platform already adds the ``lib`` prefix.
    """

    source_base_name: str
    target_base_name: str
    source_extension: str
    target_extension: str

    @property
    def source_file_name(self) -> str:
        return f"{self.source_base_name}{self.source_extension}"


@dataclass(frozen=True)
class TargetEntry:
    naming: NamingConvention
    architectures: Mapping[Architecture, ArchTarget]


@dataclass(frozen=True)
class PlatformTarget:
    """One reachable ``(os, arch)`` pair and its compiler triple."""

    os: OperatingSystem
    arch: Architecture
    build_triple: str


LIBRARY_NAME = "swc4j"
_LIB_PREFIX = "lib"

TARGET_MATRIX: Mapping[OperatingSystem, TargetEntry] = {
    OperatingSystem.WINDOWS: TargetEntry(
        naming=NamingConvention(LIBRARY_NAME, _LIB_PREFIX + LIBRARY_NAME, ".dll", ".dll"),
        architectures={
            Architecture.X86_64: ArchTarget("x86_64-pc-windows-msvc"),
            Architecture.ARM64: ArchTarget("aarch64-pc-windows-msvc"),
        },
    ),
    OperatingSystem.LINUX: TargetEntry(
        naming=NamingConvention(_LIB_PREFIX + LIBRARY_NAME, _LIB_PREFIX + LIBRARY_NAME, ".so", ".so"),
        architectures={
            Architecture.X86_64: ArchTarget("x86_64-unknown-linux-gnu"),
            Architecture.ARM64: ArchTarget("aarch64-unknown-linux-gnu"),
        },
    ),
    OperatingSystem.ANDROID: TargetEntry(
        naming=NamingConvention(_LIB_PREFIX + LIBRARY_NAME, _LIB_PREFIX + LIBRARY_NAME, ".so", ".so"),
        architectures={
            Architecture.ARM: ArchTarget("armv7-linux-androideabi", android_abi="armeabi-v7a"),
            Architecture.ARM64: ArchTarget("aarch64-linux-android", android_abi="arm64-v8a"),
            Architecture.X86: ArchTarget("i686-linux-android", android_abi="x86"),
            Architecture.X86_64: ArchTarget("x86_64-linux-android", android_abi="x86_64"),
        },
    ),
    OperatingSystem.MACOS: TargetEntry(
        naming=NamingConvention(_LIB_PREFIX + LIBRARY_NAME, _LIB_PREFIX + LIBRARY_NAME, ".dylib", ".dylib"),
        architectures={
            Architecture.X86_64: ArchTarget("x86_64-apple-darwin"),
            Architecture.ARM64: ArchTarget("aarch64-apple-darwin"),
        },
    ),
}

_HOST_SYSTEMS = {
    "windows": OperatingSystem.WINDOWS,
    "linux": OperatingSystem.LINUX,
    "darwin": OperatingSystem.MACOS,
    "android": OperatingSystem.ANDROID,
}

_HOST_MACHINES = {
    "amd64": Architecture.X86_64,
    "x86_64": Architecture.X86_64,
    "x64": Architecture.X86_64,
    "i386": Architecture.X86,
    "i686": Architecture.X86,
    "x86": Architecture.X86,
    "arm64": Architecture.ARM64,
    "aarch64": Architecture.ARM64,
    "armv7l": Architecture.ARM,
    "armv8l": Architecture.ARM,
    "arm": Architecture.ARM,
}


def parse_os(value: OperatingSystem | str) -> OperatingSystem:
    if isinstance(value, OperatingSystem):
        return value
    try:
        return OperatingSystem(value.strip().lower())
    except ValueError as exc:
        raise UnsupportedPlatformError(value) from exc


def lookup_target(os_name: OperatingSystem | str, arch: Architecture | str) -> tuple[TargetEntry, ArchTarget]:
    """Return the matrix entry and architecture target for ``os_name``/``arch``."""

    operating_system = parse_os(os_name)
    entry = TARGET_MATRIX.get(operating_system)
    if entry is None:
        raise UnsupportedPlatformError(operating_system.value)

    try:
        architecture = arch if isinstance(arch, Architecture) else Architecture(arch.strip().lower())
    except ValueError as exc:
        raise UnsupportedArchitectureError(operating_system.value, str(arch)) from exc

    arch_target = entry.architectures.get(architecture)
    if arch_target is None:
        raise UnsupportedArchitectureError(operating_system.value, architecture.value)
    return entry, arch_target


def supported_targets() -> Iterator[PlatformTarget]:
    """Yield every reachable ``(os, arch)`` pair in matrix order."""

    for operating_system, entry in TARGET_MATRIX.items():
        for architecture, arch_target in entry.architectures.items():
            yield PlatformTarget(operating_system, architecture, arch_target.build_triple)


def _host_system() -> str:
    if sys.platform == "android" or "ANDROID_ROOT" in os.environ:
        return "android"
    return platform.system().lower()


def detect_host_target() -> PlatformTarget:
    """Map the running interpreter's platform onto the target matrix."""

    system = _host_system()
    operating_system = _HOST_SYSTEMS.get(system)
    if operating_system is None:
        raise UnsupportedPlatformError(system or "unknown")

    machine = platform.machine().lower()
    architecture = _HOST_MACHINES.get(machine)
    if architecture is None:
        raise UnsupportedArchitectureError(operating_system.value, machine or "unknown")

    _, arch_target = lookup_target(operating_system, architecture)
    return PlatformTarget(operating_system, architecture, arch_target.build_triple)


__all__ = [
    "Architecture",
    "ArchTarget",
    "LIBRARY_NAME",
    "NamingConvention",
    "OperatingSystem",
    "PlatformTarget",
    "TARGET_MATRIX",
    "TargetEntry",
    "detect_host_target",
    "lookup_target",
    "parse_os",
    "supported_targets",
]
