"""Ordered table of every file that embeds the library version.

Adding a new version-bearing file is a one-line addition to
``VERSION_REGISTRY``.  Each pattern captures the version through a group
named ``version``; patterns of the same file must match disjoint text.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, Tuple

from services.versioning.models import VersionPatternEntry

_VERSION = r"(?P<version>\d+\.\d+\.\d+)"


def _entry(file_path: str, *patterns: str, prerelease: bool = False, flags: int = 0) -> VersionPatternEntry:
    return VersionPatternEntry(
        file_path=Path(file_path),
        patterns=tuple(re.compile(pattern, flags) for pattern in patterns),
        uses_prerelease_version=prerelease,
    )


VERSION_REGISTRY: Tuple[VersionPatternEntry, ...] = (
    _entry(
        "README.md",
        rf'swc4j:{_VERSION}"',
        rf"<version>{_VERSION}</version>",
        rf"swc4j/{_VERSION}/",
    ),
    _entry("build.gradle.kts", rf'SWC4J = "{_VERSION}"'),
    _entry("android/build.gradle.kts", rf'SWC4J = "{_VERSION}-SNAPSHOT"', prerelease=True),
    _entry("docs/release_notes.md", rf"^## {_VERSION} \(unreleased\)", prerelease=True, flags=re.MULTILINE),
    _entry(
        "rust/Cargo.toml",
        rf'^\[package\](?:\r?\n(?!\[)[^\r\n]*)*?\r?\nversion = "{_VERSION}"',
        flags=re.MULTILINE,
    ),
    _entry("rust/Cargo.lock", rf'^name = "swc4j"\r?\nversion = "{_VERSION}"', flags=re.MULTILINE),
    _entry("rust/src/core.rs", rf"""const VERSION: &'static str = "{_VERSION}";"""),
    _entry(
        "src/main/java/com/caoccao/javet/swc4j/Swc4jLibLoader.java",
        rf'LIB_VERSION = "{_VERSION}";',
    ),
    _entry(
        "src/test/java/com/caoccao/javet/swc4j/TestSwc4j.java",
        rf'assertEquals\("{_VERSION}", swc4j\.getVersion\(\)\)',
    ),
)


def iter_registry(registry: Tuple[VersionPatternEntry, ...] = VERSION_REGISTRY) -> Iterator[VersionPatternEntry]:
    """Enumerate ``registry`` in its declared order."""

    yield from registry


__all__ = ["VERSION_REGISTRY", "iter_registry"]
