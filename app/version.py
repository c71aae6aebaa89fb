"""Version reported by the release scripts' ``--version`` flag.

This is the version of the tooling, not the library version the scripts
publish or synchronize; those live in the release configuration.
"""

from __future__ import annotations

import os
import subprocess
from functools import lru_cache
from importlib import metadata, resources
from typing import Callable, Iterable

DISTRIBUTION_NAME = "swc4j-release-tools"
_FALLBACK_VERSION = "0.0.0-dev"
_VERSION_ENV = "SWC4J_TOOLS_VERSION"


def _from_env() -> str | None:
    return os.environ.get(_VERSION_ENV) or None


def _from_distribution() -> str | None:
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return None


def _from_version_file() -> str | None:
    try:
        text = resources.files(__package__).joinpath("VERSION").read_text(encoding="utf-8")
    except (OSError, ModuleNotFoundError):
        return None
    return text.strip() or None


def _from_git() -> str | None:
    try:
        output = subprocess.check_output(
            ["git", "describe", "--tags", "--dirty"],
            stderr=subprocess.DEVNULL,
            text=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return output.strip() or None


_RESOLVERS: tuple[Callable[[], str | None], ...] = (
    _from_env,
    _from_distribution,
    _from_version_file,
    _from_git,
)


def normalize_tag(raw_version: str) -> str:
    """Strip whitespace and one leading ``v`` from a tag-like version."""

    version = raw_version.strip()
    return version[1:] if version.startswith("v") else version


def first_version(resolvers: Iterable[Callable[[], str | None]]) -> str:
    for resolver in resolvers:
        version = resolver()
        if version:
            return normalize_tag(version)
    return _FALLBACK_VERSION


@lru_cache(maxsize=1)
def get_tool_version() -> str:
    """Return the tooling version.

    The order of precedence is the ``SWC4J_TOOLS_VERSION`` environment
    variable, the installed distribution metadata, the bundled ``VERSION``
    file and finally ``git describe``.
    """

    return first_version(_RESOLVERS)


__all__ = ["DISTRIBUTION_NAME", "first_version", "get_tool_version", "normalize_tag"]
