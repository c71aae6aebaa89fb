"""Helpers for validating and comparing the synchronized version literals."""

from __future__ import annotations

import re

from packaging.version import InvalidVersion, Version

from services.versioning.models import InvalidVersionError

THREE_PART_VERSION = re.compile(r"^\d+\.\d+\.\d+$")

__all__ = ["THREE_PART_VERSION", "compare_versions", "is_three_part_version", "validate_versions"]


def is_three_part_version(value: object) -> bool:
    return isinstance(value, str) and THREE_PART_VERSION.match(value) is not None


def compare_versions(current_version: str, candidate: str) -> int:
    """Compare ``candidate`` against ``current_version``.

    Returns ``1`` when ``candidate`` is newer, ``-1`` when it is older and ``0``
    when the versions are equivalent.
    """

    try:
        candidate_version = Version(candidate)
        current_version_parsed = Version(current_version)
    except InvalidVersion as exc:
        raise InvalidVersionError(str(exc)) from exc

    if candidate_version == current_version_parsed:
        return 0
    if candidate_version > current_version_parsed:
        return 1
    return -1


def validate_versions(release: str, prerelease: str) -> None:
    """Ensure both literals are three-part versions and ``prerelease`` is not older."""

    for label, value in (("release", release), ("prerelease", prerelease)):
        if not is_three_part_version(value):
            raise InvalidVersionError(f"The {label} version {value!r} is not in the form x.y.z")
    if compare_versions(release, prerelease) < 0:
        raise InvalidVersionError(
            f"The prerelease version {prerelease} is older than the release version {release}"
        )
