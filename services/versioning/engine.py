"""Synchronize the library version across every registered file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from services.versioning.models import (
    DestinationFileNotFoundError,
    FileSyncResult,
    ReplacementSpan,
    SyncReport,
    VersionPatternEntry,
    VersionSyncError,
)
from services.versioning.registry import iter_registry
from services.versioning.splice import sort_spans, splice

_LOGGER = logging.getLogger(__name__)
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

__all__ = ["collect_spans", "synchronize", "synchronize_file"]


def collect_spans(
    content: str,
    entry: VersionPatternEntry,
    version: str,
    result: FileSyncResult | None = None,
) -> list[ReplacementSpan]:
    """Return the sorted spans of ``content`` whose version differs from ``version``.

    Matches already carrying ``version`` are counted as ignored on ``result``.
    """

    spans: list[ReplacementSpan] = []
    matched = False
    for pattern in entry.patterns:
        for match in pattern.finditer(content):
            matched = True
            current = match.group("version")
            if current == version:
                _LOGGER.info("Ignored %s [%s]", entry.file_path, current)
                if result is not None:
                    result.ignored += 1
                continue
            _LOGGER.info("%s: %s -> %s", entry.file_path, current, version)
            spans.append(ReplacementSpan(match.start("version"), match.end("version")))
    if not matched:
        _LOGGER.warning("No version found in %s", entry.file_path)
    return sort_spans(spans)


def synchronize_file(
    entry: VersionPatternEntry,
    root: Path,
    release_version: str,
    prerelease_version: str,
) -> FileSyncResult:
    """Rewrite the stale version tokens of a single registry entry.

    The file is only written when its content actually changes.  Bytes that
    are not valid UTF-8 are carried through unchanged as surrogate escapes.
    """

    file_path = root / entry.file_path
    result = FileSyncResult(file_path=file_path)
    if not file_path.is_file():
        raise DestinationFileNotFoundError(file_path)

    version = prerelease_version if entry.uses_prerelease_version else release_version
    content = file_path.read_bytes().decode(_ENCODING, _ERRORS)
    spans = collect_spans(content, entry, version, result)
    result.rewritten = len(spans)
    if not spans:
        return result

    updated = splice(content, spans, version)
    if updated != content:
        file_path.write_bytes(updated.encode(_ENCODING, _ERRORS))
        result.written = True
        _LOGGER.info("Updated %s (%d occurrence(s))", file_path, result.rewritten)
    return result


def synchronize(
    release_version: str,
    prerelease_version: str,
    *,
    root: Path,
    registry: Iterable[VersionPatternEntry] | None = None,
) -> SyncReport:
    """Apply :func:`synchronize_file` to every entry of ``registry`` in order.

    ``registry`` defaults to the built-in version registry.

    A failing entry is recorded on the report and the remaining entries are
    still processed.  Writes already made are never rolled back.
    """

    report = SyncReport()
    entries = iter_registry() if registry is None else registry
    for entry in entries:
        try:
            result = synchronize_file(entry, root, release_version, prerelease_version)
        except VersionSyncError as exc:
            _LOGGER.error("%s", exc)
            result = FileSyncResult(file_path=root / entry.file_path, error=exc)
        report.results.append(result)
    _LOGGER.info(
        "Synchronized %d file(s): %d written, %d failed",
        len(report.results),
        report.files_written,
        len(report.errors),
    )
    return report
