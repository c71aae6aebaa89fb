"""Synchronize the library version across every version-bearing file.

The release and pre-release versions come from the bundled release
configuration; edit ``app/config/release.json`` and rerun this script.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def ensure_project_root_on_sys_path() -> Path:
    """Ensure the project root is importable when the script runs standalone."""

    project_root = Path(__file__).resolve().parent.parent
    project_root_str = str(project_root)
    if project_root_str not in sys.path:
        sys.path.insert(0, project_root_str)
    return project_root


ensure_project_root_on_sys_path()

from app.config import get_release_config
from services.versioning import InvalidVersionError, synchronize, validate_versions
from shared.logging_config import LogVerbosity, ensure_release_logging, set_console_verbosity

_LOGGER = logging.getLogger("swc4j.change_version")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbosity",
        choices=[level.value for level in LogVerbosity],
        default=LogVerbosity.INFO.value,
        help="Minimum severity written to the console.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    ensure_release_logging()
    set_console_verbosity(args.verbosity)
    config = get_release_config()
    release, prerelease = config.versions.release, config.versions.prerelease
    try:
        validate_versions(release, prerelease)
    except InvalidVersionError as exc:
        _LOGGER.error("%s", exc)
        return 1

    _LOGGER.info("Synchronizing release %s and prerelease %s", release, prerelease)
    report = synchronize(release, prerelease, root=config.resolve_project_root())
    return 0 if report.is_ok() else 1


if __name__ == "__main__":
    raise SystemExit(main())
