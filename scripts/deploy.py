"""Publish a compiled native library under its versioned resource name."""

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
from app.version import get_tool_version
from services.artifacts import (
    Architecture,
    ArtifactError,
    OperatingSystem,
    detect_host_target,
    publish_artifact,
    supported_targets,
)
from shared.logging_config import LogVerbosity, ensure_release_logging, set_console_verbosity

_LOGGER = logging.getLogger("swc4j.deploy")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "-a",
        "--arch",
        default=Architecture.X86_64.value,
        help=f"Target architecture ({', '.join(arch.value for arch in Architecture)}).",
    )
    parser.add_argument(
        "-o",
        "--os",
        dest="os_name",
        default=OperatingSystem.WINDOWS.value,
        help=f"Target operating system ({', '.join(os_name.value for os_name in OperatingSystem)}).",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Publish the debug build instead of the release build.",
    )
    parser.add_argument(
        "--host",
        action="store_true",
        help="Publish for the operating system and architecture of this machine.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print every supported target and exit.",
    )
    parser.add_argument(
        "--verbosity",
        choices=[level.value for level in LogVerbosity],
        default=LogVerbosity.INFO.value,
        help="Minimum severity written to the console.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {get_tool_version()}",
    )
    return parser.parse_args(argv)


def print_targets() -> None:
    for target in supported_targets():
        print(f"{target.os.value:<8} {target.arch.value:<7} {target.build_triple}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.list:
        print_targets()
        return 0

    ensure_release_logging()
    set_console_verbosity(args.verbosity)
    config = get_release_config()
    try:
        if args.host:
            host = detect_host_target()
            os_name, arch = host.os.value, host.arch.value
        else:
            os_name, arch = args.os_name, args.arch
        publish_artifact(
            os_name,
            arch,
            args.debug,
            config.versions.release,
            root=config.resolve_project_root(),
            build_dir=config.paths.native_build_dir,
            resources_dir=config.paths.resources_dir,
        )
    except ArtifactError as exc:
        _LOGGER.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
