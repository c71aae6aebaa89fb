"""Run one of the release pipelines: ``publish`` a native library or ``sync`` versions."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable


def ensure_project_root_on_sys_path() -> Path:
    """Ensure the project root is importable when the script runs standalone."""

    project_root = Path(__file__).resolve().parent.parent
    project_root_str = str(project_root)
    if project_root_str not in sys.path:
        sys.path.insert(0, project_root_str)
    return project_root


ensure_project_root_on_sys_path()

from scripts import change_version, deploy

PIPELINES: dict[str, Callable[[list[str] | None], int]] = {
    "publish": deploy.main,
    "sync": change_version.main,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("pipeline", choices=sorted(PIPELINES), help="Pipeline to run.")
    parser.add_argument(
        "arguments",
        nargs=argparse.REMAINDER,
        help="Arguments forwarded to the selected pipeline.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    return PIPELINES[args.pipeline](list(args.arguments))


if __name__ == "__main__":
    raise SystemExit(main())
