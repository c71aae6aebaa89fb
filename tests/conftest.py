from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_path() -> None:
    """Guarantee the repository root is discoverable for absolute imports."""

    root = Path(__file__).resolve().parent.parent
    root_str = str(root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


_ensure_project_root_on_path()


@pytest.fixture(autouse=True)
def _release_env(monkeypatch: pytest.MonkeyPatch):
    """Keep tests independent of the developer's release environment."""

    for name in ("SWC4J_PROJECT_ROOT", "SWC4J_LOG_FILE", "SWC4J_LOG_DIR", "SWC4J_TOOLS_VERSION"):
        monkeypatch.delenv(name, raising=False)

    from app.config import reset_release_config_cache
    from shared import logging_config

    reset_release_config_cache()
    logging_config._reset_for_tests()
    yield
    logging_config._reset_for_tests()
    reset_release_config_cache()
