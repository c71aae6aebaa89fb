"""Central logging configuration for the release scripts.

Console output goes to stderr with the level name coloured when the stream
is a terminal, so failures stand out in CI logs and local shells alike.

Two environment variables enable an additional log file:

``SWC4J_LOG_FILE``
    Absolute path to the log file that should be created.

``SWC4J_LOG_DIR``
    Directory where ``release.log`` will be created.  Ignored when
    ``SWC4J_LOG_FILE`` is present.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import TextIO

_LOG_FILE_ENV = "SWC4J_LOG_FILE"
_LOG_DIR_ENV = "SWC4J_LOG_DIR"
_DEFAULT_LOGNAME = "release.log"
_HANDLER_TAG = "_swc4j_logging_handler"
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_CONFIGURED = False
_LOG_PATH: Path | None = None
_CONSOLE_HANDLER: logging.Handler | None = None


class LogVerbosity(str, Enum):
    """Verbosity levels supported by the console output."""

    DISABLED = "disabled"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    VERBOSE = "verbose"


_VERBOSITY_LEVELS: dict[LogVerbosity, int] = {
    LogVerbosity.DISABLED: logging.CRITICAL + 1,
    LogVerbosity.ERROR: logging.ERROR,
    LogVerbosity.WARNING: logging.WARNING,
    LogVerbosity.INFO: logging.INFO,
    LogVerbosity.VERBOSE: logging.DEBUG,
}

_DEFAULT_VERBOSITY = LogVerbosity.INFO
_CURRENT_VERBOSITY = _DEFAULT_VERBOSITY

_LEVEL_COLORS: dict[int, str] = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;31m",
}
_RESET = "\033[0m"


class _LevelColorFormatter(logging.Formatter):
    def __init__(self, use_color: bool) -> None:
        super().__init__(_FORMAT, datefmt=_DATE_FORMAT)
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        if not self._use_color:
            return formatted
        color = _LEVEL_COLORS.get(record.levelno)
        if color is None:
            return formatted
        return formatted.replace(record.levelname, f"{color}{record.levelname}{_RESET}", 1)


def ensure_release_logging(stream: TextIO | None = None) -> Path | None:
    """Configure the root logger for a release script run.

    The first invocation installs a console handler and, when requested via
    the environment, a DEBUG file handler.  Subsequent calls are no-ops.

    Returns
    -------
    Path | None
        Location of the log file, or ``None`` when only the console is used.
    """

    global _CONFIGURED, _LOG_PATH, _CONSOLE_HANDLER

    if _CONFIGURED:
        return _LOG_PATH

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    console_stream = stream if stream is not None else sys.stderr
    console_handler = logging.StreamHandler(console_stream)
    console_handler.setLevel(_VERBOSITY_LEVELS[_CURRENT_VERBOSITY])
    console_handler.setFormatter(_LevelColorFormatter(_is_tty(console_stream)))
    setattr(console_handler, _HANDLER_TAG, True)
    root.addHandler(console_handler)
    _CONSOLE_HANDLER = console_handler

    log_path = _resolve_log_path()
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        setattr(file_handler, _HANDLER_TAG, True)
        root.addHandler(file_handler)
        logging.getLogger(__name__).debug("Writing release logs to %s", log_path)

    _CONFIGURED = True
    _LOG_PATH = log_path
    return log_path


def set_console_verbosity(verbosity: LogVerbosity | str) -> None:
    """Adjust the minimum severity written to the console."""

    global _CURRENT_VERBOSITY

    if isinstance(verbosity, str) and not isinstance(verbosity, LogVerbosity):
        try:
            verbosity = LogVerbosity(verbosity.lower())
        except ValueError as exc:
            raise ValueError(f"Unsupported log verbosity: {verbosity}") from exc

    _CURRENT_VERBOSITY = verbosity
    if _CONSOLE_HANDLER is not None:
        _CONSOLE_HANDLER.setLevel(_VERBOSITY_LEVELS[verbosity])


def get_console_verbosity() -> LogVerbosity:
    return _CURRENT_VERBOSITY


def _resolve_log_path() -> Path | None:
    env_file = os.environ.get(_LOG_FILE_ENV)
    if env_file:
        return Path(env_file).expanduser()

    env_dir = os.environ.get(_LOG_DIR_ENV)
    if env_dir:
        return Path(env_dir).expanduser() / _DEFAULT_LOGNAME
    return None


def _is_tty(stream: TextIO) -> bool:
    is_tty = getattr(stream, "isatty", None)
    if not callable(is_tty):
        return False
    try:
        return bool(is_tty())
    except ValueError:
        return False


def _reset_for_tests() -> None:
    """Remove handlers installed by :func:`ensure_release_logging`."""

    global _CONFIGURED, _LOG_PATH, _CONSOLE_HANDLER, _CURRENT_VERBOSITY

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root.removeHandler(handler)
            handler.close()

    _CONFIGURED = False
    _LOG_PATH = None
    _CONSOLE_HANDLER = None
    _CURRENT_VERBOSITY = _DEFAULT_VERBOSITY


__all__ = [
    "LogVerbosity",
    "ensure_release_logging",
    "get_console_verbosity",
    "set_console_verbosity",
]
