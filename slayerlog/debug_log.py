"""Diagnostic logging for the viewer itself, written next to the program."""

from __future__ import annotations

import configparser
import enum
import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

LOGGER_NAME = "slayerlog"
CONFIG_FILE_NAME = "logging.ini"
LOG_FILE_NAME = "slayerlog_debug.log"
CONFIG_SECTION = "logger"

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(filename)s:%(lineno)d %(funcName)s %(message)s"

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")


class Severity(enum.Enum):
    """Message severities, ordered from most to least verbose."""

    TRACE = TRACE_LEVEL
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    @property
    def level(self) -> int:
        """The matching level of the standard logging module."""
        return self.value


@dataclass(frozen=True)
class RuntimePaths:
    """Where the program lives, and where its logging config and log file are."""

    executable_dir: Path
    config_file: Path
    log_file: Path


def executable_directory(argv0: Optional[str] = None) -> Path:
    """The directory holding the program named by ``argv0``.

    Falls back to the current directory when ``argv0`` has no directory part.
    """
    try:
        if argv0 and os.path.dirname(argv0):
            try:
                return Path(os.path.dirname(os.path.abspath(argv0)))
            except OSError:
                return Path(os.path.dirname(argv0))
        return Path.cwd()
    except OSError:
        return Path(".")


def _paths_for(directory: Path) -> RuntimePaths:
    return RuntimePaths(
        executable_dir=directory,
        config_file=directory / CONFIG_FILE_NAME,
        log_file=directory / LOG_FILE_NAME,
    )


def _logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _read_config(config_file: Path) -> Optional[tuple[int, str]]:
    """The level and line format named by the config file, or None if unusable."""
    parser = configparser.ConfigParser(interpolation=None)
    try:
        if not parser.read(config_file, encoding="utf-8"):
            return None
    except (configparser.Error, OSError, UnicodeDecodeError):
        return None
    if not parser.has_section(CONFIG_SECTION):
        return None

    section = parser[CONFIG_SECTION]
    level_name = section.get("level", "INFO").strip().upper()
    try:
        level = Severity[level_name].level
    except KeyError:
        return None
    line_format = section.get("format", _DEFAULT_FORMAT) or _DEFAULT_FORMAT
    return level, line_format


def configure_logging(paths: RuntimePaths) -> bool:
    """Configure the diagnostic logger from ``paths.config_file``.

    The config holds a ``[logger]`` section with ``level`` (a Severity name)
    and ``format`` (a logging format string); messages go to
    ``paths.log_file``. If the file is missing or unusable, a basic console
    configuration is applied instead. Returns True when the config file was used.
    """
    settings = _read_config(paths.config_file) if paths.config_file.is_file() else None
    if settings is not None:
        level, line_format = settings
        try:
            handler: logging.Handler = logging.FileHandler(paths.log_file, "a", "utf-8")
        except OSError:
            handler = None  # type: ignore[assignment]
        if handler is not None:
            handler.setFormatter(logging.Formatter(line_format))
            logger = _logger()
            for old_handler in list(logger.handlers):
                logger.removeHandler(old_handler)
                old_handler.close()
            logger.addHandler(handler)
            logger.setLevel(level)
            logger.propagate = False
            return True
    logging.basicConfig()
    return False


_init_lock = threading.Lock()
_runtime_paths: Optional[RuntimePaths] = None


def initialize(argv0: Optional[str] = None) -> RuntimePaths:
    """Set up diagnostic logging once per process and return its paths.

    Later calls return the paths from the first call, whatever ``argv0`` is.
    """
    global _runtime_paths
    with _init_lock:
        if _runtime_paths is None:
            paths = _paths_for(executable_directory(argv0))
            try:
                paths.executable_dir.mkdir(parents=True, exist_ok=True)
            except OSError:
                pass
            _runtime_paths = paths
            configure_logging(paths)
        return _runtime_paths


def log_file_path() -> Path:
    """The diagnostic log file, initializing logging if needed."""
    return initialize().log_file


def write(severity: Severity, message: str) -> None:
    """Log ``message`` at ``severity``, attributed to the caller."""
    initialize()
    _logger().log(severity.level, message, stacklevel=2)