"""
Level-routed, multi-file line logger.

A LineLogger owns up to three append-only sinks under ``storage/logs``:

    app.log    INFO and above
    debug.log  everything, only when debug is enabled
    error.log  ERROR and above

Construct one per process (``get_logger()`` does this lazily) and pass it to
whatever needs to log.
"""

import atexit
import logging
import os
import threading
from typing import Any, Dict, Mapping, Optional, Union

from ...utils.env import env_bool, project_root
from ..exceptions import LogInitError
from .levels import APP_SINK, DEBUG_SINK, ERROR_SINK, Level
from .sinks import FileSink
from .utils import format_line, utc_timestamp


LOG_DIR_RELATIVE = os.path.join("storage", "logs")
LOG_FILES = {
    APP_SINK: "app.log",
    DEBUG_SINK: "debug.log",
    ERROR_SINK: "error.log",
}
# Порядок открытия и записи: debug, app, error
SINK_ORDER = (DEBUG_SINK, APP_SINK, ERROR_SINK)
DIR_MODE = 0o755

diag_logger = logging.getLogger("frontline.linelog")


class LineLogger:
    """
    Process-wide line logger.

    Only the context-key check can fail a write call; lock contention and I/O
    errors on a sink drop that sink's line and nothing else.
    """

    def __init__(self, base_dir: Union[str, os.PathLike], debug_enabled: bool = False):
        self._debug_enabled = bool(debug_enabled)
        self.base_dir = os.path.abspath(os.fspath(base_dir))
        self._sinks: Dict[str, FileSink] = {}

        required = [APP_SINK, ERROR_SINK]
        if self._debug_enabled:
            required.append(DEBUG_SINK)

        paths = {
            name: os.path.join(self.base_dir, LOG_DIR_RELATIVE, LOG_FILES[name])
            for name in required
        }
        diag_logger.debug("Initializing line logger: debug_enabled=%s paths=%s", self._debug_enabled, paths)

        for directory in sorted({os.path.dirname(path) for path in paths.values()}):
            try:
                os.makedirs(directory, mode=DIR_MODE, exist_ok=True)
            except OSError as e:
                diag_logger.error("Unable to create log directory %s: %s", directory, e)
                raise LogInitError(f"Unable to create log directory: {directory}", path=directory, original_exception=e) from e

        for name in SINK_ORDER:
            if name not in paths:
                continue
            try:
                self._sinks[name] = FileSink(name, paths[name])
            except OSError as e:
                diag_logger.error("Unable to open %s log file %s: %s", name, paths[name], e)
                self.close()
                raise LogInitError(f"Unable to open {name} log file: {paths[name]}", path=paths[name], original_exception=e) from e

    @classmethod
    def from_env(cls, base_dir: Optional[Union[str, os.PathLike]] = None) -> "LineLogger":
        """Build a logger from APP_DEBUG and APP_BASE_DIR."""
        if base_dir is None:
            base_dir = os.environ.get("APP_BASE_DIR") or project_root()
        return cls(base_dir, debug_enabled=env_bool("APP_DEBUG"))

    @property
    def debug_enabled(self) -> bool:
        return self._debug_enabled

    def is_debug_enabled(self) -> bool:
        """Check if debug logging is enabled."""
        return self._debug_enabled

    @property
    def paths(self) -> Dict[str, str]:
        return {name: sink.path for name, sink in self._sinks.items()}

    def write(self, level: Union[Level, str], message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        level = Level.parse(level)
        if level is Level.DEBUG and not self._debug_enabled:
            return

        line = format_line(utc_timestamp(), level, message, context)

        for name in level.sinks:
            sink = self._sinks.get(name)
            if sink is not None:
                sink.write(line)

    def debug(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        if not self._debug_enabled:
            return
        self.write(Level.DEBUG, message, context)

    def info(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        self.write(Level.INFO, message, context)

    def notice(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        self.write(Level.NOTICE, message, context)

    def warn(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        self.write(Level.WARN, message, context)

    warning = warn

    def error(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        self.write(Level.ERROR, message, context)

    def critical(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        self.write(Level.CRITICAL, message, context)

    def alert(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        self.write(Level.ALERT, message, context)

    def emergency(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        self.write(Level.EMERGENCY, message, context)

    def close(self) -> None:
        """Flush and close every open sink. Safe to call more than once."""
        for sink in self._sinks.values():
            sink.close()

    def __enter__(self) -> "LineLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


_logger_instance: Optional[LineLogger] = None
_instance_lock = threading.Lock()


def get_logger() -> LineLogger:
    """Получить единый экземпляр логгера (создаётся при первом вызове)."""
    global _logger_instance
    if _logger_instance is None:
        with _instance_lock:
            if _logger_instance is None:
                instance = LineLogger.from_env()
                atexit.register(instance.close)
                _logger_instance = instance
    return _logger_instance


def reset_logger() -> None:
    """Close and forget the process-wide instance."""
    global _logger_instance
    with _instance_lock:
        if _logger_instance is not None:
            _logger_instance.close()
            atexit.unregister(_logger_instance.close)
            _logger_instance = None
