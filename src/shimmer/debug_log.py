"""Debug logging for shimmer apps.

Captures both shimmer's own log calls and Python logging module records
into a ring buffer, and forwards them to Textual's devtools console.
"""

from __future__ import annotations

import logging
import os
import time
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from shimmer.constants import MAX_LOG_LINES, MAX_LOG_MESSAGE_LENGTH

if TYPE_CHECKING:
    from textual.app import App


class LogSource(Enum):
    """Source of the log entry."""

    SHIMMER = "SHIMMER"
    LOGGING = "LOGGING"


@dataclass(slots=True)
class LogEntry:
    """A captured log entry."""

    group: str  # Level name (DEBUG, INFO, WARNING, ERROR)
    message: str
    timestamp: float
    source: LogSource


log_buffer: deque[LogEntry] = deque(maxlen=MAX_LOG_LINES)


def is_debug_enabled() -> bool:
    """True when ``SHIMMER_DEBUG`` is set to ``1`` or ``true``."""
    return os.environ.get("SHIMMER_DEBUG", "").lower() in ("1", "true")


class ShimmerLogger:
    """Logger that keeps entries for export and passes them on to Textual.

    Entries reach the devtools console only while an app is bound.
    """

    def __init__(self) -> None:
        self._app: App | None = None

    def bind(self, app: App | None) -> None:
        """Forward entries to ``app.log`` (``None`` to stop forwarding)."""
        self._app = app

    def __call__(self, *args: object, **kwargs: Any) -> None:
        self.info(*args, **kwargs)

    def _log(self, level: str, *args: object, **kwargs: Any) -> None:
        output = " ".join(str(arg) for arg in args)
        if kwargs:
            key_values = " ".join(f"{key}={value!r}" for key, value in kwargs.items())
            output = f"{output} {key_values}" if output else key_values

        if len(output) > MAX_LOG_MESSAGE_LENGTH:
            output = output[:MAX_LOG_MESSAGE_LENGTH] + "... [truncated]"

        log_buffer.append(
            LogEntry(group=level, message=output, timestamp=time.time(), source=LogSource.SHIMMER)
        )

        if self._app is not None:
            self._app.log(output)

    def debug(self, *args: object, **kwargs: Any) -> None:
        self._log("DEBUG", *args, **kwargs)

    def info(self, *args: object, **kwargs: Any) -> None:
        self._log("INFO", *args, **kwargs)

    def warning(self, *args: object, **kwargs: Any) -> None:
        self._log("WARNING", *args, **kwargs)

    def error(self, *args: object, **kwargs: Any) -> None:
        self._log("ERROR", *args, **kwargs)


class DebugLogHandler(logging.Handler):
    """Logging handler that captures records to the debug buffer."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            log_buffer.append(
                LogEntry(
                    group=record.levelname,
                    message=self.format(record),
                    timestamp=record.created,
                    source=LogSource.LOGGING,
                )
            )
        except Exception:
            self.handleError(record)


_debug_logging_initialized: bool = False


def setup_debug_logging() -> None:
    """Attach the capture handler to the ``shimmer`` logger.

    Idempotent. The logger level drops to DEBUG when ``SHIMMER_DEBUG`` is set.
    """
    global _debug_logging_initialized

    if _debug_logging_initialized:
        return

    handler = DebugLogHandler()
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    package_logger = logging.getLogger("shimmer")
    package_logger.addHandler(handler)
    if is_debug_enabled():
        package_logger.setLevel(logging.DEBUG)

    _debug_logging_initialized = True
    log.debug("Debug logging initialized")


def clear_log_buffer() -> None:
    log_buffer.clear()


def export_logs_to_file(file_path: str | Path) -> int:
    """Write the buffer to ``file_path`` and return the number of entries."""
    output_path = Path(file_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8") as f:
        f.write("# Shimmer Debug Log Export\n")
        f.write(f"# Total entries: {len(log_buffer)}\n\n")
        for entry in log_buffer:
            ts = datetime.fromtimestamp(entry.timestamp).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
            source = "[PY]" if entry.source == LogSource.LOGGING else "[SH]"
            f.write(f"{ts} {source} [{entry.group}] {entry.message}\n")

    return len(log_buffer)


log = ShimmerLogger()
