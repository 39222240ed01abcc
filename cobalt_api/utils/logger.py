"""Logging for the Cobalt API client.

A thin wrapper over the standard ``logging`` module that supports:
- An optional console handler
- A SUCCESS level alongside the standard ones
- In-memory history for inspection
"""

import sys
import threading
import logging
from datetime import datetime
from enum import Enum, auto
from typing import Optional, List, Dict, Any


CONSOLE_HANDLER_NAME = "cobalt_api.console"

# Library logger: silent unless the application configures logging
logging.getLogger("cobalt_api").addHandler(logging.NullHandler())


class LogLevel(Enum):
    """Log severity levels."""
    DEBUG = auto()
    INFO = auto()
    SUCCESS = auto()
    WARNING = auto()
    ERROR = auto()
    CRITICAL = auto()

    def to_logging_level(self) -> int:
        """Convert to standard logging level."""
        mapping = {
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.INFO: logging.INFO,
            LogLevel.SUCCESS: logging.INFO,
            LogLevel.WARNING: logging.WARNING,
            LogLevel.ERROR: logging.ERROR,
            LogLevel.CRITICAL: logging.CRITICAL,
        }
        return mapping.get(self, logging.INFO)


class LogEntry:
    """Represents a single log entry.

    Attributes:
        level: Log level
        message: Log message
        timestamp: When the log was created
        source: Source module/component
        extra: Additional context data
    """

    def __init__(
        self,
        level: LogLevel,
        message: str,
        source: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        self.level = level
        self.message = message
        self.timestamp = datetime.now()
        self.source = source
        self.extra = extra or {}

    def format(self, include_source: bool = True) -> str:
        """Format the log entry as a string."""
        time_str = self.timestamp.strftime("%H:%M:%S")
        level_str = self.level.name

        if include_source and self.source:
            return f"[{time_str}] [{level_str}] [{self.source}] {self.message}"
        return f"[{time_str}] [{level_str}] {self.message}"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'level': self.level.name,
            'message': self.message,
            'timestamp': self.timestamp.isoformat(),
            'source': self.source,
            'extra': self.extra,
        }


class Logger:
    """Logger for client components.

    Usage:
        logger = Logger("cobalt_api")
        logger.info("Sending request", source="CobaltAPI")
        logger.error("Request failed", extra={'status_code': 400})
    """

    def __init__(
        self,
        name: str = "cobalt_api",
        log_to_console: bool = False,
        min_level: LogLevel = LogLevel.INFO,
        max_history: int = 1000
    ):
        """Initialize the logger.

        Args:
            name: Name of the underlying stdlib logger
            log_to_console: Attach a stderr handler
            min_level: Minimum log level to record
            max_history: Number of entries kept in memory
        """
        self.name = name
        self.min_level = min_level
        self._logger = logging.getLogger(name)
        self._lock = threading.RLock()
        self._history: List[LogEntry] = []
        self._max_history = max_history

        self._console_handler = None
        if log_to_console:
            self._console_handler = self._find_console_handler()
            if self._console_handler is None:
                self._console_handler = logging.StreamHandler(sys.stderr)
                self._console_handler.setFormatter(logging.Formatter(
                    '%(asctime)s - %(levelname)s - %(message)s',
                    datefmt='%Y-%m-%d %H:%M:%S'
                ))
                self._console_handler.name = CONSOLE_HANDLER_NAME
                self._logger.addHandler(self._console_handler)

    def _find_console_handler(self) -> Optional[logging.Handler]:
        """Get the console handler already attached to the stdlib logger."""
        for handler in self._logger.handlers:
            if handler.name == CONSOLE_HANDLER_NAME:
                return handler
        return None

    def log(
        self,
        level: LogLevel,
        message: str,
        source: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None
    ):
        """Log a message.

        Args:
            level: Log level
            message: Message to log
            source: Source component
            extra: Additional context
        """
        if level.value < self.min_level.value:
            return

        entry = LogEntry(level, message, source, extra)
        with self._lock:
            self._history.append(entry)
            if len(self._history) > self._max_history:
                self._history = self._history[-self._max_history:]

        self._logger.log(level.to_logging_level(), entry.format(include_source=True))

    def debug(self, message: str, **kwargs):
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message."""
        self.log(LogLevel.INFO, message, **kwargs)

    def success(self, message: str, **kwargs):
        """Log success message."""
        self.log(LogLevel.SUCCESS, message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message."""
        self.log(LogLevel.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message."""
        self.log(LogLevel.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs):
        """Log critical message."""
        self.log(LogLevel.CRITICAL, message, **kwargs)

    def exception(self, message: str, exc: Exception, **kwargs):
        """Log an exception with traceback."""
        import traceback
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        full_message = f"{message}\n{''.join(tb)}"
        self.error(full_message, **kwargs)

    def get_history(
        self,
        level: Optional[LogLevel] = None,
        limit: int = 100
    ) -> List[LogEntry]:
        """Get log history.

        Args:
            level: Filter by level (None = all)
            limit: Maximum entries to return
        """
        with self._lock:
            if level:
                filtered = [e for e in self._history if e.level == level]
            else:
                filtered = self._history.copy()

            return filtered[-limit:]

    def clear_history(self):
        """Clear log history."""
        with self._lock:
            self._history.clear()

    def set_level(self, level: LogLevel):
        """Set minimum log level."""
        self.min_level = level

    def shutdown(self):
        """Detach the console handler, if any."""
        if self._console_handler:
            self._logger.removeHandler(self._console_handler)
            self._console_handler.close()
            self._console_handler = None


# Global logger instance
_global_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get the global logger instance."""
    global _global_logger
    if _global_logger is None:
        _global_logger = Logger()
    return _global_logger


def set_logger(logger: Logger):
    """Set the global logger instance."""
    global _global_logger
    _global_logger = logger
