"""Utility modules for the Cobalt API client."""

from .logger import Logger, LogLevel, LogEntry, get_logger, set_logger

__all__ = [
    'Logger',
    'LogLevel',
    'LogEntry',
    'get_logger',
    'set_logger',
]
