"""
Async Logger - leveled logging with asynchronous fan-out

Entries are queued by any number of threads and written by a single
background worker to the console, to daily or hourly log files and to a
remote HTTP endpoint.
"""

__version__ = "1.0.0"

from async_logger.core.errors import (
    LoggerClosedError,
    LoggerConfigError,
    LoggerError,
    RemoteConfigError,
    RemoteEndpointError,
)
from async_logger.core.log_entry import LogEntry
from async_logger.core.log_level import FileCreateMode, LogLevel, OutputMode
from async_logger.core.logger import Logger
from async_logger.core.logger_builder import LoggerBuilder
from async_logger.core.logger_config import (
    ConsoleConfig,
    FileConfig,
    FormatterRegistry,
    LoggerConfig,
    RemoteConfig,
)

# Import submodules (not all classes by default)
from async_logger import formatters
from async_logger import global_logger
from async_logger import writers

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "OutputMode",
    "FileCreateMode",
    "LoggerConfig",
    "ConsoleConfig",
    "FileConfig",
    "RemoteConfig",
    "FormatterRegistry",
    "LoggerError",
    "LoggerConfigError",
    "LoggerClosedError",
    "RemoteConfigError",
    "RemoteEndpointError",
    "formatters",
    "global_logger",
    "writers",
]
