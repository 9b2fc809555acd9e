"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Leveled logging facade
- LoggerBuilder: Builder pattern for logger construction
- Dispatcher: Bounded queue and worker thread
- LogEntry: Log entry data structure
- LogLevel, OutputMode, FileCreateMode: Enumerations
- LoggerConfig and per-writer configs: Configuration management
"""

from async_logger.core.dispatcher import Dispatcher
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

__all__ = [
    "Dispatcher",
    "LoggerError",
    "LoggerConfigError",
    "LoggerClosedError",
    "RemoteConfigError",
    "RemoteEndpointError",
    "LogEntry",
    "LogLevel",
    "OutputMode",
    "FileCreateMode",
    "Logger",
    "LoggerBuilder",
    "ConsoleConfig",
    "FileConfig",
    "FormatterRegistry",
    "LoggerConfig",
    "RemoteConfig",
]
