"""
Main Logger class - leveled facade over the asynchronous dispatcher
"""

from __future__ import annotations

import atexit
import threading
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from async_logger.core.dispatcher import Dispatcher
from async_logger.core.errors import LoggerClosedError
from async_logger.core.log_entry import LogEntry
from async_logger.core.log_level import LogLevel, OutputMode
from async_logger.core.logger_config import LoggerConfig
from async_logger.writers.base_writer import BaseWriter
from async_logger.writers.console_writer import ConsoleWriter
from async_logger.writers.file_writer import FileWriter
from async_logger.writers.remote_writer import RemoteWriter


class Logger:
    """
    Asynchronous logger.

    Entries at or above the current level are stamped with the configured
    time zone and queued; a background worker writes them to the console,
    to daily/hourly files and/or to a remote HTTP endpoint.

    Example:
        logger = Logger(LoggerConfig(name="svc", level=LogLevel.DEBUG))
        logger.info("listening on %s:%d", host, port)
        logger.close()
    """

    def __init__(self, config: Optional[LoggerConfig] = None):
        """
        Build writers and start the worker.

        Raises:
            RemoteConfigError: Remote output without a remote config
            RemoteEndpointError: Remote config with an empty endpoint
        """
        config = config or LoggerConfig.default()
        config.validate()
        self._config = config.resolved()
        self._level = self._config.level
        self._level_lock = threading.Lock()
        self._closed = False

        self._dispatcher = Dispatcher(
            self._create_writers(),
            capacity=self._config.entry_size,
            name=self._config.name,
        )
        self._dispatcher.start()

        atexit.register(self.close)

    def _create_writers(self) -> List[Tuple[OutputMode, BaseWriter]]:
        """Instantiate one writer per enabled output mode."""
        config = self._config
        formatters = config.formatters
        writers: List[Tuple[OutputMode, BaseWriter]] = []

        if config.output_mode & OutputMode.CONSOLE:
            writers.append((
                OutputMode.CONSOLE,
                ConsoleWriter(formatters.console, stream=config.console_config.stream),
            ))

        if config.output_mode & OutputMode.FILE:
            file_config = config.file_config
            writers.append((
                OutputMode.FILE,
                FileWriter(
                    file_config.file_name,
                    file_config.log_path,
                    formatters.file,
                    mode=file_config.create_mode,
                ),
            ))

        if config.output_mode & OutputMode.REMOTE:
            remote = config.remote_config
            writers.append((
                OutputMode.REMOTE,
                RemoteWriter(
                    remote.endpoint,
                    formatters.remote,
                    method=remote.method,
                    headers=remote.headers,
                    transport=remote.transport,
                    timeout=remote.timeout,
                ),
            ))

        return writers

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def config(self) -> LoggerConfig:
        """Resolved configuration (formatters and file defaults filled in)."""
        return self._config

    @property
    def level(self) -> LogLevel:
        with self._level_lock:
            return self._level

    def set_log_level(self, level: LogLevel) -> None:
        """Change the threshold; takes effect for subsequent calls."""
        if not isinstance(level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        with self._level_lock:
            self._level = level

    def _now(self) -> datetime:
        if self._config.timezone is not None:
            return datetime.now(self._config.timezone)
        return datetime.now().astimezone()

    def log(self, level: LogLevel, template: str, *args: Any) -> None:
        """
        Log a message.

        Blocks while the queue is full. Calls after close() are dropped.
        """
        if level < self.level or self._closed:
            return

        entry = LogEntry(
            timestamp=self._now(),
            level=level,
            template=template,
            args=args,
        )
        try:
            self._dispatcher.enqueue(entry)
        except LoggerClosedError:
            return

    def debug(self, template: str, *args: Any) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, template, *args)

    def info(self, template: str, *args: Any) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, template, *args)

    def warn(self, template: str, *args: Any) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, template, *args)

    def error(self, template: str, *args: Any) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, template, *args)

    def close(self) -> None:
        """
        Flush every queued entry and release writers.

        Must be called once; it is also registered to run at interpreter
        exit. Remote sends still in flight are not awaited.
        """
        if self._closed:
            return
        self._closed = True
        atexit.unregister(self.close)
        self._dispatcher.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def get_metrics(self) -> Dict[str, int]:
        """Get logging metrics."""
        return self._dispatcher.get_metrics()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
