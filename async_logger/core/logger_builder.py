"""Logger builder pattern"""

from dataclasses import replace
from datetime import tzinfo
from typing import Dict, Optional, TextIO, TYPE_CHECKING

from async_logger.core.logger import Logger
from async_logger.core.logger_config import (
    ConsoleConfig,
    FileConfig,
    FormatterRegistry,
    LoggerConfig,
    RemoteConfig,
)
from async_logger.core.log_level import FileCreateMode, LogLevel, OutputMode
from async_logger.formatters.base_formatter import Formatter

if TYPE_CHECKING:
    import httpx


class LoggerBuilder:
    """
    Builder pattern for logger construction.

    Setters can be called in any order; for the same setting the last
    call wins and ``None`` leaves the default in place. Everything is
    validated once, in ``build()``.

    Example:
        logger = (LoggerBuilder()
            .with_name("svc")
            .with_level(LogLevel.DEBUG)
            .with_file(log_path="/var/log/svc", mode=FileCreateMode.HOURLY)
            .build())
    """

    def __init__(self):
        self._config = LoggerConfig()
        self._formatters = FormatterRegistry()
        self._global = False

    @classmethod
    def from_config(cls, config: LoggerConfig) -> "LoggerBuilder":
        """
        Start from an existing configuration object.

        Only fields that differ from their defaults are applied, so the
        builder's own defaults fill the rest.
        """
        builder = cls()
        defaults = LoggerConfig()

        builder.with_name(config.name)
        if config.level != defaults.level:
            builder.with_level(config.level)
        if config.entry_size != defaults.entry_size:
            builder.with_entry_size(config.entry_size)
        if config.output_mode and config.output_mode != defaults.output_mode:
            builder._config.output_mode = OutputMode(config.output_mode)
        if config.timezone is not None:
            builder.with_timezone(config.timezone)
        if config.console_config is not None:
            builder._config.console_config = replace(config.console_config)
        if config.file_config is not None:
            builder.with_file(
                config.file_config.file_name,
                config.file_config.log_path,
                config.file_config.create_mode,
            )
        if config.remote_config is not None:
            builder.with_remote(
                config.remote_config.endpoint,
                method=config.remote_config.method,
                headers=config.remote_config.headers,
                transport=config.remote_config.transport,
                timeout=config.remote_config.timeout,
            )
        builder.with_standard_formatter(config.standard_formatter)
        if config.formatters is not None:
            builder.with_formatter_registry(config.formatters)
        return builder

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name (also the default log file name)."""
        if name:
            self._config.name = name
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set minimum log level."""
        if level is not None:
            self._config.level = level
        return self

    def with_entry_size(self, size: int) -> "LoggerBuilder":
        """Set queue capacity."""
        if size:
            self._config.entry_size = size
        return self

    def with_timezone(self, tz: tzinfo) -> "LoggerBuilder":
        """Set the time zone used to stamp entries (default: local)."""
        self._config.timezone = tz
        return self

    def with_console(self, stream: Optional[TextIO] = None) -> "LoggerBuilder":
        """Enable console output, optionally to a stream other than stdout."""
        self._config.output_mode |= OutputMode.CONSOLE
        if stream is not None:
            self._config.console_config = ConsoleConfig(stream=stream)
        return self

    def with_console_off(self) -> "LoggerBuilder":
        """Disable console output (it is on by default)."""
        self._config.output_mode &= ~OutputMode.CONSOLE
        return self

    def with_file(
        self,
        file_name: str = "",
        log_path: str = "",
        mode: FileCreateMode = FileCreateMode.DAILY,
    ) -> "LoggerBuilder":
        """
        Enable rotated file output.

        Args:
            file_name: Base file name (default: logger name)
            log_path: Log directory (default: ./log)
            mode: DAILY or HOURLY rotation

        Returns:
            Self for method chaining
        """
        self._config.file_config = FileConfig(
            file_name=file_name or "",
            log_path=log_path or "",
            create_mode=mode or FileCreateMode.DAILY,
        )
        self._config.output_mode |= OutputMode.FILE
        return self

    def with_file_off(self) -> "LoggerBuilder":
        """Disable file output."""
        self._config.output_mode &= ~OutputMode.FILE
        return self

    def with_remote(
        self,
        endpoint: str,
        method: str = "POST",
        headers: Optional[Dict[str, str]] = None,
        transport: Optional["httpx.BaseTransport"] = None,
        timeout: float = 5.0,
    ) -> "LoggerBuilder":
        """
        Enable remote HTTP output.

        Args:
            endpoint: Target URL (required, checked in build())
            method: HTTP method
            headers: Extra request headers, override Content-Type
            transport: Custom httpx transport
            timeout: Per-request timeout in seconds

        Returns:
            Self for method chaining
        """
        self._config.remote_config = RemoteConfig(
            endpoint=endpoint,
            method=method or "POST",
            headers=dict(headers) if headers else None,
            transport=transport,
            timeout=timeout,
        )
        self._config.output_mode |= OutputMode.REMOTE
        return self

    def with_standard_formatter(self, formatter: Formatter) -> "LoggerBuilder":
        """Set the formatter used by writers without their own."""
        if formatter is not None:
            self._config.standard_formatter = formatter
        return self

    def with_console_formatter(self, formatter: Formatter) -> "LoggerBuilder":
        """Set the console formatter."""
        self._formatters.console = formatter
        return self

    def with_file_formatter(self, formatter: Formatter) -> "LoggerBuilder":
        """Set the file formatter."""
        self._formatters.file = formatter
        return self

    def with_remote_formatter(self, formatter: Formatter) -> "LoggerBuilder":
        """Set the formatter that renders the remote ``message`` field."""
        self._formatters.remote = formatter
        return self

    def with_formatter_registry(self, registry: FormatterRegistry) -> "LoggerBuilder":
        """Set all per-writer formatters at once."""
        if registry is not None:
            self._formatters = replace(registry)
        return self

    def as_global(self, enabled: bool = True) -> "LoggerBuilder":
        """Bind the built logger as the process-wide global logger."""
        self._global = enabled
        return self

    def build(self) -> Logger:
        """
        Build and return configured logger.

        Raises:
            RemoteConfigError: Remote output without a remote config
            RemoteEndpointError: Remote config with an empty endpoint
        """
        config = replace(self._config, formatters=replace(self._formatters))
        logger = Logger(config)

        if self._global:
            from async_logger.global_logger import set_global_logger
            set_global_logger(logger)

        return logger
