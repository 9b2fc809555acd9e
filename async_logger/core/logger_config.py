"""
Logger configuration management
"""

from dataclasses import dataclass, field, replace
from datetime import tzinfo
from typing import Dict, Optional, TextIO, TYPE_CHECKING

from async_logger.core.errors import RemoteConfigError, RemoteEndpointError
from async_logger.core.log_level import FileCreateMode, LogLevel, OutputMode
from async_logger.formatters.base_formatter import Formatter
from async_logger.formatters.default_formatter import default_formatter, plain_formatter

if TYPE_CHECKING:
    import httpx


DEFAULT_ENTRY_SIZE = 4096
DEFAULT_LOG_PATH = "log"


@dataclass
class ConsoleConfig:
    """Console writer settings. ``stream`` defaults to sys.stdout."""

    stream: Optional[TextIO] = None


@dataclass
class FileConfig:
    """
    File writer settings.

    An empty ``file_name`` falls back to the logger name and an empty
    ``log_path`` to ``log`` (resolved against the working directory).
    """

    file_name: str = ""
    log_path: str = ""
    create_mode: FileCreateMode = FileCreateMode.DAILY


@dataclass
class RemoteConfig:
    """
    Remote writer settings.

    ``transport`` is handed to the httpx client as-is, which allows
    proxies, custom TLS or a mock transport in tests.
    """

    endpoint: str = ""
    method: str = "POST"
    headers: Optional[Dict[str, str]] = None
    transport: Optional["httpx.BaseTransport"] = None
    timeout: float = 5.0


@dataclass
class FormatterRegistry:
    """
    Per-writer formatters. Unset entries use the standard formatter,
    except that remote output gets the bare message while the standard
    formatter is the default one.
    """

    console: Optional[Formatter] = None
    file: Optional[Formatter] = None
    remote: Optional[Formatter] = None

    def for_mode(self, mode: OutputMode) -> Optional[Formatter]:
        """Formatter registered for a single output mode bit."""
        return {
            OutputMode.CONSOLE: self.console,
            OutputMode.FILE: self.file,
            OutputMode.REMOTE: self.remote,
        }.get(mode)


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    ``validate()`` and ``resolved()`` run once when the logger is built;
    later edits to a config object do not affect a running logger.
    """

    # Basic settings
    name: str = "logger"
    level: LogLevel = LogLevel.INFO
    output_mode: OutputMode = OutputMode.CONSOLE

    # Queue settings
    entry_size: int = DEFAULT_ENTRY_SIZE

    # Entry timestamps; None means the local time zone
    timezone: Optional[tzinfo] = None

    # Writer settings
    console_config: Optional[ConsoleConfig] = None
    file_config: Optional[FileConfig] = None
    remote_config: Optional[RemoteConfig] = None

    # Format settings
    standard_formatter: Formatter = default_formatter
    formatters: FormatterRegistry = field(default_factory=FormatterRegistry)

    def __post_init__(self):
        """Normalize loosely typed fields."""
        if isinstance(self.level, str):
            self.level = LogLevel.from_string(self.level)
        if isinstance(self.output_mode, int) and not isinstance(self.output_mode, OutputMode):
            self.output_mode = OutputMode(self.output_mode)

    def validate(self) -> None:
        """
        Check the configuration before any resource is created.

        Raises:
            TypeError: If the level is not a LogLevel
            ValueError: If entry_size is not positive
            RemoteConfigError: If remote output has no remote config
            RemoteEndpointError: If the remote endpoint is empty
        """
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if self.entry_size <= 0:
            raise ValueError("entry_size must be positive")
        if self.standard_formatter is None or not callable(self.standard_formatter):
            raise TypeError("standard_formatter must be callable")

        if self.output_mode & OutputMode.REMOTE:
            if self.remote_config is None:
                raise RemoteConfigError()
            if not self.remote_config.endpoint:
                raise RemoteEndpointError()

    def resolved(self) -> "LoggerConfig":
        """
        Return a copy with every default filled in.

        Formatters are resolved for the enabled modes only: an unset
        entry takes the standard formatter. The remote message field
        already sits next to its own time and level, so while the
        standard formatter is left at its default the remote writer
        renders the bare message instead. File settings get the logger
        name and the default directory when left empty.
        """
        registry = FormatterRegistry()
        for mode in (OutputMode.CONSOLE, OutputMode.FILE, OutputMode.REMOTE):
            if self.output_mode & mode:
                formatter = self.formatters.for_mode(mode) if self.formatters else None
                fallback = self.standard_formatter
                if mode == OutputMode.REMOTE and fallback is default_formatter:
                    fallback = plain_formatter
                setattr(registry, mode.name.lower(), formatter or fallback)

        file_config = self.file_config
        if self.output_mode & OutputMode.FILE:
            file_config = replace(file_config) if file_config else FileConfig()
            if not file_config.file_name:
                file_config.file_name = self.name
            if not file_config.log_path:
                file_config.log_path = DEFAULT_LOG_PATH

        return replace(
            self,
            console_config=self.console_config or ConsoleConfig(),
            file_config=file_config,
            formatters=registry,
        )

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            level=LogLevel.DEBUG,
            output_mode=OutputMode.CONSOLE,
        )

    @classmethod
    def production_config(cls, name: str = "logger", log_path: str = DEFAULT_LOG_PATH) -> "LoggerConfig":
        """Create configuration for production: WARN and above to daily files."""
        return cls(
            name=name,
            level=LogLevel.WARN,
            output_mode=OutputMode.FILE,
            entry_size=20000,
            file_config=FileConfig(log_path=log_path),
        )
