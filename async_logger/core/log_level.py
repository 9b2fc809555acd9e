"""
Log level and output mode enumerations
"""

from enum import Enum, IntEnum, IntFlag
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Ordered by rank. A logger drops every entry whose level is below its
    threshold; NONE as a threshold lets everything through.
    """

    NONE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive, WARNING is accepted)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level_str = level_str.strip().upper()
        if level_str == "WARNING":
            level_str = "WARN"
        if level_str in cls.__members__:
            return cls[level_str]
        raise ValueError(f"Invalid log level: {level_str}")


class OutputMode(IntFlag):
    """Destinations a logger fans out to. Bits can be combined."""

    CONSOLE = 1
    FILE = 2
    REMOTE = 4


class FileCreateMode(Enum):
    """Rotation granularity of the file writer."""

    DAILY = 0
    HOURLY = 1


# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERROR: "ERROR",
}
