"""
Base formatter interface

A formatter is any callable ``(timestamp, level, template, *args) -> str``.
Plain functions work; BaseFormatter is provided for configurable ones.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable

from async_logger.core.log_level import LogLevel

Formatter = Callable[..., str]


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters render the parts of a log entry into one string.
    """

    @abstractmethod
    def format(
        self, timestamp: datetime, level: LogLevel, template: str, *args: Any
    ) -> str:
        """
        Format a log entry into a string.

        Args:
            timestamp: Entry creation time
            level: Entry level
            template: %-style message template
            *args: Template arguments

        Returns:
            Formatted string representation of the log entry
        """
        pass

    def __call__(
        self, timestamp: datetime, level: LogLevel, template: str, *args: Any
    ) -> str:
        """Allow formatters to be callable."""
        return self.format(timestamp, level, template, *args)
