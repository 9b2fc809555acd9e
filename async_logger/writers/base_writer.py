"""
Base writer interface
"""

from abc import ABC, abstractmethod

from async_logger.core.log_entry import LogEntry
from async_logger.formatters.base_formatter import Formatter


class BaseWriter(ABC):
    """
    Abstract base class for log writers.

    A writer owns one destination and one formatter. ``write`` is only
    ever called from the dispatcher thread (or from the closing thread
    once that has stopped), never concurrently with itself.
    """

    def __init__(self, formatter: Formatter):
        self.formatter = formatter

    def format_line(self, entry: LogEntry) -> str:
        """Render an entry and make sure it ends with a newline."""
        msg = entry.render(self.formatter)
        if not msg.endswith("\n"):
            msg += "\n"
        return msg

    @abstractmethod
    def write(self, entry: LogEntry) -> int:
        """
        Deliver one entry.

        Returns:
            Amount of data handed to the destination

        Raises:
            Exception: Any I/O failure. The dispatcher discards it.
        """
        pass

    def close(self) -> None:
        """Release the destination. Default does nothing."""
        pass
