"""Console writer"""

import sys
from typing import Optional, TextIO

from async_logger.core.log_entry import LogEntry
from async_logger.formatters.base_formatter import Formatter
from async_logger.writers.base_writer import BaseWriter


class ConsoleWriter(BaseWriter):
    """Write logs to the console."""

    def __init__(self, formatter: Formatter, stream: Optional[TextIO] = None):
        """
        Initialize console writer.

        Args:
            formatter: Log formatter
            stream: Output stream (default: sys.stdout, looked up per write)
        """
        super().__init__(formatter)
        self.stream = stream

    def write(self, entry: LogEntry) -> int:
        """Write log entry to console."""
        stream = self.stream or sys.stdout
        n = stream.write(self.format_line(entry))
        stream.flush()
        return n
