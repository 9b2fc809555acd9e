"""Time-rotated file writer"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from async_logger.core.log_entry import LogEntry
from async_logger.core.log_level import FileCreateMode
from async_logger.formatters.base_formatter import Formatter
from async_logger.writers.base_writer import BaseWriter


def resolve_log_path(log_path: str) -> Path:
    """
    Turn a configured log directory into an absolute path.

    Environment references and ``~`` are expanded. Relative paths are
    resolved against the working directory, or against the home
    directory if the working directory is gone.
    """
    path = os.path.expanduser(os.path.expandvars(log_path))
    if os.path.isabs(path):
        return Path(path)
    try:
        return Path(os.path.abspath(path))
    except OSError:
        return Path.home() / path


class FileWriter(BaseWriter):
    """
    Append logs to one file per day or per hour.

    The bucket is taken from each entry's own timestamp, so a backlog
    flushed after midnight still lands in the previous day's file. The
    open handle is kept until an entry falls into a different bucket.
    """

    def __init__(
        self,
        file_name: str,
        log_path: str,
        formatter: Formatter,
        mode: FileCreateMode = FileCreateMode.DAILY,
        encoding: str = "utf-8",
    ):
        """
        Initialize file writer.

        Args:
            file_name: Base name of the log files
            log_path: Log directory, created if missing
            formatter: Log formatter
            mode: Rotation granularity (daily or hourly)
            encoding: File encoding (default: 'utf-8')
        """
        super().__init__(formatter)
        self.file_name = file_name
        self.log_path = resolve_log_path(log_path)
        self.mode = mode
        self.encoding = encoding
        self.current_file_name: Optional[str] = None
        self._file: Optional[TextIO] = None

        try:
            self.log_path.mkdir(parents=True, exist_ok=True)
        except OSError:
            # Not fatal: opening a file in write() fails and is discarded.
            pass

    def generated_file_name(self, timestamp: datetime) -> str:
        """Full path of the file an entry with this timestamp belongs to."""
        if self.mode == FileCreateMode.DAILY:
            bucket = timestamp.strftime("%Y-%m-%d")
        else:
            bucket = timestamp.strftime("%Y-%m-%d-%H")
        return str(self.log_path / f"{self.file_name}.{bucket}.log")

    def _open(self, path: str) -> TextIO:
        """Open a log file for appending, creating it if absent."""
        return open(path, "a", encoding=self.encoding)

    def write(self, entry: LogEntry) -> int:
        """Write log entry, switching files when the bucket changes."""
        target = self.generated_file_name(entry.timestamp)
        if target != self.current_file_name:
            self.close()
            self._file = self._open(target)
            self.current_file_name = target

        n = self._file.write(self.format_line(entry))
        self._file.flush()
        return n

    def close(self):
        """Close file."""
        if self._file:
            self._file.close()
            self._file = None
        self.current_file_name = None
