"""Writers module - Log output handlers"""

from async_logger.writers.base_writer import BaseWriter
from async_logger.writers.console_writer import ConsoleWriter
from async_logger.writers.file_writer import FileWriter
from async_logger.writers.remote_writer import RemoteWriter

__all__ = ["BaseWriter", "ConsoleWriter", "FileWriter", "RemoteWriter"]
