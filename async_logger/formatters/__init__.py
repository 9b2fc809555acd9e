"""
Log formatters module

A formatter is any callable taking (timestamp, level, template, *args)
and returning the rendered string.
"""

from async_logger.formatters.base_formatter import BaseFormatter, Formatter
from async_logger.formatters.default_formatter import default_formatter, plain_formatter
from async_logger.formatters.text_formatter import TextFormatter
from async_logger.formatters.json_formatter import JSONFormatter

__all__ = [
    "BaseFormatter",
    "Formatter",
    "default_formatter",
    "plain_formatter",
    "TextFormatter",
    "JSONFormatter",
]
