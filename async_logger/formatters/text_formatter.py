"""
Text formatter with customizable template

Formats log entries using a template string with placeholders
"""

from datetime import datetime
from typing import Any

from async_logger.core.log_entry import render_message
from async_logger.core.log_level import LogLevel, LEVEL_NAMES
from async_logger.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log entries using a customizable template.

    Supports placeholders for timestamp, level and message.
    """

    DEFAULT_TEMPLATE = "[{timestamp}] [{level:5}] {message}"

    def __init__(self, template: str = None, timestamp_format: str = "%Y-%m-%d %H:%M:%S.%f"):
        """
        Initialize text formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {timestamp}: Timestamp
                     - {level}: Log level name
                     - {level:5}: Log level with padding
                     - {message}: Rendered log message
                     - {template}: Raw message template
            timestamp_format: strftime format for timestamps. A trailing
                     %f is cut to milliseconds.

        Example:
            # Default format
            formatter = TextFormatter()

            # Custom format
            formatter = TextFormatter("{level} - {message}")
        """
        self.template = template or self.DEFAULT_TEMPLATE
        self.timestamp_format = timestamp_format

    def format(
        self, timestamp: datetime, level: LogLevel, template: str, *args: Any
    ) -> str:
        """
        Format log entry using the template.

        Returns:
            Formatted string
        """
        timestamp_str = timestamp.strftime(self.timestamp_format)
        if self.timestamp_format.endswith("%f"):
            timestamp_str = timestamp_str[:-3]

        format_dict = {
            "timestamp": timestamp_str,
            "level": LEVEL_NAMES.get(level, level.name),
            "message": render_message(template, args),
            "template": template,
        }

        try:
            return self.template.format(**format_dict)
        except (KeyError, IndexError, ValueError) as e:
            # Fallback if template has unknown placeholder
            return f"[FORMAT ERROR: {e}] {format_dict['message']}"

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(template='{self.template}')"
