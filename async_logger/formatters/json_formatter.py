"""
JSON formatter for structured logging

Formats log entries as single-line JSON objects
"""

import json
from datetime import datetime
from typing import Any

from async_logger.core.log_entry import render_message
from async_logger.core.log_level import LogLevel, LEVEL_NAMES
from async_logger.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log entries as JSON objects.

    Produces structured log output suitable for log aggregation systems.
    """

    def __init__(
        self,
        include_template: bool = False,
        indent: int = None,
        ensure_ascii: bool = False
    ):
        """
        Initialize JSON formatter.

        Args:
            include_template: Also emit the raw template and its arguments
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters
        """
        self.include_template = include_template
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(
        self, timestamp: datetime, level: LogLevel, template: str, *args: Any
    ) -> str:
        """
        Format log entry as JSON.

        Returns:
            JSON string
        """
        log_dict = {
            "time": timestamp.isoformat(),
            "level": LEVEL_NAMES.get(level, level.name),
            "message": render_message(template, args),
        }

        if self.include_template:
            log_dict["template"] = template
            log_dict["args"] = list(args)

        return json.dumps(
            log_dict,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            default=str,
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
