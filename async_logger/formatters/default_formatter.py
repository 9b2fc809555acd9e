"""Built-in function formatters"""

from datetime import datetime
from typing import Any

from async_logger.core.log_entry import render_message
from async_logger.core.log_level import LogLevel, LEVEL_NAMES


def default_formatter(
    timestamp: datetime, level: LogLevel, template: str, *args: Any
) -> str:
    """
    Standard formatter used when a writer has none of its own.

    Renders ``HH:MM:SS.mmm [LEVEL] message`` in local time, e.g.
    ``13:04:05.123 [ INFO] service started``.
    """
    local = timestamp.astimezone() if timestamp.tzinfo else timestamp
    time_str = local.strftime("%H:%M:%S.%f")[:-3]
    level_name = LEVEL_NAMES.get(level, level.name)
    return f"{time_str} [{level_name:>5}] {render_message(template, args)}"


def plain_formatter(
    timestamp: datetime, level: LogLevel, template: str, *args: Any
) -> str:
    """Render the message only."""
    return render_message(template, args)
