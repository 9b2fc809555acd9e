"""
Log entry data structure
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Tuple

from async_logger.core.log_level import LogLevel, LEVEL_NAMES


def render_message(template: str, args: Tuple[Any, ...]) -> str:
    """
    Interpolate ``args`` into a %-style template.

    A template without arguments is returned untouched, so literal ``%``
    characters survive. A mismatch between template and arguments never
    raises; the template is returned with an error marker instead.
    """
    if not args:
        return template
    try:
        return template % args
    except (TypeError, ValueError, KeyError) as e:
        return f"[FORMAT ERROR: {e}] {template} {args!r}"


@dataclass(frozen=True)
class LogEntry:
    """
    Log entry data structure.

    Immutable once created. Carries the raw template and arguments so
    that every writer renders it with its own formatter.
    """

    timestamp: datetime
    level: LogLevel
    template: str
    args: Tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    @property
    def level_name(self) -> str:
        return LEVEL_NAMES.get(self.level, self.level.name)

    @property
    def message(self) -> str:
        """Template with arguments applied."""
        return render_message(self.template, self.args)

    def render(self, formatter: Callable[..., str]) -> str:
        """Render this entry through a formatter callable."""
        return formatter(self.timestamp, self.level, self.template, *self.args)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary with time, level and rendered message
        """
        return {
            "time": self.timestamp.isoformat(),
            "level": self.level_name,
            "message": self.message,
        }

    def __str__(self) -> str:
        """String representation."""
        return (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"[{self.level_name:5}] "
            f"{self.message}"
        )
