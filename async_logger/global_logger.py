"""
Process-wide logger handle

Nothing is bound until ``set_global_logger`` (or
``LoggerBuilder().as_global()``) is called; until then, and after
``close_global_logger``, the module-level functions do nothing.

Example:
    import async_logger
    from async_logger import global_logger as log

    async_logger.LoggerBuilder().with_name("svc").as_global().build()
    log.info("started pid=%d", os.getpid())
    log.close_global_logger()
"""

import threading
from typing import Any, Optional

from async_logger.core.log_level import LogLevel
from async_logger.core.logger import Logger

_global_logger: Optional[Logger] = None
_lock = threading.Lock()


def set_global_logger(logger: Optional[Logger]) -> Optional[Logger]:
    """
    Bind ``logger`` as the global logger.

    Returns:
        The previously bound logger, which is left open
    """
    global _global_logger
    with _lock:
        previous, _global_logger = _global_logger, logger
    return previous


def get_global_logger() -> Optional[Logger]:
    """Currently bound logger, or None."""
    return _global_logger


def close_global_logger() -> None:
    """Unbind the global logger and close it."""
    logger = set_global_logger(None)
    if logger is not None:
        logger.close()


def debug(template: str, *args: Any) -> None:
    logger = _global_logger
    if logger is not None:
        logger.debug(template, *args)


def info(template: str, *args: Any) -> None:
    logger = _global_logger
    if logger is not None:
        logger.info(template, *args)


def warn(template: str, *args: Any) -> None:
    logger = _global_logger
    if logger is not None:
        logger.warn(template, *args)


def error(template: str, *args: Any) -> None:
    logger = _global_logger
    if logger is not None:
        logger.error(template, *args)


def set_log_level(level: LogLevel) -> None:
    logger = _global_logger
    if logger is not None:
        logger.set_log_level(level)
