#!/usr/bin/env python3
"""Basic usage example"""

from async_logger import FileCreateMode, LoggerBuilder, LogLevel
from async_logger import global_logger as log

def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_name("example")
        .with_level(LogLevel.DEBUG)
        .with_console()
        .with_file(log_path="logs", mode=FileCreateMode.DAILY)
        .as_global()
        .build())

    # Log messages
    logger.debug("This is debug")
    logger.info("Application started, pid=%d", 4242)
    logger.warn("Disk usage at %d%%", 91)
    logger.error("This is error")

    # Same logger through the global handle
    log.info("Logged through the global logger")

    # Flush queued entries and close files
    log.close_global_logger()

if __name__ == "__main__":
    main()
