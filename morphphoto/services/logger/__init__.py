"""
Centralized Logger Service Module.

Usage:
    from morphphoto.services.logger import configure_logging, get_service_logger
    from morphphoto.enums import LoggerName

    configure_logging(level="INFO", log_file=None)
    logger = get_service_logger(LoggerName.ORGANIZER)
    logger.info("Starting organize...")
"""

# Re-export commonly used enums for convenience
from ...enums import LogEmoji, LoggerName, LogLevel, LogSource
from .handlers import ConsoleHandler, FileHandler
from .logger_service import configure_logging, get_service_logger

__all__ = [
    "configure_logging",
    "get_service_logger",
    "ConsoleHandler",
    "FileHandler",
    # Enums
    "LogLevel",
    "LogSource",
    "LoggerName",
    "LogEmoji",
]
