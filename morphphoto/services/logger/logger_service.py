"""
Centralized Logger Service for MorphPhoto.

Thin layer over loguru:
- `configure_logging` installs the console sink and the optional file sink
- `get_service_logger` returns a pre-bound logger per service with emoji support

Presentation (colors, timestamps) belongs to the sinks; services only pick a
level and a message.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO, Union

from loguru import logger

from ...enums import LogEmoji, LoggerName, LogLevel, LogSource
from .constants import EXTRA_CONTEXT, EXTRA_EMOJI, EXTRA_LOGGER_NAME, EXTRA_SOURCE
from .handlers.console_handler import ConsoleHandler
from .handlers.file_handler import FileHandler

_installed_handler_ids: List[int] = []


def configure_logging(
    level: Union[LogLevel, str] = LogLevel.INFO,
    log_file: Optional[Union[str, Path]] = None,
    use_colors: bool = True,
    stream: Optional[TextIO] = None,
) -> List[int]:
    """
    Replace loguru's default sink with the MorphPhoto console (and file) sinks.

    Safe to call more than once; sinks from a previous call are removed.

    Args:
        level: Minimum level for the console sink
        log_file: Optional log file path; gets every record from DEBUG up
        use_colors: ANSI colors on the console (ignored when not a TTY)
        stream: Console stream override, mainly for tests

    Returns:
        loguru handler ids that were installed
    """
    level_name = level.value if isinstance(level, LogLevel) else str(level).upper()

    logger.remove()
    _installed_handler_ids.clear()

    logger.configure(
        extra={
            EXTRA_LOGGER_NAME: LoggerName.UTILITY.value,
            EXTRA_SOURCE: LogSource.SYSTEM.value,
            EXTRA_EMOJI: None,
            EXTRA_CONTEXT: None,
        }
    )

    console = ConsoleHandler(stream=stream, use_colors=use_colors)
    _installed_handler_ids.append(logger.add(console, level=level_name, format="{message}"))

    if log_file:
        file_handler = FileHandler(log_file)
        _installed_handler_ids.append(file_handler.install())

    return list(_installed_handler_ids)


def get_service_logger(
    logger_name: LoggerName,
    source: LogSource = LogSource.SYSTEM,
    default_emoji: Optional[LogEmoji] = None,
):
    """
    Factory function to create a pre-configured logger for a specific service.

    Emoji priority system (highest to lowest):
    1. Direct: Emoji passed directly to the log method call
    2. Instance-set: Default emoji set when creating the service logger
    3. Fallback: Default emoji based on log level

    Args:
        logger_name: The logger name enum bound to every record
        source: The log source enum bound to every record (defaults to SYSTEM)
        default_emoji: Instance-level default emoji that overrides level fallbacks

    Returns:
        ServiceLogger instance with debug, info, success, warning, error methods

    Example:
        logger = get_service_logger(LoggerName.ORGANIZER)
        logger.info("Starting organize...", emoji=LogEmoji.STARTUP)
        logger.error("Copy failed", exception=e)
    """

    bound = logger.bind(
        **{
            EXTRA_LOGGER_NAME: logger_name.value,
            EXTRA_SOURCE: source.value,
        }
    )

    def _resolve_emoji(
        method_emoji: Optional[LogEmoji], fallback_emoji: Optional[LogEmoji]
    ) -> Optional[str]:
        if method_emoji is not None:
            return method_emoji.value
        if default_emoji is not None:
            return default_emoji.value
        return fallback_emoji.value if fallback_emoji is not None else None

    def _emit(
        level: LogLevel,
        message: str,
        emoji: Optional[str],
        context: Optional[Dict[str, Any]],
    ) -> None:
        # depth=2 attributes the record to the service code, not this wrapper
        bound.bind(**{EXTRA_EMOJI: emoji, EXTRA_CONTEXT: context}).opt(depth=2).log(
            level.value, message
        )

    class ServiceLogger:
        name = logger_name
        log_source = source

        @staticmethod
        def error(
            message: str,
            exception: Optional[BaseException] = None,
            error_context: Optional[Dict[str, Any]] = None,
            emoji: Optional[LogEmoji] = None,
        ) -> None:
            """Log an error; the exception text is appended to the message."""
            if exception is not None:
                message = f"{message}: {exception}"
            _emit(
                LogLevel.ERROR,
                message,
                _resolve_emoji(emoji, LogEmoji.ERROR),
                error_context,
            )

        @staticmethod
        def warning(
            message: str,
            extra_context: Optional[Dict[str, Any]] = None,
            emoji: Optional[LogEmoji] = None,
        ) -> None:
            _emit(
                LogLevel.WARNING,
                message,
                _resolve_emoji(emoji, LogEmoji.WARNING),
                extra_context,
            )

        @staticmethod
        def info(
            message: str,
            extra_context: Optional[Dict[str, Any]] = None,
            emoji: Optional[LogEmoji] = None,
        ) -> None:
            _emit(LogLevel.INFO, message, _resolve_emoji(emoji, None), extra_context)

        @staticmethod
        def success(
            message: str,
            extra_context: Optional[Dict[str, Any]] = None,
            emoji: Optional[LogEmoji] = None,
        ) -> None:
            _emit(
                LogLevel.SUCCESS,
                message,
                _resolve_emoji(emoji, LogEmoji.SUCCESS),
                extra_context,
            )

        @staticmethod
        def debug(
            message: str,
            extra_context: Optional[Dict[str, Any]] = None,
            emoji: Optional[LogEmoji] = None,
        ) -> None:
            _emit(LogLevel.DEBUG, message, _resolve_emoji(emoji, None), extra_context)

    return ServiceLogger()
