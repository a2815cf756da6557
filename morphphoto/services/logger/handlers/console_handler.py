"""
Console Handler for the Logger Service.

A loguru sink that prints timestamped, level-colored lines to stdout. Business
code only emits a level and a message; all presentation happens here.
"""

import sys
from datetime import datetime
from typing import Any, Dict, Optional, TextIO

from ..constants import (
    ANSI_BOLD,
    ANSI_COLOR_CYAN,
    ANSI_COLOR_GRAY,
    ANSI_COLOR_GREEN,
    ANSI_COLOR_MAGENTA,
    ANSI_COLOR_RED,
    ANSI_COLOR_WHITE,
    ANSI_COLOR_YELLOW,
    ANSI_DIM,
    ANSI_RESET,
    CONSOLE_LEVEL_WIDTH,
    CONSOLE_TIMESTAMP_FORMAT,
    EXTRA_EMOJI,
    EXTRA_LOGGER_NAME,
)


class ConsoleHandler:
    """
    Console sink that outputs log records with color formatting.

    Features:
    - Color-coded log levels (using ANSI color codes)
    - Emoji support for visual clarity
    - Wall-clock timestamps
    - Health status tracking
    """

    # ANSI color codes for different log levels
    COLORS = {
        "TRACE": ANSI_COLOR_GRAY,
        "DEBUG": ANSI_COLOR_CYAN,
        "INFO": ANSI_COLOR_WHITE,
        "SUCCESS": ANSI_COLOR_GREEN,
        "WARNING": ANSI_COLOR_YELLOW,
        "ERROR": ANSI_COLOR_RED,
        "CRITICAL": ANSI_COLOR_MAGENTA,
    }

    RESET = ANSI_RESET
    BOLD = ANSI_BOLD
    DIM = ANSI_DIM

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        use_colors: bool = True,
        include_timestamp: bool = True,
        include_logger_name: bool = False,
    ):
        """
        Initialize the console handler.

        Args:
            stream: Output stream (default: sys.stdout at call time)
            use_colors: Whether to use ANSI colors (default: True)
            include_timestamp: Whether to include timestamps (default: True)
            include_logger_name: Whether to show the originating logger name
        """
        self.stream = stream
        self.use_colors = use_colors
        self.include_timestamp = include_timestamp
        self.include_logger_name = include_logger_name
        self._healthy = True

        # Plain output when redirected to a file or pipe
        if not self._stream().isatty():
            self.use_colors = False

    def __call__(self, message: Any) -> None:
        """loguru sink entry point; `message.record` holds the log record."""
        self.handle(message.record)

    def handle(self, record: Dict[str, Any]) -> None:
        """
        Write a single log record to the console.

        Args:
            record: loguru record dict
        """
        try:
            output = self.format_record(record)
            stream = self._stream()
            print(output, file=stream)
            stream.flush()

        except Exception as e:
            # Console failures must not break the run
            self._healthy = False
            print(f"[CONSOLE_HANDLER_ERROR] {record.get('message')}", file=sys.stderr)
            print(f"[CONSOLE_HANDLER_ERROR] Handler error: {e}", file=sys.stderr)

    def format_record(self, record: Dict[str, Any]) -> str:
        """Build the console line for a record."""
        level_name = record["level"].name
        extra = record.get("extra", {})
        output_parts = []

        if self.include_timestamp:
            timestamp_str = self._format_timestamp(record["time"])
            if self.use_colors:
                output_parts.append(f"{self.DIM}[{timestamp_str}]{self.RESET}")
            else:
                output_parts.append(f"[{timestamp_str}]")

        output_parts.append(self._format_level(level_name))

        if self.include_logger_name and extra.get(EXTRA_LOGGER_NAME):
            output_parts.append(f"({extra[EXTRA_LOGGER_NAME]})")

        emoji = extra.get(EXTRA_EMOJI)
        if emoji:
            output_parts.append(str(emoji))

        output_parts.append(self._colorize(level_name, record["message"]))
        return " ".join(output_parts)

    def is_healthy(self) -> bool:
        return self._healthy

    def _stream(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stdout

    def _format_timestamp(self, timestamp: datetime) -> str:
        return timestamp.strftime(CONSOLE_TIMESTAMP_FORMAT)

    def _format_level(self, level_name: str) -> str:
        """
        Format the log level with colors, padded for consistent alignment.
        """
        padded_level = f"{level_name:^{CONSOLE_LEVEL_WIDTH}}"

        if not self.use_colors:
            return f"[{padded_level}]"

        color = self.COLORS.get(level_name, "")
        if level_name in ("ERROR", "CRITICAL"):
            return f"{color}{self.BOLD}[{padded_level}]{self.RESET}"
        return f"{color}[{padded_level}]{self.RESET}"

    def _colorize(self, level_name: str, text: str) -> str:
        if not self.use_colors:
            return text
        color = self.COLORS.get(level_name, "")
        return f"{color}{text}{self.RESET}" if color else text
