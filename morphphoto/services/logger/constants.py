"""
Logger Service Constants

Local constants for the logger service to avoid hardcoded values
and provide centralized configuration for logger-specific settings.
"""

# ====================================================================
# CONSOLE HANDLER CONSTANTS
# ====================================================================

# ANSI color codes for different log levels
ANSI_COLOR_GRAY = "\033[90m"     # Trace
ANSI_COLOR_CYAN = "\033[36m"     # Debug
ANSI_COLOR_WHITE = "\033[37m"    # Info
ANSI_COLOR_GREEN = "\033[32m"    # Success
ANSI_COLOR_YELLOW = "\033[33m"   # Warning
ANSI_COLOR_RED = "\033[31m"      # Error
ANSI_COLOR_MAGENTA = "\033[35m"  # Critical

# ANSI formatting codes
ANSI_RESET = "\033[0m"
ANSI_BOLD = "\033[1m"
ANSI_DIM = "\033[2m"

# Console output formatting
CONSOLE_TIMESTAMP_FORMAT = "%H:%M:%S"
CONSOLE_LEVEL_WIDTH = 8

# ====================================================================
# FILE HANDLER CONSTANTS
# ====================================================================

FILE_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "{extra[logger_name]}:{function}:{line} - {message}"
)
FILE_LOG_ROTATION = "10 MB"
FILE_LOG_RETENTION = 5
FILE_LOG_ENCODING = "utf-8"

# ====================================================================
# RECORD EXTRA KEYS
# ====================================================================

EXTRA_LOGGER_NAME = "logger_name"
EXTRA_SOURCE = "source"
EXTRA_EMOJI = "emoji"
EXTRA_CONTEXT = "context"
