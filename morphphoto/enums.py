# morphphoto/enums.py
"""
Application Enums - Centralized enum definitions.

This module contains all enum definitions so that constants.py, config.py and
the models can import them without creating circular dependencies.
"""

from enum import Enum


# =============================================================================
# CORRUPTION SYSTEM
# =============================================================================


class CorruptnessVerdict(str, Enum):
    """Per-file corruption outcome. Must be: none, partial_corruption, truncated, invalid_decoder."""

    NONE = "none"
    PARTIAL_CORRUPTION = "partial_corruption"
    TRUNCATED = "truncated"
    INVALID_DECODER = "invalid_decoder"

    @property
    def is_corrupt(self) -> bool:
        return self is not CorruptnessVerdict.NONE


class DecodeFailureReason(str, Enum):
    """Structured reasons a decode attempt can fail."""

    UNEXPECTED_END_OF_FILE = "unexpected_end_of_file"
    MISSING_INDEX_TABLE = "missing_index_table"
    OUT_OF_FILE_BOUNDS = "out_of_file_bounds"
    TRUNCATED_STREAM = "truncated_stream"
    UNIDENTIFIED_FORMAT = "unidentified_format"
    FILE_NOT_FOUND = "file_not_found"
    UNKNOWN = "unknown"


# =============================================================================
# ORGANIZER SYSTEM
# =============================================================================


class OrganizationType(str, Enum):
    """How the destination tree is grouped."""

    BY_DATE = "by_date"
    BY_EXTENSION = "by_extension"


class CorruptFileHandling(str, Enum):
    """What happens to files with a corrupt verdict."""

    SKIP = "skip"
    NORMAL_ORGANIZE = "normal_organize"
    EXTENSION_ORGANIZE = "extension_organize"


class FileOutcome(str, Enum):
    """Result of processing a single source file."""

    ORGANIZED = "organized"
    SKIPPED = "skipped"
    FAILED = "failed"


# =============================================================================
# LOGGING SYSTEM
# =============================================================================


class LogLevel(str, Enum):
    """Log level constants for centralized logging system."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogSource(str, Enum):
    """Log source constants for identifying log origins."""

    CLI = "cli"
    SYSTEM = "system"
    PIPELINE = "pipeline"
    FILESYSTEM = "filesystem"


class LoggerName(str, Enum):
    """Logger name constants for categorizing log entries."""

    CLI = "cli"
    ORGANIZER = "organizer"
    FILE_SCANNER = "file_scanner"
    PATH_RESOLVER = "path_resolver"
    IMAGE_DECODER = "image_decoder"
    CORRUPTION_PIPELINE = "corruption_pipeline"
    UTILITY = "utility"


class LogEmoji(str, Enum):
    """Type-safe emoji constants for log messages."""

    # Status emojis
    SUCCESS = "✅"
    COMPLETED = "✅"
    FAILED = "❌"
    ERROR = "❌"
    WARNING = "⚠️"
    INFO = "ℹ️"
    DEBUG = "🐞"
    SKIPPED = "⏭️"

    # Work emojis
    PROCESSING = "🔄"
    STARTUP = "🚀"
    SEARCH = "🔍"
    CHART = "📊"

    # File emojis
    IMAGE = "🖼️"
    FOLDER = "📁"
    COPY = "📄"
    BROKEN = "💔"
