# morphphoto/constants.py
"""
Global Constants for MorphPhoto

Centralized location for all application constants to avoid hardcoded values
throughout the codebase.
"""

from typing import Dict, FrozenSet, Tuple

from .enums import CorruptnessVerdict, DecodeFailureReason

# =============================================================================
# FILE SELECTION
# =============================================================================

DEFAULT_IMAGE_EXTENSIONS: Tuple[str, ...] = (".jpg", ".jpeg", ".png", ".heic")

HEIF_EXTENSIONS: FrozenSet[str] = frozenset({".heic", ".heif"})

# Matched case-insensitively against the file name. Entries with "*" are
# treated as prefix wildcards.
SKIP_FILE_PATTERNS: FrozenSet[str] = frozenset(
    {
        # macOS metadata files
        "._*",
        ".ds_store",
        ".localized",
        # Windows system files
        "thumbs.db",
        "desktop.ini",
        "ehthumbs.db",
        # Other common system files
        ".fseventsd",
        ".spotlight-v100",
        ".temporaryitems",
        ".trashes",
        ".volumeicon.icns",
        ".appledouble",
        ".lsoverride",
    }
)

# Editor and temp-file prefixes
SKIP_FILE_PREFIXES: Tuple[str, ...] = ("._", ".tmp", "~$")

# =============================================================================
# PARTIAL CORRUPTION SAMPLING
# =============================================================================

DEFAULT_SAMPLE_BUDGET = 1000
DEFAULT_BLACK_CHANNEL_THRESHOLD = 10  # per channel, out of 255
DEFAULT_CORRUPTION_THRESHOLD = 0.30  # ratio of black samples, strict greater-than

# =============================================================================
# DECODE FAILURE CLASSIFICATION
# =============================================================================

DECODE_FAILURE_VERDICTS: Dict[DecodeFailureReason, CorruptnessVerdict] = {
    DecodeFailureReason.UNEXPECTED_END_OF_FILE: CorruptnessVerdict.TRUNCATED,
    DecodeFailureReason.MISSING_INDEX_TABLE: CorruptnessVerdict.TRUNCATED,
    DecodeFailureReason.OUT_OF_FILE_BOUNDS: CorruptnessVerdict.TRUNCATED,
    DecodeFailureReason.TRUNCATED_STREAM: CorruptnessVerdict.TRUNCATED,
    DecodeFailureReason.UNIDENTIFIED_FORMAT: CorruptnessVerdict.INVALID_DECODER,
    DecodeFailureReason.FILE_NOT_FOUND: CorruptnessVerdict.INVALID_DECODER,
    DecodeFailureReason.UNKNOWN: CorruptnessVerdict.INVALID_DECODER,
}

# Lowercased message fragments, checked in order. Only consulted when the
# exception type does not already identify the reason.
DECODE_FAILURE_MESSAGE_PATTERNS: Tuple[Tuple[str, DecodeFailureReason], ...] = (
    ("unexpected end of file", DecodeFailureReason.UNEXPECTED_END_OF_FILE),
    ("iloc box", DecodeFailureReason.MISSING_INDEX_TABLE),
    ("'iloc' box", DecodeFailureReason.MISSING_INDEX_TABLE),
    ("file bounds", DecodeFailureReason.OUT_OF_FILE_BOUNDS),
    ("image file is truncated", DecodeFailureReason.TRUNCATED_STREAM),
    ("premature end", DecodeFailureReason.TRUNCATED_STREAM),
    ("truncated", DecodeFailureReason.TRUNCATED_STREAM),
)

# =============================================================================
# DESTINATION LAYOUT
# =============================================================================

CORRUPTION_FOLDERS: Dict[CorruptnessVerdict, str] = {
    CorruptnessVerdict.PARTIAL_CORRUPTION: "PartialCorrupt",
    CorruptnessVerdict.TRUNCATED: "Truncated",
    CorruptnessVerdict.INVALID_DECODER: "InvalidDecoder",
}

ERROR_FOLDER = "error"

MONTH_ABBREVIATIONS: Tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

DUPLICATE_SUFFIX_FORMAT = "{stem}_{counter:03d}{suffix}"

# =============================================================================
# FILE OPERATIONS
# =============================================================================

COPY_CHUNK_SIZE = 1024 * 1024
HASH_CHUNK_SIZE = 64 * 1024
