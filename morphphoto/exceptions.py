# morphphoto/exceptions.py
"""
Custom exceptions for MorphPhoto.

Centralized location for all application-level exception classes to avoid
duplicating exception definitions across modules.
"""

# Each exception type represents a distinct error domain with specific
# handling requirements


class MorphPhotoError(Exception):
    """Base exception for all MorphPhoto-specific errors."""

    pass


class ConfigurationError(MorphPhotoError):
    """Custom exception for configuration and argument validation errors."""

    pass


class DirectoryScanError(MorphPhotoError):
    """Custom exception for source directory enumeration failures."""

    pass


class PathResolutionConflictError(MorphPhotoError):
    """
    Raised when a corrupt file reaches path resolution under the skip policy.

    This is a caller contract violation and is never recovered by the organizer.
    """

    pass


class FileCopyError(MorphPhotoError):
    """Custom exception for file copy failures."""

    pass


class OrganizerError(MorphPhotoError):
    """Custom exception for batch-level organizer failures."""

    pass
