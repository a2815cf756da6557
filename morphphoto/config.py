# morphphoto/config.py
from pathlib import Path
from typing import List, Optional, Union

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_BLACK_CHANNEL_THRESHOLD,
    DEFAULT_CORRUPTION_THRESHOLD,
    DEFAULT_IMAGE_EXTENSIONS,
    DEFAULT_SAMPLE_BUDGET,
)
from .enums import CorruptFileHandling, LogLevel, OrganizationType
from .exceptions import ConfigurationError


class Settings(BaseSettings):
    # Organization policy
    organization_type: OrganizationType = Field(
        default=OrganizationType.BY_DATE,
        description="Group destination by date or by extension first",
    )
    corrupt_file_handling: CorruptFileHandling = Field(
        default=CorruptFileHandling.NORMAL_ORGANIZE,
        description="What to do with files that fail decoding or sampling",
    )

    # Can be set via MORPHPHOTO_FILE_EXTENSIONS as comma-separated string
    file_extensions: Union[str, List[str]] = Field(
        default=list(DEFAULT_IMAGE_EXTENSIONS),
        description="Extensions to organize. Can be comma-separated string.",
    )

    @property
    def file_extensions_list(self) -> List[str]:
        """Normalized extensions: lowercase, leading dot"""
        if isinstance(self.file_extensions, str):
            raw = self.file_extensions.split(",")
        else:
            raw = self.file_extensions

        normalized = []
        for ext in raw:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized

    # Partial corruption sampling
    sample_budget: int = Field(
        default=DEFAULT_SAMPLE_BUDGET,
        ge=1,
        le=1_000_000,
        description="Number of pixels sampled from the left half of each image",
    )
    black_channel_threshold: int = Field(
        default=DEFAULT_BLACK_CHANNEL_THRESHOLD,
        ge=1,
        le=255,
        description="A sample is black when R, G and B are all below this value",
    )
    corruption_threshold: float = Field(
        default=DEFAULT_CORRUPTION_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Black sample ratio above which an image is partially corrupt",
    )

    # Default directories when the CLI gets no positional arguments
    default_source_directory: Optional[str] = Field(
        default=None, description="Source directory used when none is given"
    )
    default_destination_root: Optional[str] = Field(
        default=None,
        description="Destination root; the source folder name is appended to it",
    )

    def get_default_destination(self, source_directory: Union[str, Path]) -> Optional[Path]:
        """Destination for a source when none is given: <root>/<source folder name>"""
        if not self.default_destination_root:
            return None
        return Path(self.default_destination_root) / Path(source_directory).name

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level (TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL)",
    )
    log_file: Optional[str] = Field(
        default=None, description="Log file path (optional)"
    )
    use_colors: bool = Field(
        default=True, description="Colorize console output when stdout is a TTY"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v) -> LogLevel:
        """Validate log level is one of the allowed values"""
        if isinstance(v, LogLevel):
            return v
        allowed_levels = LogLevel.__members__.keys()
        v_upper = str(v).upper()
        if v_upper not in allowed_levels:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: {', '.join(allowed_levels)}"
            )
        return LogLevel[v_upper]

    model_config = SettingsConfigDict(
        env_prefix="MORPHPHOTO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def load_settings(**overrides) -> Settings:
    """
    Build Settings from the environment and .env file.

    Raises:
        ConfigurationError: If any value fails validation
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigurationError(f"Invalid settings: {problems}") from e
