"""
File Handler for the Logger Service.

Registers a rotating loguru file sink. Files receive plain, uncolored lines
with the originating logger name, function and line.
"""

from pathlib import Path
from typing import Optional, Union

from loguru import logger

from ..constants import (
    FILE_LOG_ENCODING,
    FILE_LOG_FORMAT,
    FILE_LOG_RETENTION,
    FILE_LOG_ROTATION,
)


class FileHandler:
    """Rotating file sink configuration."""

    def __init__(
        self,
        log_file: Union[str, Path],
        level: str = "DEBUG",
        rotation: str = FILE_LOG_ROTATION,
        retention: int = FILE_LOG_RETENTION,
    ):
        self.log_file = Path(log_file)
        self.level = level
        self.rotation = rotation
        self.retention = retention
        self.handler_id: Optional[int] = None

    def install(self) -> int:
        """Create the log directory and add the sink to loguru."""
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self.handler_id = logger.add(
            str(self.log_file),
            level=self.level,
            format=FILE_LOG_FORMAT,
            rotation=self.rotation,
            retention=self.retention,
            encoding=FILE_LOG_ENCODING,
            colorize=False,
        )
        return self.handler_id

    def remove(self) -> None:
        if self.handler_id is not None:
            logger.remove(self.handler_id)
            self.handler_id = None
