"""
Logger Handlers Module.

loguru sinks for the centralized logger service.
"""

from .console_handler import ConsoleHandler
from .file_handler import FileHandler

__all__ = ["ConsoleHandler", "FileHandler"]
