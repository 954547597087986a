"""
Loggers module - Sinks for notification outcomes.
"""

from .base import BaseLogger
from .file_logger import FileLogger

__all__ = [
    "BaseLogger",
    "FileLogger",
]
