"""Module de logging."""

from ini_config_utils.logging.base import Logger
from ini_config_utils.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
