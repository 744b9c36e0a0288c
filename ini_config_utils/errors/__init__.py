"""Module de gestion des erreurs."""

from ini_config_utils.errors.base import ErrorHandler, ErrorHandlerChain
from ini_config_utils.errors.exceptions import (ApplicationError,
                                                ConfigurationError,
                                                FileConfigurationError,
                                                IniSyntaxError,
                                                IniWriteError,
                                                ValidationError)
from ini_config_utils.errors.console_handler import ConsoleErrorHandler
from ini_config_utils.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "IniSyntaxError",
    "IniWriteError",
    "ValidationError",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
