"""
INI Config Utils - Lecture et écriture de fichiers de configuration INI.

Modules disponibles:
- dotconf: Parser INI avec cache mémoire et réécriture du fichier
  (ConfigParser, ConfigValue, ParserOptions)
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions et handlers d'erreurs
- config: Chargement de configuration (TOML, JSON)
"""

__version__ = "1.0.0"

from ini_config_utils.logging import Logger, FileLogger
from ini_config_utils.errors import (
    ApplicationError,
    ConfigurationError,
    FileConfigurationError,
    IniSyntaxError,
    IniWriteError,
    ValidationError,
    ErrorHandler,
    ErrorHandlerChain,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from ini_config_utils.config import (
    ConfigLoader,
    ConfigFileLoader,
    FileConfigLoader,
)
from ini_config_utils.dotconf import (
    IniStore,
    LoadResult,
    ConfigParser,
    ConfigValue,
    FailurePolicy,
    ParserOptions,
    ParserOptionsLoader,
    RewriteStrategy,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Errors
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "IniSyntaxError",
    "IniWriteError",
    "ValidationError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    # Config
    "ConfigLoader",
    "ConfigFileLoader",
    "FileConfigLoader",
    # DotConf
    "IniStore",
    "LoadResult",
    "ConfigParser",
    "ConfigValue",
    "FailurePolicy",
    "ParserOptions",
    "ParserOptionsLoader",
    "RewriteStrategy",
]
