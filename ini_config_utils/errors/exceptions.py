"""
Exceptions personnalisées pour ini_config_utils.

Par défaut ConfigParser ne lève aucune de ces exceptions : elles ne
sont utilisées qu'avec les politiques strictes de ParserOptions ou
via ConfigParser.load_or_raise().
"""


class ApplicationError(Exception):
    """Exception de base pour toute la bibliothèque."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour les erreurs de configuration."""
    pass


class FileConfigurationError(ConfigurationError):
    """Fichier de configuration absent ou illisible."""
    pass


class IniSyntaxError(ConfigurationError):
    """Ligne mal formée rencontrée lors du chargement d'un fichier INI.

    Attributes:
        line_number: Numéro (à partir de 1) de la ligne fautive.
    """

    def __init__(self, message: str, line_number: int) -> None:
        super().__init__(f"ligne {line_number}: {message}")
        self.line_number = line_number


class IniWriteError(ApplicationError):
    """Échec de réécriture du fichier INI."""
    pass


class ValidationError(ApplicationError):
    """Valeur d'option invalide."""
    pass
