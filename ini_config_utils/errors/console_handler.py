"""
    ConsoleErrorHandler (générique, configurable)
"""
from ini_config_utils.errors.base import ErrorHandler
from ini_config_utils.errors.exceptions import (ApplicationError,
                                                FileConfigurationError,
                                                IniSyntaxError,
                                                IniWriteError,
                                                ValidationError)

DEFAULT_SOLUTIONS: dict[type[Exception], str] = {
    IniSyntaxError: "Corrigez la ligne indiquée du fichier INI.",
    FileConfigurationError: "Vérifiez le chemin du fichier INI.",
    IniWriteError: "Vérifiez les permissions du fichier et du répertoire.",
    ValidationError: "Vérifiez les options du parser.",
}


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche un message de solution adapté au type.
    """

    def __init__(
        self,
        base_error_type: type[Exception] = ApplicationError,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base pour distinguer erreurs
                             connues/inconnues (défaut: ApplicationError).
            solutions: Dictionnaire {TypeException: "message solution"},
                       fusionné avec DEFAULT_SOLUTIONS.
        """
        self.base_error_type = base_error_type
        self.solutions = {**DEFAULT_SOLUTIONS, **(solutions or {})}

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, self.base_error_type):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _handle_known_error(self, error: Exception) -> None:
        print(f"\n🛑 {type(error).__name__}: {str(error)}")
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                print(f"\n🔧 Solution : {solution}")
                return
        print("\n🔧 Solution : Voir les suggestions ci-dessus.")

    def _handle_unknown_error(self, error: Exception) -> None:
        print(f"\n💥 Erreur inattendue: {str(error)}")
        print(f"Type: {type(error).__name__}")
