"""Interface abstraite pour le logging des opérations INI."""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Interface pour le système de logging.

    Injectée dans ConfigParser pour tracer les chargements et les
    réécritures de fichiers.
    """

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Log une erreur."""
        pass
