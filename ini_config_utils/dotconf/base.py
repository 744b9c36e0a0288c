"""Interface abstraite d'un magasin de configuration INI.

Ce module définit le contrat (ABC) implémenté par ConfigParser :
chargement, lecture typée et écriture persistante de paires
section/clé/valeur.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ini_config_utils.dotconf.value import ConfigValue


@dataclass(frozen=True)
class LoadResult:
    """Résultat d'un chargement de fichier INI.

    Évalué à True si le chargement a réussi.

    Attributes:
        success: True si aucune ligne n'a échoué la validation.
        line_count: Nombre de lignes lues, ou numéro (à partir de 1)
            de la ligne fautive en cas d'échec.
        error: Description de l'erreur en cas d'échec.
    """

    success: bool
    line_count: int
    error: str | None = None

    def __bool__(self) -> bool:
        return self.success


class IniStore(ABC):
    """Interface pour un magasin de configuration adossé à un fichier INI."""

    @abstractmethod
    def init(self) -> LoadResult:
        """Charge le fichier dans le cache mémoire.

        Returns:
            LoadResult décrivant le chargement.
        """
        pass

    @abstractmethod
    def get(self, section: str, key: str) -> ConfigValue:
        """Retourne la valeur d'une clé, vide si absente.

        Args:
            section: Nom de la section.
            key: Nom de la clé.

        Returns:
            ConfigValue encapsulant la valeur.
        """
        pass

    @abstractmethod
    def have(self, section: str, key: str) -> bool:
        """Indique si la clé existe dans la section."""
        pass

    @abstractmethod
    def set(self, section: str, key: str, value: str) -> bool:
        """Enregistre une valeur en mémoire et dans le fichier.

        Args:
            section: Nom de la section.
            key: Nom de la clé.
            value: Valeur à écrire.

        Returns:
            False si un des arguments est vide après nettoyage,
            True sinon.
        """
        pass
