"""Options de comportement de ConfigParser.

Ce module fournit ParserOptions, une dataclass immuable décrivant les
politiques du parser, et ParserOptionsLoader pour la charger depuis un
fichier TOML ou JSON.

Example:
    Fichier de configuration attendu:

        [parser]
        missing_file = "ignore"
        write_errors = "raise"
        atomic_write = true
        encoding = "utf-8"

    Chargement:

        options = ParserOptionsLoader("config/app.toml").load()
        parser = ConfigParser("/etc/app.ini", options=options)
"""

import codecs
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any

from ini_config_utils.config import ConfigFileLoader, ConfigLoader
from ini_config_utils.errors.exceptions import ValidationError


class FailurePolicy(StrEnum):
    """Comportement face à un fichier illisible ou non inscriptible."""

    IGNORE = "ignore"
    RAISE = "raise"


def _to_policy(name: str, value: Any) -> FailurePolicy:
    try:
        return FailurePolicy(value)
    except ValueError:
        allowed = [p.value for p in FailurePolicy]
        raise ValidationError(
            f"{name}={value!r} invalide. Valeurs autorisées : {allowed}"
        ) from None


@dataclass(frozen=True)
class ParserOptions:
    """Politiques appliquées par ConfigParser.

    Les valeurs par défaut reproduisent le comportement historique :
    un fichier absent au chargement donne une configuration vide, et
    un échec d'écriture est ignoré (le cache mémoire reste à jour).

    Attributes:
        missing_file: "ignore" ou "raise" si le fichier ne peut pas
            être ouvert par init().
        write_errors: "ignore" ou "raise" si une réécriture échoue
            pendant set().
        atomic_write: Écrire dans un fichier temporaire puis renommer,
            au lieu de tronquer le fichier cible.
        encoding: Encodage de lecture et d'écriture du fichier INI.
    """

    missing_file: FailurePolicy = FailurePolicy.IGNORE
    write_errors: FailurePolicy = FailurePolicy.IGNORE
    atomic_write: bool = True
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Normalise les politiques et valide l'encodage.

        Raises:
            ValidationError: Si une option est invalide.
        """
        object.__setattr__(
            self, "missing_file", _to_policy("missing_file", self.missing_file)
        )
        object.__setattr__(
            self, "write_errors", _to_policy("write_errors", self.write_errors)
        )
        if not isinstance(self.atomic_write, bool):
            raise ValidationError(
                f"atomic_write={self.atomic_write!r} doit être un booléen."
            )
        try:
            codecs.lookup(self.encoding)
        except (LookupError, TypeError):
            raise ValidationError(
                f"encoding={self.encoding!r} n'est pas un encodage connu."
            ) from None

    @property
    def raise_on_missing_file(self) -> bool:
        return self.missing_file is FailurePolicy.RAISE

    @property
    def raise_on_write_error(self) -> bool:
        return self.write_errors is FailurePolicy.RAISE

    @classmethod
    def strict(cls, **overrides: Any) -> "ParserOptions":
        """Options levant une exception pour tout échec de fichier."""
        values: dict[str, Any] = {
            "missing_file": FailurePolicy.RAISE,
            "write_errors": FailurePolicy.RAISE,
        }
        values.update(overrides)
        return cls(**values)


class ParserOptionsLoader(ConfigFileLoader[ParserOptions]):
    """Chargeur de ParserOptions depuis la section [parser].

    Attributes:
        DEFAULT_SECTION: Nom de la section par défaut ("parser").
    """

    DEFAULT_SECTION: str = "parser"
    KNOWN_KEYS = frozenset(
        {"missing_file", "write_errors", "atomic_write", "encoding"}
    )

    def __init__(
        self,
        config_path: str | Path,
        config_loader: ConfigLoader | None = None
    ) -> None:
        """Initialise le loader.

        Args:
            config_path: Chemin vers le fichier (.toml ou .json).
            config_loader: Chargeur de configuration injectable.
        """
        super().__init__(config_path, config_loader)

    def load(self, section: str | None = None) -> ParserOptions:
        """Charge et retourne un ParserOptions.

        Les clés absentes prennent leur valeur par défaut.

        Args:
            section: Nom de la section à charger. Par défaut "parser".

        Returns:
            Instance de ParserOptions.

        Raises:
            KeyError: Si la section n'existe pas.
            ValidationError: Si une clé est inconnue ou invalide.
        """
        section_name = section or self.DEFAULT_SECTION
        data: dict[str, Any] = self._get_section(section_name)

        unknown = sorted(set(data) - self.KNOWN_KEYS)
        if unknown:
            raise ValidationError(
                f"Options inconnues dans [{section_name}] : {unknown}"
            )

        return ParserOptions(**data)
