"""Lecteur/écrivain de fichiers de configuration INI.

ConfigParser charge un fichier INI dans un cache mémoire
{section: {clé: valeur}} protégé par un verrou, sert les lectures
depuis ce cache et répercute chaque écriture dans le fichier avec
l'une des trois stratégies de rewriter.

Format reconnu :
- lignes vides et commentaires ('#' ou ';') ignorés
- en-tête "[section]", qui doit se terminer par ']'
- entrée "clé = valeur", seul le premier '=' compte
"""

import threading
from pathlib import Path
from typing import Optional

from ini_config_utils.dotconf.base import IniStore, LoadResult
from ini_config_utils.dotconf.lines import (
    LineKind,
    classify,
    read_section,
    split_key_value,
    trim,
)
from ini_config_utils.dotconf.options import ParserOptions
from ini_config_utils.dotconf.rewriter import (
    STRATEGIES,
    RewriteStrategy,
    choose_strategy,
    section_block,
)
from ini_config_utils.dotconf.storage import IniFileStorage
from ini_config_utils.dotconf.value import ConfigValue
from ini_config_utils.errors.exceptions import (
    FileConfigurationError,
    IniSyntaxError,
    IniWriteError,
)
from ini_config_utils.logging.base import Logger


class ConfigParser(IniStore):
    """Configuration INI avec cache mémoire et écriture persistante.

    Toutes les opérations publiques prennent le même verrou pendant
    toute leur durée, entrées/sorties disque comprises.

    Attributes:
        path: Chemin du fichier INI.
        options: Politiques de chargement et d'écriture.

    Example:
        >>> parser = ConfigParser("/etc/app.ini")
        >>> result = parser.init()
        >>> if not result:
        ...     print(f"Erreur ligne {result.line_count}")
        >>> port = parser.get("server", "port").as_int32(8080)
        >>> parser.set("server", "timeout", "30")
        True
    """

    def __init__(
        self,
        filename: str | Path,
        options: Optional[ParserOptions] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        """Associe le parser à un fichier, sans y accéder.

        Args:
            filename: Chemin du fichier INI.
            options: Politiques du parser. Par défaut ParserOptions().
            logger: Logger optionnel.
        """
        self.path = Path(filename)
        self.options = options or ParserOptions()
        self._logger = logger
        self._storage = IniFileStorage(
            self.path,
            encoding=self.options.encoding,
            atomic=self.options.atomic_write,
            logger=logger,
        )
        self._sections: dict[str, dict[str, str]] = {}
        self._lock = threading.Lock()

    # Chargement

    def init(self) -> LoadResult:
        """Charge le fichier dans le cache mémoire.

        Les entrées lues s'ajoutent au cache existant ; une clé en
        double garde sa dernière valeur. En cas d'échec, les lignes
        valides qui précèdent la ligne fautive restent en cache.

        Returns:
            LoadResult avec le nombre de lignes lues, ou le numéro de
            la ligne fautive.

        Raises:
            FileConfigurationError: Si le fichier ne peut pas être
                ouvert et que options.missing_file vaut "raise".
        """
        with self._lock:
            try:
                lines = self._storage.read_lines()
            except OSError as e:
                return self._on_missing_file(e)

            section = ""
            for line_number, line in enumerate(lines, start=1):
                kind = classify(line)
                if kind in (LineKind.BLANK, LineKind.COMMENT):
                    continue
                if kind is LineKind.SECTION:
                    section = read_section(line)
                    if not section:
                        return self._load_failed(
                            line_number,
                            f"en-tête de section invalide : {trim(line)!r}",
                        )
                    continue
                if not self._read_value(line, section):
                    return self._load_failed(
                        line_number, self._describe_entry_error(line, section)
                    )

        if self._logger:
            self._logger.log_info(
                f"Fichier {self.path} chargé : {len(lines)} ligne(s)."
            )
        return LoadResult(success=True, line_count=len(lines))

    def load_or_raise(self) -> LoadResult:
        """Comme init(), mais lève une exception en cas d'échec.

        Raises:
            IniSyntaxError: Si une ligne est mal formée.
            FileConfigurationError: Voir init().
        """
        result = self.init()
        if not result:
            raise IniSyntaxError(
                result.error or "ligne invalide", result.line_count
            )
        return result

    def _read_value(self, line: str, section: str) -> bool:
        """Enregistre une entrée "clé = valeur" dans la section courante."""
        pair = split_key_value(line)
        if not section or pair is None or not pair[0]:
            return False
        key, value = pair
        self._sections.setdefault(section, {})[key] = value
        return True

    @staticmethod
    def _describe_entry_error(line: str, section: str) -> str:
        if not section:
            return f"entrée hors section : {trim(line)!r}"
        if split_key_value(line) is None:
            return f"'=' manquant : {trim(line)!r}"
        return f"clé vide : {trim(line)!r}"

    def _load_failed(self, line_number: int, message: str) -> LoadResult:
        if self._logger:
            self._logger.log_error(
                f"Échec du chargement de {self.path}, ligne {line_number} : "
                f"{message}"
            )
        return LoadResult(success=False, line_count=line_number, error=message)

    def _on_missing_file(self, error: OSError) -> LoadResult:
        if self.options.raise_on_missing_file:
            raise FileConfigurationError(
                f"Impossible d'ouvrir {self.path} : {error}"
            ) from error
        if self._logger:
            self._logger.log_warning(
                f"Fichier {self.path} illisible, configuration vide : {error}"
            )
        return LoadResult(success=True, line_count=0)

    # Lecture

    def get(self, section: str, key: str) -> ConfigValue:
        """Retourne la valeur en cache, ConfigValue("") si absente."""
        section, key = trim(section), trim(key)
        with self._lock:
            return ConfigValue(self._sections.get(section, {}).get(key, ""))

    def have(self, section: str, key: str) -> bool:
        section, key = trim(section), trim(key)
        with self._lock:
            return key in self._sections.get(section, {})

    def sections(self) -> list[str]:
        """Liste les sections connues du cache."""
        with self._lock:
            return list(self._sections)

    def keys(self, section: str) -> list[str]:
        """Liste les clés d'une section, vide si elle est inconnue."""
        section = trim(section)
        with self._lock:
            return list(self._sections.get(section, {}))

    def get_section(self, section: str) -> dict[str, str]:
        """Retourne une copie des paires clé/valeur d'une section."""
        section = trim(section)
        with self._lock:
            return dict(self._sections.get(section, {}))

    # Écriture

    def set(self, section: str, key: str, value: str) -> bool:
        """Enregistre une valeur en cache et dans le fichier.

        La stratégie dépend du cache : section inconnue, bloc ajouté en
        fin de fichier ; clé inconnue, ligne insérée en tête de section ;
        sinon, ligne remplacée en place. Le cache est mis à jour même si
        l'écriture échoue.

        Args:
            section: Nom de la section.
            key: Nom de la clé.
            value: Valeur, non vide.

        Returns:
            False si un argument est vide après nettoyage, True sinon.

        Raises:
            IniWriteError: Si l'écriture échoue et que
                options.write_errors vaut "raise".
        """
        section, key, value = trim(section), trim(key), trim(value)
        if not section or not key or not value:
            return False

        with self._lock:
            strategy = choose_strategy(self._sections, section, key)
            try:
                self._rewrite(strategy, section, key, value)
            except OSError as e:
                self._on_write_error(strategy, e)
            finally:
                self._sections.setdefault(section, {})[key] = value
        return True

    def _rewrite(
        self, strategy: RewriteStrategy, section: str, key: str, value: str
    ) -> None:
        appending = strategy is RewriteStrategy.APPEND_SECTION
        if appending and not self._storage.atomic:
            self._storage.append_lines(section_block(section, key, value))
            changed = 2
        else:
            # Fichier absent : la nouvelle section le crée
            lines = self._storage.read_lines(missing_ok=appending)
            result = STRATEGIES[strategy](lines, section, key, value)
            changed = result.changed
            if changed:
                self._storage.write_lines(result.lines)

        if not self._logger:
            return
        if changed:
            self._logger.log_info(
                f"{strategy} : [{section}] {key} écrit dans {self.path}."
            )
        else:
            self._logger.log_warning(
                f"{strategy} : [{section}] {key} introuvable dans "
                f"{self.path}, fichier inchangé."
            )

    def _on_write_error(
        self, strategy: RewriteStrategy, error: OSError
    ) -> None:
        message = f"{strategy} : échec d'écriture de {self.path} : {error}"
        if self.options.raise_on_write_error:
            raise IniWriteError(message) from error
        if self._logger:
            self._logger.log_warning(message)
