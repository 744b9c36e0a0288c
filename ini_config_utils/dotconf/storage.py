"""Accès disque du fichier INI.

IniFileStorage lit le fichier ligne par ligne et le réécrit, soit par
fichier temporaire puis os.replace() (écriture atomique), soit en
tronquant directement le fichier cible.

Les octets invalides pour l'encodage configuré sont conservés tels
quels d'une lecture à l'écriture suivante (gestionnaire
"surrogateescape").
"""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterator, Optional

from ini_config_utils.logging.base import Logger

# Octets non décodables : lus en surrogates, réécrits à l'identique
DECODE_ERRORS = "surrogateescape"


class IniFileStorage:
    """Lecture et écriture des lignes d'un fichier INI.

    Les lignes manipulées ne portent pas de caractère de fin de ligne ;
    chaque ligne écrite est terminée par "\\n".

    Attributes:
        path: Chemin du fichier INI.
        encoding: Encodage du fichier.
        atomic: Écriture par fichier temporaire et renommage.
    """

    def __init__(
        self,
        path: str | Path,
        encoding: str = "utf-8",
        atomic: bool = True,
        logger: Optional[Logger] = None,
    ) -> None:
        self.path = Path(path)
        self.encoding = encoding
        self.atomic = atomic
        self._logger = logger

    def iter_lines(self) -> Iterator[str]:
        """Itère sur les lignes du fichier, sans fin de ligne.

        Raises:
            OSError: Si le fichier ne peut pas être ouvert.
        """
        with open(
            self.path, "r", encoding=self.encoding, errors=DECODE_ERRORS
        ) as f:
            for line in f:
                yield line.rstrip("\n")

    def read_lines(self, missing_ok: bool = False) -> list[str]:
        """Lit toutes les lignes du fichier.

        Args:
            missing_ok: Retourne une liste vide si le fichier n'existe
                pas au lieu de lever FileNotFoundError.

        Raises:
            OSError: Si le fichier ne peut pas être ouvert.
        """
        try:
            return list(self.iter_lines())
        except FileNotFoundError:
            if missing_ok:
                return []
            raise

    def write_lines(self, lines: list[str]) -> None:
        """Remplace le contenu du fichier par les lignes données.

        Raises:
            OSError: Si l'écriture échoue.
        """
        content = "".join(f"{line}\n" for line in lines)
        if self.atomic:
            self._write_atomic(content)
        else:
            with open(
                self.path, "w", encoding=self.encoding, errors=DECODE_ERRORS
            ) as f:
                f.write(content)

    def append_lines(self, lines: list[str]) -> None:
        """Ajoute des lignes en fin de fichier, en le créant si besoin.

        Écriture directe en mode ajout, sans renommage. Un saut de ligne
        est inséré d'abord si le fichier existant ne se termine pas par
        une fin de ligne.

        Raises:
            OSError: Si l'écriture échoue.
        """
        prefix = "" if self._ends_with_newline() else "\n"
        with open(
            self.path, "a", encoding=self.encoding, errors=DECODE_ERRORS
        ) as f:
            f.write(prefix + "".join(f"{line}\n" for line in lines))

    def _ends_with_newline(self) -> bool:
        """True si le fichier est absent, vide ou terminé par '\\n'."""
        try:
            with open(self.path, "rb") as f:
                f.seek(0, os.SEEK_END)
                if f.tell() == 0:
                    return True
                f.seek(-1, os.SEEK_END)
                return f.read(1) == b"\n"
        except FileNotFoundError:
            return True

    def _write_atomic(self, content: str) -> None:
        """Écrit dans un fichier temporaire voisin puis le renomme.

        Si le chemin est un lien symbolique, c'est sa cible qui est
        remplacée ; le lien reste en place.
        """
        target = self.path.resolve()
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
        try:
            with os.fdopen(
                fd, "w", encoding=self.encoding, errors=DECODE_ERRORS
            ) as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            if target.exists():
                shutil.copymode(target, tmp_name)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        if self._logger:
            self._logger.log_info(
                f"Fichier {target} remplacé atomiquement."
            )
