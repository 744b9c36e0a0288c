"""Stratégies de réécriture d'un fichier INI.

Chaque stratégie travaille sur la liste des lignes brutes du fichier
(sans caractère de fin de ligne) et retourne la nouvelle liste. Les
lignes non concernées sont conservées telles quelles, commentaires et
lignes vides compris.

- append_section : nouveau bloc "[section]" + "clé = valeur" en fin
- insert_key : nouvelle clé en tête d'une section existante
- update_key : remplacement en place d'une clé existante
"""

from dataclasses import dataclass
from enum import StrEnum

from ini_config_utils.dotconf.lines import (
    LineKind,
    classify,
    find_value,
    format_entry,
    format_section,
    read_section,
)


class RewriteStrategy(StrEnum):
    """Stratégie choisie par ConfigParser.set()."""

    APPEND_SECTION = "append_section"
    INSERT_KEY = "insert_key"
    UPDATE_KEY = "update_key"


@dataclass(frozen=True)
class RewriteResult:
    """Résultat d'une stratégie de réécriture.

    Attributes:
        lines: Contenu complet du fichier après réécriture.
        changed: Nombre de lignes ajoutées ou remplacées.
    """

    lines: list[str]
    changed: int


def section_block(section: str, key: str, value: str) -> list[str]:
    """Lignes d'une nouvelle section contenant une seule entrée."""
    return [format_section(section), format_entry(key, value)]


def append_section(
    lines: list[str], section: str, key: str, value: str
) -> RewriteResult:
    """Ajoute un bloc de section en fin de fichier."""
    return RewriteResult(
        lines=list(lines) + section_block(section, key, value), changed=2
    )


def insert_key(
    lines: list[str], section: str, key: str, value: str
) -> RewriteResult:
    """Insère "clé = valeur" avant la première entrée de la section.

    Les commentaires et lignes vides qui suivent directement l'en-tête
    restent avant la nouvelle ligne. Seule la première occurrence de la
    section reçoit l'insertion. Si la section ne contient aucune entrée
    dans le fichier, rien n'est inséré (changed == 0).
    """
    result: list[str] = []
    current = ""
    inserted = False

    for line in lines:
        kind = classify(line)
        if kind is LineKind.SECTION:
            current = read_section(line)
        elif kind is LineKind.ENTRY and current == section and not inserted:
            result.append(format_entry(key, value))
            inserted = True
        result.append(line)

    return RewriteResult(lines=result, changed=int(inserted))


def update_key(
    lines: list[str], section: str, key: str, value: str
) -> RewriteResult:
    """Remplace chaque ligne de la section qui définit la clé.

    Toutes les occurrences sont réécrites, y compris dans un en-tête
    de section répété, puisque le chargement retient la dernière.
    """
    result: list[str] = []
    current = ""
    replaced = 0

    for line in lines:
        kind = classify(line)
        if kind is LineKind.SECTION:
            current = read_section(line)
        elif (
            kind is LineKind.ENTRY
            and current == section
            and find_value(line, key)
        ):
            result.append(format_entry(key, value))
            replaced += 1
            continue
        result.append(line)

    return RewriteResult(lines=result, changed=replaced)


STRATEGIES = {
    RewriteStrategy.APPEND_SECTION: append_section,
    RewriteStrategy.INSERT_KEY: insert_key,
    RewriteStrategy.UPDATE_KEY: update_key,
}


def choose_strategy(
    store: dict[str, dict[str, str]], section: str, key: str
) -> RewriteStrategy:
    """Choisit la stratégie selon l'état courant du cache."""
    if section not in store:
        return RewriteStrategy.APPEND_SECTION
    if key not in store[section]:
        return RewriteStrategy.INSERT_KEY
    return RewriteStrategy.UPDATE_KEY
