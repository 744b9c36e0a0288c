"""Classification des lignes d'un fichier INI.

Fonctions pures partagées par le chargement et par les stratégies
de réécriture :
- trim / ltrim / rtrim : suppression des espaces
- classify : type d'une ligne (vide, commentaire, section, entrée)
- read_section : nom d'une section depuis sa ligne d'en-tête
- find_value : test de correspondance d'une clé
- split_key_value : découpage "clé = valeur" sur le premier '='
"""

from enum import StrEnum

COMMENT_PREFIXES = ("#", ";")
SECTION_PREFIX = "["
SECTION_SUFFIX = "]"
KEY_VALUE_SEPARATOR = "="


class LineKind(StrEnum):
    """Type d'une ligne INI, déterminé par son premier caractère utile."""

    BLANK = "blank"
    COMMENT = "comment"
    SECTION = "section"
    ENTRY = "entry"


def ltrim(text: str) -> str:
    """Retourne une copie sans espaces en début de chaîne."""
    return text.lstrip()


def rtrim(text: str) -> str:
    """Retourne une copie sans espaces en fin de chaîne."""
    return text.rstrip()


def trim(text: str) -> str:
    """Retourne une copie sans espaces aux deux extrémités."""
    return text.strip()


def classify(line: str) -> LineKind:
    """Détermine le type d'une ligne brute.

    Args:
        line: Ligne lue dans le fichier, non nettoyée.

    Returns:
        Le LineKind correspondant.
    """
    stripped = trim(line)
    if not stripped:
        return LineKind.BLANK
    if stripped.startswith(COMMENT_PREFIXES):
        return LineKind.COMMENT
    if stripped.startswith(SECTION_PREFIX):
        return LineKind.SECTION
    return LineKind.ENTRY


def read_section(line: str) -> str:
    """Extrait le nom de section d'une ligne d'en-tête "[nom]".

    Args:
        line: Ligne d'en-tête, déjà nettoyée ou non.

    Returns:
        Le nom nettoyé, ou une chaîne vide si la ligne ne se termine
        pas par ']'.
    """
    stripped = trim(line)
    if not stripped.endswith(SECTION_SUFFIX):
        return ""
    return trim(stripped[1:-1])


def split_key_value(line: str) -> tuple[str, str] | None:
    """Découpe une ligne "clé = valeur" sur le premier '='.

    La valeur peut elle-même contenir des '='.

    Returns:
        Le couple (clé, valeur) nettoyé, ou None si la ligne ne
        contient pas de '='.
    """
    key, separator, value = line.partition(KEY_VALUE_SEPARATOR)
    if not separator:
        return None
    return trim(key), trim(value)


def find_value(line: str, key: str) -> bool:
    """Indique si la ligne définit la clé donnée."""
    pair = split_key_value(line)
    return pair is not None and pair[0] == key


def format_entry(key: str, value: str) -> str:
    """Formate une entrée telle qu'elle est écrite dans le fichier."""
    return f"{key} {KEY_VALUE_SEPARATOR} {value}"


def format_section(section: str) -> str:
    """Formate une ligne d'en-tête de section."""
    return f"{SECTION_PREFIX}{section}{SECTION_SUFFIX}"
