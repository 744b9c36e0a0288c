"""Valeur typée retournée par ConfigParser.get().

ConfigValue encapsule la chaîne brute lue dans le fichier INI et
propose des conversions avec valeur par défaut. Une chaîne vide
signifie « clé absente » : toutes les conversions retournent alors
la valeur par défaut.
"""

import re
from dataclasses import dataclass

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def parse_int_prefix(text: str, minimum: int, maximum: int) -> int:
    """Convertit le préfixe numérique d'une chaîne, à la manière d'atoi.

    Les espaces initiaux sont ignorés, un signe optionnel est accepté
    et la lecture s'arrête au premier caractère non numérique. Un texte
    sans préfixe numérique donne 0. Le résultat est borné à
    [minimum, maximum].

    Args:
        text: Chaîne à convertir.
        minimum: Borne inférieure du résultat.
        maximum: Borne supérieure du résultat.

    Returns:
        L'entier lu, ou 0.

    Example:
        >>> parse_int_prefix("  42abc", INT32_MIN, INT32_MAX)
        42
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        return 0
    return max(minimum, min(maximum, int(match.group(1))))


@dataclass(frozen=True)
class ConfigValue:
    """Valeur immuable d'une clé de configuration.

    Attributes:
        value: Chaîne brute (déjà nettoyée des espaces), vide si la
            clé n'existe pas.

    Example:
        >>> ConfigValue("8080").as_int32(0)
        8080
        >>> ConfigValue("").as_string("défaut")
        'défaut'
        >>> ConfigValue("abc").as_int64(7)
        0
    """

    value: str = ""

    def is_empty(self) -> bool:
        """Indique si la valeur est vide (clé absente)."""
        return not self.value

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __str__(self) -> str:
        return self.value

    def as_string(self, default: str = "") -> str:
        """Retourne la valeur brute, ou default si elle est vide."""
        if self.is_empty():
            return default
        return self.value

    def as_int32(self, default: int = 0) -> int:
        """Retourne la valeur en entier 32 bits.

        Le texte non numérique donne 0 (pas d'erreur). Seule une
        valeur vide retourne default.

        Args:
            default: Valeur retournée si la clé est absente.

        Returns:
            Entier borné à l'intervalle signé 32 bits.
        """
        if self.is_empty():
            return default
        return parse_int_prefix(self.value, INT32_MIN, INT32_MAX)

    def as_int64(self, default: int = 0) -> int:
        """Retourne la valeur en entier 64 bits.

        Mêmes règles que as_int32(), bornes signées 64 bits.
        """
        if self.is_empty():
            return default
        return parse_int_prefix(self.value, INT64_MIN, INT64_MAX)

    def as_float(self, default: float = 0.0) -> float:
        """Retourne la valeur en flottant (préfixe numérique, sinon 0.0)."""
        if self.is_empty():
            return default
        match = _FLOAT_PREFIX.match(self.value)
        if match is None:
            return 0.0
        return float(match.group(1))

    def as_bool(self, default: bool = False) -> bool:
        """Retourne la valeur en booléen.

        Reconnaît 1/true/yes/on et 0/false/no/off sans tenir compte
        de la casse. Toute autre valeur retourne default.
        """
        lowered = self.value.lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        return default
