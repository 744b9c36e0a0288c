"""Module DotConf pour la lecture et l'écriture de fichiers INI.

Ce module fournit :
- ConfigParser : chargement d'un fichier INI en cache mémoire,
  lectures typées et écritures répercutées dans le fichier
- ConfigValue : valeur immuable avec conversions par défaut
- ParserOptions / ParserOptionsLoader : politiques du parser
- Les stratégies de réécriture (ajout de section, insertion de clé,
  mise à jour en place)

Example:
    >>> from ini_config_utils.dotconf import ConfigParser
    >>> from ini_config_utils import FileLogger
    >>>
    >>> parser = ConfigParser(
    ...     "/etc/app.ini", logger=FileLogger("/var/log/app.log")
    ... )
    >>> result = parser.init()
    >>> parser.get("server", "port").as_int32(8080)
    >>> parser.set("server", "timeout", "30")
"""

from ini_config_utils.dotconf.base import IniStore, LoadResult
from ini_config_utils.dotconf.lines import (
    LineKind,
    classify,
    find_value,
    ltrim,
    read_section,
    rtrim,
    split_key_value,
    trim,
)
from ini_config_utils.dotconf.options import (
    FailurePolicy,
    ParserOptions,
    ParserOptionsLoader,
)
from ini_config_utils.dotconf.parser import ConfigParser
from ini_config_utils.dotconf.rewriter import (
    RewriteResult,
    RewriteStrategy,
    append_section,
    insert_key,
    update_key,
)
from ini_config_utils.dotconf.storage import IniFileStorage
from ini_config_utils.dotconf.value import ConfigValue

__all__ = [
    # Interfaces abstraites
    "IniStore",
    "LoadResult",
    # Implémentations
    "ConfigParser",
    "ConfigValue",
    "IniFileStorage",
    # Options
    "FailurePolicy",
    "ParserOptions",
    "ParserOptionsLoader",
    # Stratégies de réécriture
    "RewriteResult",
    "RewriteStrategy",
    "append_section",
    "insert_key",
    "update_key",
    # Classification des lignes
    "LineKind",
    "classify",
    "find_value",
    "read_section",
    "split_key_value",
    "trim",
    "ltrim",
    "rtrim",
]
