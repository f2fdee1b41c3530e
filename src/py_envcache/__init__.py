"""Cached, parsed access to delimiter-separated environment variables.

Re-exports public symbols so callers can write::

    from py_envcache import Registry, get, get_dictionary, clear
"""

from py_envcache.accessor import clear, default_registry, get, get_dictionary
from py_envcache.dictionary import (
    DEFAULT_DELIMITER,
    KEY_VALUE_SEPARATOR,
    Dictionary,
    KeyFound,
    parse_entries,
)
from py_envcache.env import Environment, EnvironmentSource
from py_envcache.logging import LogEntry, Logger, LogLevel
from py_envcache.registry import Registry

__all__ = [
    "DEFAULT_DELIMITER",
    "KEY_VALUE_SEPARATOR",
    "Dictionary",
    "Environment",
    "EnvironmentSource",
    "KeyFound",
    "LogEntry",
    "LogLevel",
    "Logger",
    "Registry",
    "clear",
    "default_registry",
    "get",
    "get_dictionary",
    "parse_entries",
]
