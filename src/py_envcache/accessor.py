"""Process-wide accessor functions over a shared default registry.

Most callers just want a setting::

    from py_envcache import get

    found, level = get("MYAPP_DEBUG", "level")

These functions delegate to one ``Registry`` created lazily on first
use.  Code that wants its own isolated cache (tests, plugins, anything
reading a fake environment) should build a ``Registry`` directly
instead.
"""

import threading

from py_envcache.dictionary import DEFAULT_DELIMITER, Dictionary, KeyFound
from py_envcache.registry import Registry

_default: Registry | None = None
_default_lock = threading.Lock()


def default_registry() -> Registry:
    """Return the process-wide registry, creating it on first call."""
    global _default  # noqa: PLW0603
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Registry()
    return _default


def get_dictionary(name: str, delimiter: str = DEFAULT_DELIMITER) -> Dictionary:
    """Return the shared dictionary for *name* (see ``Registry.get_dictionary``).

    The first delimiter used for a name sticks until ``clear()``.
    """
    return default_registry().get_dictionary(name, delimiter)


def get(name: str, key: str = "", delimiter: str = DEFAULT_DELIMITER) -> KeyFound:
    """Look up *key* in environment variable *name*.

    Args:
        name: The environment variable.
        key: The entry to look up; "" returns the whole value.
        delimiter: Token separator, used only on the first call for *name*.

    Returns:
        ``KeyFound(found, value)``.

    """
    return default_registry().get(name, key, delimiter)


def clear() -> None:
    """Drop everything cached by the process-wide registry."""
    default_registry().clear()
