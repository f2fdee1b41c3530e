"""The registry — a cache of parsed environment dictionaries.

Parsing an environment variable is cheap, but code that asks for a
setting in a hot loop should not re-read and re-split the environment
every time.  The registry keeps one ``Dictionary`` per variable name
and hands the same instance to every caller.

Caching rules:
    - **At most one parse per name.**  The first call for a name reads
      the environment; every later call gets the cached dictionary.
    - **First delimiter wins.**  The delimiter passed on the first call
      is permanent for that name.  A later call with a different
      delimiter gets the dictionary parsed with the *original* one.
      This is intentional (variables do not change format mid-run), but
      it is easy to trip over, so the registry logs a warning each time
      it ignores a delimiter.
    - **All-or-nothing eviction.**  Nothing is evicted individually;
      ``clear()`` drops every entry.  After the environment changes (in
      tests, typically), call ``clear()`` so the next lookup re-reads it.

Thread safety:
    Cache hits are lock-free: dictionaries are immutable and a single
    ``dict.get`` is atomic.  Plain hits are not logged, so they never
    wait on the logger either; only an ignored delimiter is logged.  A
    miss takes the lock and checks again before building, so concurrent
    first access to the same name still constructs exactly one
    dictionary.  ``clear()`` takes the same lock.
"""

import threading

from py_envcache.dictionary import DEFAULT_DELIMITER, Dictionary, KeyFound
from py_envcache.env import EnvironmentSource
from py_envcache.logging import Logger, LogLevel

_SOURCE = "registry"


class Registry:
    """Map environment variable names to shared, parsed dictionaries."""

    def __init__(
        self,
        *,
        environ: EnvironmentSource | None = None,
        logger: Logger | None = None,
    ) -> None:
        """Create an empty registry.

        Args:
            environ: Where dictionaries read variables from; ``os.environ``
                if omitted.
            logger: Receives cache events; a fresh ``Logger`` if omitted.

        """
        self._environ = environ
        self._logger = logger if logger is not None else Logger()
        self._cache: dict[str, Dictionary] = {}
        self._lock = threading.Lock()

    @property
    def logger(self) -> Logger:
        """Return the logger recording cache events."""
        return self._logger

    def get_dictionary(self, name: str, delimiter: str = DEFAULT_DELIMITER) -> Dictionary:
        """Return the dictionary for *name*, parsing it on first use.

        On a cache hit *delimiter* is ignored: the dictionary keeps the
        delimiter it was first parsed with until ``clear()``.

        Args:
            name: The environment variable.
            delimiter: Token separator, used only if *name* is not cached.

        Returns:
            The shared ``Dictionary`` for *name*.

        """
        dictionary = self._cache.get(name)
        if dictionary is None:
            with self._lock:
                dictionary = self._cache.get(name)
                if dictionary is None:
                    dictionary = Dictionary(name, delimiter, environ=self._environ)
                    self._cache[name] = dictionary
                    self._log_miss(dictionary)
                    return dictionary

        if delimiter != dictionary.delimiter:
            self._warn_ignored(dictionary, delimiter)
        return dictionary

    def get(self, name: str, key: str = "", delimiter: str = DEFAULT_DELIMITER) -> KeyFound:
        """Look up *key* in the dictionary for *name*."""
        return self.get_dictionary(name, delimiter).get(key)

    def clear(self) -> None:
        """Drop every cached dictionary."""
        with self._lock:
            dropped = len(self._cache)
            self._cache.clear()
        self._logger.log(
            LogLevel.INFO,
            f"cache cleared ({dropped} entries dropped)",
            source=_SOURCE,
        )

    # Single dict operations are atomic and need no lock; iterating does.

    def names(self) -> list[str]:
        """Return the names currently cached."""
        with self._lock:
            return list(self._cache)

    def __contains__(self, name: object) -> bool:
        """Return whether *name* has been parsed and cached."""
        return name in self._cache

    def __len__(self) -> int:
        """Return the number of cached dictionaries."""
        return len(self._cache)

    def __repr__(self) -> str:
        """Return a developer-friendly representation."""
        return f"Registry({len(self._cache)} cached)"

    def _log_miss(self, dictionary: Dictionary) -> None:
        if dictionary.exists:
            message = f"cache miss, parsed {len(dictionary)} entries"
        else:
            message = "cache miss, variable not set"
        self._logger.log(LogLevel.DEBUG, message, source=_SOURCE, variable=dictionary.name)

    def _warn_ignored(self, dictionary: Dictionary, delimiter: str) -> None:
        self._logger.log(
            LogLevel.WARNING,
            f"delimiter {delimiter!r} ignored, "
            f"cached value was parsed with {dictionary.delimiter!r}",
            source=_SOURCE,
            variable=dictionary.name,
        )
