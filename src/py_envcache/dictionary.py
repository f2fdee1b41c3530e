"""Environment dictionaries — one variable, parsed once into key/value pairs.

Many programs smuggle a small configuration block through a single
environment variable::

    MYAPP_DEBUG="verbose;level=3;out=/tmp/log"

A ``Dictionary`` reads such a variable exactly once and splits it into
entries.  The format is deliberately tiny:

    - Tokens are separated by a delimiter string (``;`` by default).
      Empty tokens, e.g. from ``a;;b``, are skipped.
    - Each token is either ``key=value`` or a bare ``key`` (a flag,
      whose value is the empty string).  Only the *first* ``=`` splits,
      so ``url=http://h/?q=1`` has the value ``http://h/?q=1``.
    - If a key appears twice, the later token wins.

Format contract: a value can never contain the delimiter.  The variable
is cut on the delimiter before any ``=`` is looked for, so ``a=x;y``
yields ``a -> x`` plus a flag ``y``.  Pick a delimiter that your values
do not use.

Looking up the empty key returns the whole, unparsed variable.  A
variable that is not set at all answers "not found" to every key.  None
of these outcomes is an error; they come back as a ``KeyFound`` pair.
"""

import os
from collections.abc import Iterator
from types import MappingProxyType
from typing import NamedTuple

from py_envcache.env import EnvironmentSource

DEFAULT_DELIMITER = ";"
KEY_VALUE_SEPARATOR = "="


class KeyFound(NamedTuple):
    """Result of a lookup: whether the key was found, and its value."""

    found: bool
    value: str


NOT_FOUND = KeyFound(found=False, value="")


def _tokens(text: str, delimiter: str) -> Iterator[str]:
    """Yield the non-empty tokens of *text*, left to right.

    An empty delimiter matches between every character and leaves only
    empty segments, so it yields nothing.
    """
    if not delimiter:
        return
    for token in text.split(delimiter):
        if token:
            yield token


def parse_entries(text: str, delimiter: str = DEFAULT_DELIMITER) -> dict[str, str]:
    """Parse a delimited ``key[=value]`` string into a dict.

    Args:
        text: The raw variable value.
        delimiter: The token separator.

    Returns:
        A mapping of key to value.  Flags map to ``""``.  An empty
        delimiter gives an empty mapping.

    """
    entries: dict[str, str] = {}
    for token in _tokens(text, delimiter):
        key, _, value = token.partition(KEY_VALUE_SEPARATOR)
        entries[key] = value
    return entries


class Dictionary:
    """The parsed contents of one environment variable.

    The variable is read from the environment once, in ``__init__``.
    After that the dictionary never changes, so it is safe to share
    between threads without locking.
    """

    def __init__(
        self,
        name: str,
        delimiter: str = DEFAULT_DELIMITER,
        *,
        environ: EnvironmentSource | None = None,
    ) -> None:
        """Read *name* from the environment and parse it.

        Args:
            name: The environment variable to read.
            delimiter: The token separator used to split its value.
            environ: Where to read from; ``os.environ`` if omitted.

        """
        if environ is None:
            environ = os.environ
        self._name = name
        self._delimiter = delimiter
        raw = environ.get(name)
        self._exists = raw is not None
        self._raw_value = raw if raw is not None else ""
        entries = parse_entries(self._raw_value, delimiter) if self._raw_value else {}
        self._entries = MappingProxyType(entries)

    @property
    def name(self) -> str:
        """Return the environment variable this dictionary was built from."""
        return self._name

    @property
    def delimiter(self) -> str:
        """Return the delimiter the value was split with."""
        return self._delimiter

    @property
    def exists(self) -> bool:
        """Return whether the variable was set when the dictionary was built."""
        return self._exists

    @property
    def raw_value(self) -> str:
        """Return the verbatim variable value ("" if it was not set)."""
        return self._raw_value

    def get(self, key: str = "") -> KeyFound:
        """Look up *key*.

        The empty key is special: it returns the whole unparsed value,
        provided the variable exists.

        Args:
            key: The entry to look up.

        Returns:
            ``KeyFound(True, value)`` on a hit, ``KeyFound(False, "")``
            otherwise.

        """
        if not self._exists:
            return NOT_FOUND
        if not key:
            return KeyFound(found=True, value=self._raw_value)
        value = self._entries.get(key)
        if value is None:
            return NOT_FOUND
        return KeyFound(found=True, value=value)

    def entries(self) -> dict[str, str]:
        """Return a snapshot copy of the parsed entries."""
        return dict(self._entries)

    def __contains__(self, key: object) -> bool:
        """Return whether *key* is one of the parsed entries."""
        return key in self._entries

    def __len__(self) -> int:
        """Return the number of parsed entries."""
        return len(self._entries)

    def __repr__(self) -> str:
        """Return a developer-friendly representation."""
        state = f"{len(self._entries)} entries" if self._exists else "unset"
        return f"Dictionary('{self._name}', delimiter='{self._delimiter}', {state})"
