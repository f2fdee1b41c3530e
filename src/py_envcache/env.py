"""Environment sources — where a dictionary reads its variable from.

Every process has an environment: a set of ``KEY=VALUE`` string pairs
inherited from its parent.  A dictionary only ever needs one operation
from it: "give me the value of NAME, or tell me it isn't set".  Anything
with a ``get(name) -> str | None`` method qualifies, so ``os.environ``
works out of the box.

``Environment`` is a private, independent copy of such a block.  Hand
one to a ``Registry`` to pin down exactly what it will see, either in
tests or to freeze the process environment at a known point in time.
Changing an ``Environment`` never touches the real process environment.
"""

import os
from collections.abc import Mapping
from typing import Protocol


class EnvironmentSource(Protocol):
    """Anything a dictionary can read a variable from."""

    def get(self, key: str, /) -> str | None:
        """Return the value for *key*, or None if it is not set."""
        ...


class Environment:
    """A fixed set of variables for a registry to read instead of ``os.environ``.

    The variables are copied in on creation, so later changes to the
    process (or to the mapping passed in) are invisible to it.  A
    variable set to ``""`` still counts as set, just as it does in the
    real environment.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        """Create a source holding a copy of *initial* (empty if omitted)."""
        self._vars: dict[str, str] = dict(initial) if initial else {}

    @classmethod
    def from_process(cls) -> "Environment":
        """Freeze the current process environment into a new source."""
        return cls(initial=os.environ)

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value of variable *key*, or *default* if it is unset."""
        return self._vars.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Set variable *key* in this source only; ``os.environ`` is untouched."""
        self._vars[key] = value

    def __contains__(self, key: object) -> bool:
        """Return whether variable *key* is set, even to the empty string."""
        return key in self._vars
