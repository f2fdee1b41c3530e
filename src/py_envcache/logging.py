"""Cache event log — a structured, in-memory audit trail.

The registry records what it does with each environment variable: when
a variable is parsed for the first time, when a caller's delimiter is
silently ignored, and when the whole cache is dropped.  Reading the log
answers the question "why did I get *that* value?" without attaching a
debugger.

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — a single structured record (level, message, source, variable).
- **Logger** — an append-only log with filtering and clearing.

Design choices:
    - **IntEnum for levels** so they compare naturally with ``<``.
    - **Frozen dataclass for entries** — log records should be immutable.
    - **Bounded buffer** — like ``dmesg``, the oldest entries fall off
      once the buffer is full.
    - **One lock around the buffer** — the registry logs from whichever
      thread happens to be calling it.
"""

import threading
from collections import deque
from dataclasses import dataclass
from enum import IntEnum

DEFAULT_CAPACITY = 1024


class LogLevel(IntEnum):
    """Severity levels for log entries."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The component that generated the event (e.g. "registry").
        variable: The environment variable the event concerns ("" if none).

    """

    level: LogLevel
    message: str
    source: str
    variable: str = ""

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message`` with the variable if any."""
        if self.variable:
            return f"[{self.level.name}] {self.source}({self.variable}): {self.message}"
        return f"[{self.level.name}] {self.source}: {self.message}"


class Logger:
    """Append-only ring buffer of log entries with filtering."""

    def __init__(self, *, capacity: int | None = DEFAULT_CAPACITY) -> None:
        """Create an empty logger.

        Args:
            capacity: Maximum entries kept; None keeps everything.

        Raises:
            ValueError: If capacity is not positive.

        """
        if capacity is not None and capacity <= 0:
            msg = f"Logger capacity must be positive, got {capacity}"
            raise ValueError(msg)
        self._entries: deque[LogEntry] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        with self._lock:
            return list(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        source: str,
        variable: str = "",
    ) -> None:
        """Append a new entry to the log.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Component that generated the event.
            variable: Environment variable name the event concerns.

        """
        entry = LogEntry(level=level, message=message, source=source, variable=variable)
        with self._lock:
            self._entries.append(entry)

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
        variable: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching every given criterion.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.
            variable: If set, only return entries about this variable.

        Returns:
            A filtered list of log entries.

        """
        result = self.entries
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if source is not None:
            result = [e for e in result if e.source == source]
        if variable is not None:
            result = [e for e in result if e.variable == variable]
        return result

    def clear(self) -> None:
        """Remove all log entries."""
        with self._lock:
            self._entries.clear()
