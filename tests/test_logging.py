"""Tests for the cache event log.

The logger records structured entries about what the registry did with
each environment variable.
"""

import pytest

from py_envcache.logging import LogEntry, Logger, LogLevel

CAPACITY_2 = 2


class TestLogLevel:
    """Verify log level ordering."""

    def test_levels_are_ordered(self) -> None:
        """DEBUG < INFO < WARNING < ERROR."""
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR


class TestLogEntry:
    """Verify log entry structure."""

    def test_entry_str(self) -> None:
        """String representation should include level, source and message."""
        entry = LogEntry(level=LogLevel.WARNING, message="delimiter ignored", source="registry")
        assert str(entry) == "[WARNING] registry: delimiter ignored"

    def test_entry_str_with_variable(self) -> None:
        """The variable name appears beside the source."""
        entry = LogEntry(level=LogLevel.DEBUG, message="cache hit", source="registry", variable="V")
        assert str(entry) == "[DEBUG] registry(V): cache hit"


class TestLogger:
    """Verify the logger."""

    def test_entries_are_ordered(self) -> None:
        """Entries should be in chronological order."""
        logger = Logger()
        logger.log(LogLevel.INFO, "first", source="test")
        logger.log(LogLevel.INFO, "second", source="test")
        assert [e.message for e in logger.entries] == ["first", "second"]

    def test_filter_by_level(self) -> None:
        """Filtering should return only entries at or above the level."""
        logger = Logger()
        logger.log(LogLevel.DEBUG, "debug msg", source="test")
        logger.log(LogLevel.ERROR, "error msg", source="test")
        result = logger.filter(min_level=LogLevel.WARNING)
        assert [e.level for e in result] == [LogLevel.ERROR]

    def test_filter_by_source_and_variable(self) -> None:
        """Criteria combine."""
        logger = Logger()
        logger.log(LogLevel.INFO, "a", source="registry", variable="V")
        logger.log(LogLevel.INFO, "b", source="registry", variable="W")
        logger.log(LogLevel.INFO, "c", source="other", variable="V")
        result = logger.filter(source="registry", variable="V")
        assert [e.message for e in result] == ["a"]

    def test_capacity_drops_oldest(self) -> None:
        """A full buffer discards its oldest entry."""
        logger = Logger(capacity=CAPACITY_2)
        for message in ("one", "two", "three"):
            logger.log(LogLevel.DEBUG, message, source="test")
        assert [e.message for e in logger.entries] == ["two", "three"]

    def test_unbounded(self) -> None:
        """capacity=None keeps everything."""
        logger = Logger(capacity=None)
        logger.log(LogLevel.DEBUG, "x", source="test")
        assert len(logger.entries) == 1

    def test_invalid_capacity(self) -> None:
        """A non-positive capacity is rejected."""
        with pytest.raises(ValueError, match="capacity"):
            Logger(capacity=0)

    def test_clear(self) -> None:
        """Clearing should remove all entries."""
        logger = Logger()
        logger.log(LogLevel.INFO, "test", source="test")
        logger.clear()
        assert logger.entries == []
