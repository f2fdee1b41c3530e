"""Tests for the Environment snapshot source.

An Environment is a private copy of variables that a registry can read
instead of the real process environment.
"""

import pytest

from py_envcache.env import Environment

VAR = "PYENVCACHE_ENV_VAR"


class TestEnvironment:
    """Verify the fixed variable source."""

    def test_get_and_set(self) -> None:
        """A variable set on the source is read back."""
        env = Environment()
        env.set("V", "A=1")
        assert env.get("V") == "A=1"

    def test_unset_variable_is_none(self) -> None:
        """An unset variable reads as None, like os.environ.get."""
        assert Environment().get("V") is None

    def test_empty_value_is_set(self) -> None:
        """A variable set to "" is present and reads as ""."""
        env = Environment({"V": ""})
        assert "V" in env
        assert env.get("V") == ""

    def test_initial_is_copied(self) -> None:
        """Changing the initial mapping afterwards has no effect."""
        initial = {"V": "A=1"}
        env = Environment(initial)
        initial["V"] = "A=2"
        assert env.get("V") == "A=1"


class TestFromProcess:
    """Verify snapshots of the real process environment."""

    def test_captures_current_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The snapshot holds the variable as it was set."""
        monkeypatch.setenv(VAR, "A=1")
        assert Environment.from_process().get(VAR) == "A=1"

    def test_snapshot_is_frozen(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Later process changes are not seen by the snapshot."""
        monkeypatch.setenv(VAR, "A=1")
        snapshot = Environment.from_process()
        monkeypatch.setenv(VAR, "A=2")
        assert snapshot.get(VAR) == "A=1"

    def test_set_does_not_touch_process(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Writing to a snapshot never writes to os.environ."""
        monkeypatch.delenv(VAR, raising=False)
        snapshot = Environment.from_process()
        snapshot.set(VAR, "x")
        assert Environment.from_process().get(VAR) is None
