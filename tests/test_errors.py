"""Unit tests for engine errors."""

from core.errors import ConfigError, LifeError, LocationOccupied


class TestLifeError:
    """Tests for the base error."""

    def test_has_tracking_fields(self):
        """Errors carry an ID, a timestamp and a context."""
        err = LifeError("broken")
        assert len(err.error_id) == 27
        assert "T" in err.timestamp
        assert err.context == {}
        assert err.cause is None

    def test_str_includes_id(self):
        """str() is prefixed with the error ID."""
        err = LifeError("broken")
        assert str(err) == f"[{err.error_id}] broken"


class TestLocationOccupied:
    """Tests for LocationOccupied."""

    def test_is_life_error(self):
        """LocationOccupied derives from LifeError."""
        assert isinstance(LocationOccupied(0, 0), LifeError)

    def test_context_has_coordinates(self):
        """Coordinates are kept as attributes and in the context."""
        err = LocationOccupied(3, 7)
        assert (err.x, err.y) == (3, 7)
        assert err.context == {"x": 3, "y": 7}
        assert "(3, 7)" in str(err)


class TestConfigError:
    """Tests for ConfigError."""

    def test_path_in_context(self):
        """The offending path is recorded."""
        err = ConfigError("bad", path="config.json", cause=ValueError("x"))
        assert err.context == {"path": "config.json"}
        assert isinstance(err.cause, ValueError)
