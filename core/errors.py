"""Engine errors with tracking IDs."""

from utils.ksuid import generate_ksuid
from utils.timestamp import format_timestamp


class LifeError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = generate_ksuid()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"


class LocationOccupied(LifeError):
    """A cell was placed on a coordinate that already holds one."""

    def __init__(self, x, y, **kwargs):
        context = kwargs.pop("context", {})
        context.update({"x": x, "y": y})
        super().__init__(f"location ({x}, {y}) is already occupied", context=context, **kwargs)
        self.x = x
        self.y = y


class ConfigError(LifeError):
    """Config file could not be read or holds unknown settings."""

    def __init__(self, message, path=None, **kwargs):
        context = kwargs.pop("context", {})
        if path:
            context["path"] = str(path)
        super().__init__(message, context=context, **kwargs)
