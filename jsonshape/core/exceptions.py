"""Custom exceptions for jsonshape."""


class JsonShapeError(Exception):
    """Base exception for all jsonshape errors."""
    pass


class ConfigError(JsonShapeError):
    """Configuration-related errors."""
    pass


class InputError(JsonShapeError):
    """Input file could not be opened."""

    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(message)


class ParseError(JsonShapeError):
    """Input is not a single well-formed JSON value."""
    pass


class WriteError(JsonShapeError):
    """Output sink rejected a write."""
    pass
