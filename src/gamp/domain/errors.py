"""Errors raised by the gamp client."""


class GampError(Exception):
    """Base class for all gamp errors."""


class ConfigurationError(GampError, ValueError):
    """Raised when the client is created with invalid settings (e.g. a malformed tracking ID)."""


class MissingArgumentError(GampError, ValueError):
    """Raised when a hit is missing one of its mandatory fields."""

    def __init__(self, hit_type: str, field_name: str) -> None:
        super().__init__(f"{hit_type} hit requires '{field_name}'")
        self.hit_type = hit_type
        self.field_name = field_name


class TransportError(GampError):
    """Raised when the HTTP request to the collection endpoint fails."""
