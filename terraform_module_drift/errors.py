class DriftError(Exception):
    """Base class for errors raised by the drift analysis."""


class ConfigurationError(DriftError):
    """An environments or modules root is missing or is not a directory."""
