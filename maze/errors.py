"""Exceptions raised by the maze generation pipeline."""


class ConfigurationError(ValueError):
    """Raised when generation parameters are rejected before any work starts."""
