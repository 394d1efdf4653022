"""Exceptions raised by the URL builder."""


class ConfigurationError(ValueError):
    """Raised when a builder is constructed with an unusable configuration."""
