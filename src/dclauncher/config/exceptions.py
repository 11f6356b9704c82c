"""Custom exceptions for configuration loading."""


class ConfigurationError(Exception):
    """Project configuration file is missing or invalid."""
