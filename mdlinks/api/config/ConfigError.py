"""Configuration error."""


class ConfigError(ValueError):
    """Raised when the mdlinks configuration file is missing or invalid."""
