"""Domain-specific exceptions for configuration services."""


class ConfigurationServiceError(Exception):
    """Base exception for configuration services."""
    pass


class ConfigNotFoundError(ConfigurationServiceError):
    """Raised when a configuration key does not exist."""
    pass


class InvalidConfigValueError(ConfigurationServiceError):
    """Raised when a stored value cannot be used for a numeric tunable."""
    pass
