"""Services for system configuration."""

from .exceptions import (
    ConfigurationServiceError,
    ConfigNotFoundError,
    InvalidConfigValueError,
)
from .system_config import (
    get_config,
    get_config_value,
    set_config_value,
    get_block_value,
    get_numbers_per_block,
    get_min_deposit_amount,
    validate_config_value,
    seed_default_config,
    DEFAULT_CONFIG,
)

__all__ = [
    # Exceptions
    'ConfigurationServiceError',
    'ConfigNotFoundError',
    'InvalidConfigValueError',
    # Services
    'get_config',
    'get_config_value',
    'set_config_value',
    'get_block_value',
    'get_numbers_per_block',
    'get_min_deposit_amount',
    'validate_config_value',
    'seed_default_config',
    'DEFAULT_CONFIG',
]
