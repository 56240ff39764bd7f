"""
System configuration service.

Raffle tunables are stored as JSON values in ``system_config``. Typed getters
fall back to Django settings when a key has never been saved.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from django.conf import settings
from django.db import transaction

from apps.configuration.models import SystemConfig, ConfigKey
from .exceptions import ConfigNotFoundError, InvalidConfigValueError

logger = logging.getLogger(__name__)

_MISSING = object()


def get_config(*, key: str) -> SystemConfig:
    try:
        return SystemConfig.objects.get(key=key)
    except SystemConfig.DoesNotExist:
        raise ConfigNotFoundError(f"Configuration '{key}' not found")


def get_config_value(key: str, default: Any = _MISSING) -> Any:
    """Return the raw JSON value for ``key``, or ``default`` when unset."""
    try:
        return SystemConfig.objects.values_list('value', flat=True).get(key=key)
    except SystemConfig.DoesNotExist:
        if default is _MISSING:
            raise ConfigNotFoundError(f"Configuration '{key}' not found")
        return default


@transaction.atomic
def set_config_value(*, key: str, value: Any) -> SystemConfig:
    """Create or update a configuration entry, validating numeric tunables."""
    validate_config_value(key=key, value=value)
    config, created = SystemConfig.objects.update_or_create(
        key=key,
        defaults={'value': value},
    )
    logger.info("System config %s %s", key, 'created' if created else 'updated')
    return config


def _as_decimal(key: str, raw: Any) -> Decimal:
    if isinstance(raw, bool):
        raise InvalidConfigValueError(f"Configuration '{key}' must be numeric, got {raw!r}")
    try:
        value = Decimal(str(raw))
        if not value.is_finite():
            raise InvalidConfigValueError(f"Configuration '{key}' must be a finite number, got {raw!r}")
        if value <= 0:
            raise InvalidConfigValueError(f"Configuration '{key}' must be positive, got {raw!r}")
    except (InvalidOperation, ValueError):
        raise InvalidConfigValueError(f"Configuration '{key}' must be numeric, got {raw!r}")
    return value


def _as_integer(key: str, raw: Any) -> int:
    value = _as_decimal(key, raw)
    if value != value.to_integral_value():
        raise InvalidConfigValueError(f"Configuration '{key}' must be an integer, got {raw!r}")
    return int(value)


NUMERIC_KEYS = {
    ConfigKey.BLOCK_VALUE: _as_decimal,
    ConfigKey.NUMBERS_PER_BLOCK: _as_integer,
    ConfigKey.MIN_DEPOSIT_AMOUNT: _as_decimal,
}


def validate_config_value(*, key: str, value: Any) -> None:
    """Reject values the typed getters could not use later."""
    parse = NUMERIC_KEYS.get(key)
    if parse is not None:
        parse(key, value)


def get_block_value() -> Decimal:
    """Monetary amount that buys one block of numbers."""
    raw = get_config_value(ConfigKey.BLOCK_VALUE, settings.RAFFLE_DEFAULT_BLOCK_VALUE)
    return _as_decimal(ConfigKey.BLOCK_VALUE, raw)


def get_numbers_per_block() -> int:
    raw = get_config_value(ConfigKey.NUMBERS_PER_BLOCK, settings.RAFFLE_DEFAULT_NUMBERS_PER_BLOCK)
    return _as_integer(ConfigKey.NUMBERS_PER_BLOCK, raw)


def get_min_deposit_amount() -> Decimal:
    raw = get_config_value(ConfigKey.MIN_DEPOSIT_AMOUNT, settings.RAFFLE_DEFAULT_MIN_DEPOSIT)
    return _as_decimal(ConfigKey.MIN_DEPOSIT_AMOUNT, raw)


DEFAULT_CONFIG = {
    ConfigKey.SYSTEM_NAME: 'Sistema de Rifas',
    ConfigKey.MIN_DEPOSIT_AMOUNT: 100,
    ConfigKey.BLOCK_VALUE: 100,
    ConfigKey.NUMBERS_PER_BLOCK: 10,
    ConfigKey.PRIMARY_COLOR: '#059669',
    ConfigKey.SECONDARY_COLOR: '#3B82F6',
    ConfigKey.ACCENT_COLOR: '#F59E0B',
    ConfigKey.LOGO_URL: '',
}


@transaction.atomic
def seed_default_config() -> list[str]:
    """Insert default entries that are missing. Returns the keys created."""
    created_keys = []
    for key, value in DEFAULT_CONFIG.items():
        _, created = SystemConfig.objects.get_or_create(key=key, defaults={'value': value})
        if created:
            created_keys.append(str(key))
    return created_keys
