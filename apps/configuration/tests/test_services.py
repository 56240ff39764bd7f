"""
Service layer tests for system configuration.
"""

import pytest
from decimal import Decimal
from django.core.exceptions import ValidationError
from django.test import override_settings

from apps.configuration.models import SystemConfig
from apps.configuration.services import (
    get_block_value,
    get_numbers_per_block,
    get_min_deposit_amount,
    get_config_value,
    set_config_value,
    seed_default_config,
    ConfigNotFoundError,
    InvalidConfigValueError,
)


@pytest.mark.django_db
class TestTypedGetters:

    def test_defaults_come_from_settings(self):
        assert get_block_value() == Decimal('100')
        assert get_numbers_per_block() == 10
        assert get_min_deposit_amount() == Decimal('100')

    @override_settings(RAFFLE_DEFAULT_BLOCK_VALUE=Decimal('25'))
    def test_settings_override(self):
        assert get_block_value() == Decimal('25')

    def test_stored_value_wins(self):
        set_config_value(key='block_value', value='50.00')
        set_config_value(key='numbers_per_block', value=5)

        assert get_block_value() == Decimal('50.00')
        assert get_numbers_per_block() == 5

    def test_non_numeric_value(self):
        SystemConfig.objects.create(key='block_value', value='abc')

        with pytest.raises(InvalidConfigValueError):
            get_block_value()

    def test_non_positive_value(self):
        SystemConfig.objects.create(key='block_value', value=0)

        with pytest.raises(InvalidConfigValueError):
            get_block_value()

    def test_nan_value(self):
        SystemConfig.objects.create(key='min_deposit_amount', value='NaN')

        with pytest.raises(InvalidConfigValueError):
            get_min_deposit_amount()

    def test_fractional_numbers_per_block(self):
        SystemConfig.objects.create(key='numbers_per_block', value=2.5)

        with pytest.raises(InvalidConfigValueError):
            get_numbers_per_block()


@pytest.mark.django_db
class TestConfigStore:

    def test_missing_key_without_default(self):
        with pytest.raises(ConfigNotFoundError):
            get_config_value('logo_url')

    def test_missing_key_with_default(self):
        assert get_config_value('logo_url', '') == ''

    def test_seed_is_idempotent(self):
        created = seed_default_config()
        assert 'block_value' in created

        assert seed_default_config() == []
        assert SystemConfig.objects.filter(key='block_value').count() == 1


@pytest.mark.django_db
class TestSetConfigValidation:

    @pytest.mark.parametrize('value', [0, -5, 'abc', 'NaN', 'Infinity', True, [1]])
    def test_rejects_unusable_block_value(self, value):
        with pytest.raises(InvalidConfigValueError):
            set_config_value(key='block_value', value=value)

        assert not SystemConfig.objects.filter(key='block_value').exists()

    def test_rejects_fractional_numbers_per_block(self):
        with pytest.raises(InvalidConfigValueError):
            set_config_value(key='numbers_per_block', value=2.5)

    def test_existing_value_kept_on_rejection(self):
        set_config_value(key='min_deposit_amount', value=150)

        with pytest.raises(InvalidConfigValueError):
            set_config_value(key='min_deposit_amount', value='-1')

        assert get_min_deposit_amount() == Decimal('150')

    def test_free_form_keys_not_checked(self):
        config = set_config_value(key='system_name', value='0')

        assert config.value == '0'

    def test_model_clean_rejects_unusable_value(self):
        config = SystemConfig(key='numbers_per_block', value='abc')

        with pytest.raises(ValidationError):
            config.full_clean()
