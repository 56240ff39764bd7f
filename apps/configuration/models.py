from django.core.exceptions import ValidationError
from django.db import models
import uuid


class ConfigKey(models.TextChoices):
    """Known keys; clients may store additional ones."""
    MIN_DEPOSIT_AMOUNT = 'min_deposit_amount', 'Minimum deposit amount'
    BLOCK_VALUE = 'block_value', 'Block value'
    NUMBERS_PER_BLOCK = 'numbers_per_block', 'Numbers per block'
    SYSTEM_NAME = 'system_name', 'System name'
    PRIMARY_COLOR = 'primary_color', 'Primary color'
    SECONDARY_COLOR = 'secondary_color', 'Secondary color'
    ACCENT_COLOR = 'accent_color', 'Accent color'
    LOGO_URL = 'logo_url', 'Logo URL'


class SystemConfig(models.Model):
    """Key/value store for admin-tunable settings (JSON values)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    key = models.CharField(max_length=100, unique=True)
    value = models.JSONField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'system_config'
        ordering = ['key']
        verbose_name = 'system configuration'
        verbose_name_plural = 'system configuration'

    def __str__(self):
        return f"{self.key} = {self.value!r}"

    def clean(self):
        from apps.configuration.services import validate_config_value, InvalidConfigValueError

        try:
            validate_config_value(key=self.key, value=self.value)
        except InvalidConfigValueError as e:
            raise ValidationError({'value': str(e)})
