from rest_framework import serializers
from .models import SystemConfig


class SystemConfigSerializer(serializers.ModelSerializer):

    class Meta:
        model = SystemConfig
        fields = ['id', 'key', 'value', 'created_at', 'updated_at']
        read_only_fields = fields


class SystemConfigUpdateSerializer(serializers.Serializer):
    """Input for PUT /api/system-config/{key}/."""

    value = serializers.JSONField()

    def validate_value(self, value):
        if value is None:
            raise serializers.ValidationError('Value cannot be null')
        return value
