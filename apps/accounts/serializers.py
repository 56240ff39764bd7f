from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError

from .models import User, UserRole
from .validators import normalize_cpf, validate_cpf, validate_phone


def _run_django_validator(validator, value):
    try:
        validator(value)
    except DjangoValidationError as e:
        raise serializers.ValidationError(e.messages)


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    class Meta:
        model = User
        fields = [
            'id',
            'name',
            'cpf',
            'phone',
            'role',
            'is_active',
            'created_at',
            'last_login',
        ]
        read_only_fields = ['id', 'cpf', 'role', 'is_active', 'created_at', 'last_login']


class UserUpdateSerializer(serializers.Serializer):
    """Input for PATCH /api/users/{id}/. Role and status are admin-only."""

    name = serializers.CharField(max_length=150, required=False)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True)
    password = serializers.CharField(
        required=False,
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    role = serializers.ChoiceField(choices=UserRole.choices, required=False)
    is_active = serializers.BooleanField(required=False)

    def validate_phone(self, value):
        if value:
            _run_django_validator(validate_phone, value)
        return value


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for user registration."""

    name = serializers.CharField(max_length=150)
    cpf = serializers.CharField(max_length=14)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )

    def validate_cpf(self, value):
        _run_django_validator(validate_cpf, value)
        return normalize_cpf(value)

    def validate_phone(self, value):
        if value:
            _run_django_validator(validate_phone, value)
        return value

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    cpf = serializers.CharField(required=True, max_length=14)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class UserPublicSerializer(serializers.ModelSerializer):
    """Public user info (for displaying winners, voucher owners, etc.)."""

    class Meta:
        model = User
        fields = ['id', 'name']
        read_only_fields = fields
