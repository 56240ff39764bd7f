from decimal import Decimal

from rest_framework import serializers

from apps.accounts.serializers import UserPublicSerializer
from .models import RaffleNumber


class RaffleNumberSerializer(serializers.ModelSerializer):
    """Issued raffle number."""

    user = UserPublicSerializer(read_only=True)
    raffle_name = serializers.CharField(source='raffle.name', read_only=True)

    class Meta:
        model = RaffleNumber
        fields = [
            'id',
            'number',
            'user',
            'raffle',
            'raffle_name',
            'voucher',
            'created_at',
        ]
        read_only_fields = fields


class GenerateNumbersSerializer(serializers.Serializer):
    """Input for POST /api/numeros/gerar/."""

    user_id = serializers.UUIDField()
    raffle_id = serializers.UUIDField()
    amount = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01')
    )
    coupon_code = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')
    discount_applied = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0'),
        required=False,
        allow_null=True,
        default=None
    )


class NumberFilterSerializer(serializers.Serializer):
    """Query params for number listings."""

    user = serializers.UUIDField(required=False)
    raffle = serializers.UUIDField(required=False)
