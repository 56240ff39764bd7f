from decimal import Decimal

from rest_framework import serializers

from apps.accounts.serializers import UserPublicSerializer
from apps.numbers.serializers import RaffleNumberSerializer
from .models import Voucher, VoucherStatus


class VoucherSerializer(serializers.ModelSerializer):
    """Voucher with owner, raffle name and review details."""

    user = UserPublicSerializer(read_only=True)
    raffle_name = serializers.CharField(source='raffle.name', read_only=True)
    reviewed_by = UserPublicSerializer(read_only=True)
    effective_amount = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    numbers_count = serializers.SerializerMethodField()

    class Meta:
        model = Voucher
        fields = [
            'id',
            'user',
            'raffle',
            'raffle_name',
            'amount_informed',
            'amount_read',
            'discount_applied',
            'effective_amount',
            'coupon_code',
            'image',
            'status',
            'admin_response',
            'reviewed_by',
            'reviewed_at',
            'numbers_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_numbers_count(self, obj):
        return obj.numbers.count()


class VoucherCreateSerializer(serializers.Serializer):
    """Input for POST /api/comprovantes/."""

    raffle_id = serializers.UUIDField()
    amount_informed = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01')
    )
    image = serializers.CharField()
    coupon_code = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')


class VoucherApproveSerializer(serializers.Serializer):
    amount_read = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0'),
        required=False,
        allow_null=True,
        default=None
    )


class VoucherRejectSerializer(serializers.Serializer):
    admin_response = serializers.CharField(required=False, allow_blank=True, default='')


class VoucherFilterSerializer(serializers.Serializer):
    """Query params for voucher listings."""

    status = serializers.ChoiceField(choices=VoucherStatus.choices, required=False)
    raffle = serializers.UUIDField(required=False)


class VoucherApprovalResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    voucher = VoucherSerializer()
    numbers = RaffleNumberSerializer(many=True)
