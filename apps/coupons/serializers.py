from rest_framework import serializers

from .models import Coupon


class CouponSerializer(serializers.ModelSerializer):
    """Coupon CRUD serializer (admin)."""

    is_expired = serializers.BooleanField(read_only=True)
    is_exhausted = serializers.BooleanField(read_only=True)

    class Meta:
        model = Coupon
        fields = [
            'id',
            'code',
            'coupon_type',
            'value',
            'is_active',
            'expires_at',
            'max_uses',
            'current_uses',
            'is_expired',
            'is_exhausted',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'current_uses', 'created_at', 'updated_at']

    def validate_code(self, value):
        code = value.strip().upper()
        if not code:
            raise serializers.ValidationError('Code cannot be blank')
        queryset = Coupon.objects.filter(code=code)
        if self.instance is not None:
            queryset = queryset.exclude(id=self.instance.id)
        if queryset.exists():
            raise serializers.ValidationError('A coupon with this code already exists')
        return code

    def validate(self, attrs):
        coupon_type = attrs.get('coupon_type', getattr(self.instance, 'coupon_type', None))
        value = attrs.get('value', getattr(self.instance, 'value', None))
        if coupon_type == 'percentage' and value is not None and value > 100:
            raise serializers.ValidationError({
                'value': 'Percentage coupons cannot exceed 100'
            })
        return attrs


class CouponValidateQuerySerializer(serializers.Serializer):
    """Query params for GET /api/cupons/validar/."""

    code = serializers.CharField(max_length=50)


class CouponPublicSerializer(serializers.ModelSerializer):
    """What a participant learns about a valid coupon."""

    class Meta:
        model = Coupon
        fields = ['code', 'coupon_type', 'value', 'expires_at']
        read_only_fields = fields
