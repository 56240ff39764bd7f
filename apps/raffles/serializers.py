from rest_framework import serializers

from apps.accounts.serializers import UserPublicSerializer
from .models import Raffle, Prize, ResultType, MAX_RAFFLE_NUMBER


class PrizeSerializer(serializers.ModelSerializer):
    """Prize slot, nested inside raffles."""

    is_main = serializers.BooleanField(read_only=True)

    class Meta:
        model = Prize
        fields = ['id', 'name', 'number_count', 'order', 'is_main']
        read_only_fields = ['id', 'is_main']


class RaffleSerializer(serializers.ModelSerializer):
    """Full raffle representation including prizes and draw outcome."""

    prizes = PrizeSerializer(many=True, read_only=True)
    capacity = serializers.IntegerField(read_only=True)

    class Meta:
        model = Raffle
        fields = [
            'id',
            'name',
            'status',
            'start_date',
            'end_date',
            'draw_date',
            'video_link',
            'banner_image',
            'total_numbers',
            'min_number',
            'max_number',
            'capacity',
            'winning_numbers',
            'result_type',
            'configuration',
            'prizes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class RaffleListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for raffle listings."""

    prize_count = serializers.SerializerMethodField()

    class Meta:
        model = Raffle
        fields = [
            'id',
            'name',
            'status',
            'start_date',
            'draw_date',
            'banner_image',
            'total_numbers',
            'prize_count',
            'created_at',
        ]
        read_only_fields = fields

    def get_prize_count(self, obj):
        return len(obj.prizes.all())


class RaffleWriteSerializer(serializers.ModelSerializer):
    """Input for creating and updating raffles. ``prizes`` replaces the prize list."""

    prizes = PrizeSerializer(many=True, required=False)

    class Meta:
        model = Raffle
        fields = [
            'name',
            'status',
            'start_date',
            'end_date',
            'draw_date',
            'video_link',
            'banner_image',
            'total_numbers',
            'min_number',
            'max_number',
            'configuration',
            'prizes',
        ]

    def validate(self, attrs):
        instance = self.instance
        min_number = attrs.get('min_number', getattr(instance, 'min_number', 1))
        max_number = attrs.get('max_number', getattr(instance, 'max_number', MAX_RAFFLE_NUMBER))
        if min_number > max_number:
            raise serializers.ValidationError({
                'max_number': 'max_number must be greater than or equal to min_number'
            })
        return attrs


class DrawResultSerializer(serializers.Serializer):
    """Input for POST /api/sorteios/{id}/resultado/."""

    result_type = serializers.ChoiceField(choices=ResultType.choices)
    numbers = serializers.CharField(required=False, allow_blank=True, default='')

    def validate(self, attrs):
        if attrs['result_type'] == ResultType.MANUAL and not attrs['numbers'].strip():
            raise serializers.ValidationError({
                'numbers': 'Winning numbers are required for a manual draw'
            })
        return attrs


class WinnerSerializer(serializers.Serializer):
    position = serializers.IntegerField()
    number = serializers.CharField()
    prize_name = serializers.CharField()
    prize_order = serializers.IntegerField()
    is_main = serializers.BooleanField()
    user = UserPublicSerializer(allow_null=True)


class RaffleStatisticsSerializer(serializers.Serializer):
    raffle_id = serializers.UUIDField()
    total_numbers = serializers.IntegerField()
    numbers_sold = serializers.IntegerField()
    numbers_remaining = serializers.IntegerField()
    percent_sold = serializers.DecimalField(max_digits=5, decimal_places=1)
    participants = serializers.IntegerField()
