from rest_framework import serializers


# Response serializers for API documentation
class RecentVoucherSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    user_name = serializers.CharField()
    raffle_name = serializers.CharField()
    amount_informed = serializers.DecimalField(max_digits=10, decimal_places=2)
    status = serializers.CharField()
    created_at = serializers.DateTimeField()


class TopUserSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    name = serializers.CharField()
    total_deposited = serializers.DecimalField(max_digits=12, decimal_places=2)
    vouchers = serializers.IntegerField()


class MonthlyDepositSerializer(serializers.Serializer):
    month = serializers.CharField()
    total = serializers.DecimalField(max_digits=12, decimal_places=2)


class CurrentRaffleSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    draw_date = serializers.DateTimeField(allow_null=True)
    total_numbers = serializers.IntegerField()
    numbers_sold = serializers.IntegerField()


class DashboardStatsSerializer(serializers.Serializer):
    total_users = serializers.IntegerField()
    pending_vouchers = serializers.IntegerField()
    approved_vouchers = serializers.IntegerField()
    rejected_vouchers = serializers.IntegerField()
    open_raffles = serializers.IntegerField()
    numbers_issued = serializers.IntegerField()
    total_deposited = serializers.DecimalField(max_digits=12, decimal_places=2)
    recent_vouchers = RecentVoucherSerializer(many=True)
    top_users = TopUserSerializer(many=True)
    monthly_deposits = MonthlyDepositSerializer(many=True)
    current_raffle = CurrentRaffleSerializer(allow_null=True)
