"""
Dashboard analytics.

Read-only aggregate queries for the administrator dashboard. Every method
returns plain dicts and lists ready for JSON serialization.
"""

from datetime import date, datetime
from decimal import Decimal

from django.db.models import Sum, Count, F, Value, DecimalField, ExpressionWrapper
from django.db.models.functions import Coalesce, Greatest, TruncMonth
from django.utils import timezone

from apps.accounts.models import User, UserRole
from apps.numbers.models import RaffleNumber
from apps.raffles.models import Raffle, RaffleStatus
from apps.vouchers.models import Voucher, VoucherStatus

ZERO = Value(Decimal('0.00'), output_field=DecimalField(max_digits=12, decimal_places=2))

# (amount_read or amount_informed) - discount_applied, floored at zero
EFFECTIVE_AMOUNT = Greatest(
    ExpressionWrapper(
        Coalesce('amount_read', 'amount_informed') - F('discount_applied'),
        output_field=DecimalField(max_digits=12, decimal_places=2),
    ),
    ZERO,
)


def _months_back(today: date, count: int) -> list[date]:
    """First day of the current month and the ``count - 1`` months before it."""
    year, month = today.year, today.month
    months = []
    for _ in range(count):
        months.append(date(year, month, 1))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return list(reversed(months))


class DashboardQueries:
    """
    Aggregates for GET /api/dashboard/stats/.

    Methods:
        counts: Users, vouchers by status, open raffles, numbers issued.
        total_deposited: Sum of effective amounts of approved vouchers.
        recent_vouchers: Latest submissions.
        top_depositors: Users ranked by approved deposits.
        monthly_deposits: Approved deposits per month.
        current_raffle: Most recent open raffle.
    """

    @staticmethod
    def counts():
        by_status = dict(
            Voucher.objects.order_by().values_list('status').annotate(total=Count('id'))
        )
        return {
            'total_users': User.objects.filter(role=UserRole.USER).count(),
            'pending_vouchers': by_status.get(VoucherStatus.PENDING, 0),
            'approved_vouchers': by_status.get(VoucherStatus.APPROVED, 0),
            'rejected_vouchers': by_status.get(VoucherStatus.REJECTED, 0),
            'open_raffles': Raffle.objects.filter(status=RaffleStatus.OPEN).count(),
            'numbers_issued': RaffleNumber.objects.count(),
        }

    @staticmethod
    def total_deposited():
        result = (
            Voucher.objects
            .filter(status=VoucherStatus.APPROVED)
            .aggregate(total=Sum(EFFECTIVE_AMOUNT))
        )
        return result['total'] or Decimal('0.00')

    @staticmethod
    def recent_vouchers(limit=10):
        vouchers = (
            Voucher.objects
            .select_related('user', 'raffle')
            .order_by('-created_at')[:limit]
        )
        return [
            {
                'id': voucher.id,
                'user_name': voucher.user.name,
                'raffle_name': voucher.raffle.name,
                'amount_informed': voucher.amount_informed,
                'status': voucher.status,
                'created_at': voucher.created_at,
            }
            for voucher in vouchers
        ]

    @staticmethod
    def top_depositors(limit=5):
        """Users with the highest approved deposits."""
        rows = (
            Voucher.objects
            .filter(status=VoucherStatus.APPROVED)
            .values('user_id', 'user__name')
            .annotate(total=Sum(EFFECTIVE_AMOUNT), vouchers=Count('id'))
            .order_by('-total', 'user__name')[:limit]
        )
        return [
            {
                'user_id': row['user_id'],
                'name': row['user__name'],
                'total_deposited': row['total'] or Decimal('0.00'),
                'vouchers': row['vouchers'],
            }
            for row in rows
        ]

    @staticmethod
    def monthly_deposits(months=12):
        """Approved deposits per month, oldest first, zero-filled."""
        window = _months_back(timezone.localdate(), months)
        start = timezone.make_aware(datetime.combine(window[0], datetime.min.time()))

        rows = (
            Voucher.objects
            .filter(status=VoucherStatus.APPROVED, created_at__gte=start)
            .annotate(month=TruncMonth('created_at'))
            .values('month')
            .annotate(total=Sum(EFFECTIVE_AMOUNT))
            .order_by()
        )
        totals = {
            row['month'].strftime('%Y-%m'): row['total'] or Decimal('0.00')
            for row in rows
        }

        return [
            {
                'month': month.strftime('%Y-%m'),
                'total': totals.get(month.strftime('%Y-%m'), Decimal('0.00')),
            }
            for month in window
        ]

    @staticmethod
    def current_raffle():
        raffle = (
            Raffle.objects
            .filter(status=RaffleStatus.OPEN)
            .order_by('-created_at')
            .first()
        )
        if raffle is None:
            return None
        return {
            'id': raffle.id,
            'name': raffle.name,
            'draw_date': raffle.draw_date,
            'total_numbers': raffle.capacity,
            'numbers_sold': raffle.numbers.count(),
        }

    @staticmethod
    def dashboard():
        data = DashboardQueries.counts()
        data.update({
            'total_deposited': DashboardQueries.total_deposited(),
            'recent_vouchers': DashboardQueries.recent_vouchers(),
            'top_users': DashboardQueries.top_depositors(),
            'monthly_deposits': DashboardQueries.monthly_deposits(),
            'current_raffle': DashboardQueries.current_raffle(),
        })
        return data
