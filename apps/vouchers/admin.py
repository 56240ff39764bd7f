from django.contrib import admin
from django.utils.html import format_html

from .models import Voucher, VoucherStatus


STATUS_COLORS = {
    VoucherStatus.PENDING: '#D97706',
    VoucherStatus.APPROVED: '#059669',
    VoucherStatus.REJECTED: '#B85C5C',
}


@admin.register(Voucher)
class VoucherAdmin(admin.ModelAdmin):
    """
    Read-mostly view of vouchers.

    Approval goes through the API so numbers are issued atomically.
    """

    list_display = [
        'user',
        'raffle',
        'amount_informed',
        'amount_read',
        'discount_applied',
        'coupon_code',
        'status_badge',
        'created_at',
    ]
    list_filter = ['status', 'raffle', 'created_at']
    search_fields = ['user__name', 'user__cpf', 'coupon_code']
    ordering = ['-created_at']
    date_hierarchy = 'created_at'
    raw_id_fields = ['user', 'raffle', 'reviewed_by']
    readonly_fields = [
        'status',
        'discount_applied',
        'reviewed_by',
        'reviewed_at',
        'created_at',
        'updated_at',
    ]

    def status_badge(self, obj):
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            STATUS_COLORS.get(obj.status, '#6B7280'),
            obj.get_status_display()
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'
