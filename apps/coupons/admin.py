from django.contrib import admin
from django.utils.html import format_html

from .models import Coupon


@admin.register(Coupon)
class CouponAdmin(admin.ModelAdmin):
    list_display = [
        'code',
        'coupon_type',
        'value',
        'usage',
        'expires_at',
        'status_badge',
        'created_at',
    ]
    list_filter = ['coupon_type', 'is_active', 'expires_at']
    search_fields = ['code']
    ordering = ['-created_at']
    readonly_fields = ['current_uses', 'created_at', 'updated_at']

    def usage(self, obj):
        if obj.max_uses is None:
            return f"{obj.current_uses} / ∞"
        return f"{obj.current_uses} / {obj.max_uses}"
    usage.short_description = 'Uses'

    def status_badge(self, obj):
        """Active, expired, exhausted or inactive."""
        if not obj.is_active:
            label, color = 'Inactive', '#B85C5C'
        elif obj.is_expired:
            label, color = 'Expired', '#6B7280'
        elif obj.is_exhausted:
            label, color = 'Exhausted', '#D97706'
        else:
            label, color = 'Active', '#6B8E5E'
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            color,
            label
        )
    status_badge.short_description = 'Status'

    actions = ['deactivate_coupons']

    @admin.action(description='Deactivate selected coupons')
    def deactivate_coupons(self, request, queryset):
        count = queryset.update(is_active=False)
        self.message_user(request, f'Deactivated {count} coupon(s).')
