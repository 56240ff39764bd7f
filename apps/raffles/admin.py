from django.contrib import admin
from django.utils.html import format_html

from .models import Raffle, Prize, RaffleStatus


class PrizeInline(admin.TabularInline):
    model = Prize
    extra = 1
    fields = ['order', 'name', 'number_count']
    ordering = ['order']


@admin.register(Raffle)
class RaffleAdmin(admin.ModelAdmin):
    """Admin interface for raffles with inline prizes."""

    list_display = [
        'name',
        'status_badge',
        'start_date',
        'draw_date',
        'total_numbers',
        'numbers_issued',
        'result_type',
        'created_at',
    ]
    list_filter = ['status', 'result_type', 'created_at']
    search_fields = ['name']
    ordering = ['-created_at']
    date_hierarchy = 'created_at'
    inlines = [PrizeInline]

    fieldsets = (
        ('Raffle', {
            'fields': ('name', 'status', 'banner_image', 'video_link')
        }),
        ('Schedule', {
            'fields': ('start_date', 'end_date', 'draw_date')
        }),
        ('Numbers', {
            'fields': ('total_numbers', 'min_number', 'max_number')
        }),
        ('Result', {
            'fields': ('result_type', 'winning_numbers'),
        }),
        ('Advanced', {
            'fields': ('configuration', 'created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )
    readonly_fields = ['created_at', 'updated_at']

    def status_badge(self, obj):
        """Display status as colored badge."""
        color = '#059669' if obj.status == RaffleStatus.OPEN else '#6B7280'
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            color,
            obj.get_status_display()
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'

    def numbers_issued(self, obj):
        return obj.numbers.count()
    numbers_issued.short_description = 'Issued'

    actions = ['close_raffles', 'reopen_raffles']

    @admin.action(description='Close selected raffles')
    def close_raffles(self, request, queryset):
        count = queryset.update(status=RaffleStatus.CLOSED)
        self.message_user(request, f'Closed {count} raffle(s).')

    @admin.action(description='Reopen selected raffles')
    def reopen_raffles(self, request, queryset):
        count = queryset.filter(winning_numbers=[]).update(status=RaffleStatus.OPEN)
        self.message_user(request, f'Reopened {count} raffle(s) without a draw.')
