from django.contrib import admin

from .models import RaffleNumber


@admin.register(RaffleNumber)
class RaffleNumberAdmin(admin.ModelAdmin):
    list_display = ['number', 'raffle', 'user', 'voucher', 'created_at']
    list_filter = ['raffle', 'created_at']
    search_fields = ['number', 'user__name', 'user__cpf', 'raffle__name']
    ordering = ['raffle', 'number']
    raw_id_fields = ['user', 'raffle', 'voucher']
    readonly_fields = ['created_at']

    def has_add_permission(self, request):
        # Numbers are only issued through approval or generation
        return False
