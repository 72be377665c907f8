from django.contrib import admin
from .models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ['date', 'type', 'amount', 'category', 'counterparty_name', 'user']
    list_filter = ['type', 'date']
    search_fields = ['description', 'category', 'counterparty_name', 'user__email']
    date_hierarchy = 'date'
    readonly_fields = ['created_at', 'updated_at']
