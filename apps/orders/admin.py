from django.contrib import admin
from django.utils.html import format_html
from .models import Order, OrderStatus


STATUS_COLORS = {
    OrderStatus.PENDING: '#CA8A04',
    OrderStatus.PROCESSING: '#2563EB',
    OrderStatus.SHIPPED: '#7C3AED',
    OrderStatus.DONE: '#16A34A',
}


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Admin interface for customer orders."""

    list_display = [
        'customer_name',
        'product',
        'quantity',
        'status_badge',
        'tracking_number',
        'user',
        'created_at',
    ]
    list_filter = ['status', 'created_at']
    search_fields = ['customer_name', 'customer_phone', 'tracking_number', 'user__email']
    readonly_fields = ['id', 'created_at', 'updated_at']
    list_select_related = ['product', 'user']
    ordering = ['-created_at']

    def status_badge(self, obj):
        color = STATUS_COLORS.get(obj.status, '#666')
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            color,
            obj.get_status_display(),
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'
