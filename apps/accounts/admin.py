from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Tenant management: listing, filtering and admin-role toggling."""

    list_display = [
        'email',
        'display_name',
        'is_active',
        'is_admin_badge',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'is_active',
        'is_staff',
        'created_at',
    ]

    search_fields = [
        'email',
        'display_name',
    ]

    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'display_name', 'password')
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'display_name', 'password1', 'password2'),
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser'),
        }),
    )

    readonly_fields = ['created_at', 'last_login']

    filter_horizontal = ['groups', 'user_permissions']

    actions = ['grant_admin', 'revoke_admin']

    def is_admin_badge(self, obj):
        """Display admin role as colored badge."""
        if obj.is_staff:
            return format_html(
                '<span style="background: #DB2777; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">Admin</span>'
            )
        return format_html(
            '<span style="background: #ccc; color: #666; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">User</span>'
        )
    is_admin_badge.short_description = 'Role'
    is_admin_badge.admin_order_field = 'is_staff'

    @admin.action(description='Grant admin role')
    def grant_admin(self, request, queryset):
        count = queryset.update(is_staff=True)
        self.message_user(request, f'Granted admin to {count} user(s).')

    @admin.action(description='Revoke admin role')
    def revoke_admin(self, request, queryset):
        """Revoke admin role (superusers are skipped)."""
        count = queryset.filter(is_superuser=False).update(is_staff=False)
        self.message_user(request, f'Revoked admin from {count} user(s).')
