from django.contrib import admin
from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'price', 'stock', 'user', 'updated_at']
    list_filter = ['category']
    search_fields = ['name', 'category', 'user__email']
    readonly_fields = ['id', 'created_at', 'updated_at']
    list_select_related = ['user']
