from django.contrib import admin

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ('sku', 'name', 'quantity', 'created_at')
    search_fields = ('sku', 'name')
    readonly_fields = ('created_at',)
    ordering = ('sku',)
