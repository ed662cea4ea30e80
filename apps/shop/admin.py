# ==========================================
# apps/shop/admin.py
# ==========================================

from django.contrib import admin
from .models import ShopItem


@admin.register(ShopItem)
class ShopItemAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'price', 'created_at']
    list_filter = ['category']
    search_fields = ['name', 'description']
    readonly_fields = ['created_at']
