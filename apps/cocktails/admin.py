# ==========================================
# apps/cocktails/admin.py
# ==========================================

from django.contrib import admin
from .models import Cocktail


@admin.register(Cocktail)
class CocktailAdmin(admin.ModelAdmin):
    list_display = ['name', 'creator', 'origin_type', 'cocktail_type', 'difficulty', 'is_public', 'created_at']
    list_filter = ['origin_type', 'difficulty', 'is_public', 'cocktail_type']
    search_fields = ['name', 'creator__email']
    raw_id_fields = ['creator']
    readonly_fields = ['created_at']
