# ==========================================
# apps/drinklogs/admin.py
# ==========================================

from django.contrib import admin
from .models import DrinkLog, DrinkLogLike, DrinkLogComment, DrinkLogTag


class DrinkLogCommentInline(admin.TabularInline):
    model = DrinkLogComment
    extra = 0
    raw_id_fields = ['user']
    readonly_fields = ['created_at']


class DrinkLogTagInline(admin.TabularInline):
    model = DrinkLogTag
    extra = 0
    raw_id_fields = ['tagged_user']
    readonly_fields = ['created_at']


@admin.register(DrinkLog)
class DrinkLogAdmin(admin.ModelAdmin):
    list_display = ['user', 'cocktail', 'location', 'rating', 'visibility', 'created_at']
    list_filter = ['visibility', 'rating', 'created_at']
    search_fields = ['user__email', 'cocktail__name', 'caption']
    raw_id_fields = ['user', 'cocktail', 'location']
    readonly_fields = ['created_at']
    date_hierarchy = 'created_at'
    inlines = [DrinkLogCommentInline, DrinkLogTagInline]


@admin.register(DrinkLogLike)
class DrinkLogLikeAdmin(admin.ModelAdmin):
    list_display = ['drink_log', 'user', 'created_at']
    raw_id_fields = ['drink_log', 'user']


@admin.register(DrinkLogComment)
class DrinkLogCommentAdmin(admin.ModelAdmin):
    list_display = ['drink_log', 'user', 'created_at']
    search_fields = ['content', 'user__email']
    raw_id_fields = ['drink_log', 'user']
