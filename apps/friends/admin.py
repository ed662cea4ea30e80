# ==========================================
# apps/friends/admin.py
# ==========================================

from django.contrib import admin
from .models import Friendship


@admin.register(Friendship)
class FriendshipAdmin(admin.ModelAdmin):
    list_display = ['user', 'friend', 'status', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['user__email', 'user__display_name', 'friend__email', 'friend__display_name']
    raw_id_fields = ['user', 'friend']
    readonly_fields = ['created_at']
    ordering = ['-created_at']
