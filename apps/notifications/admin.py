# ==========================================
# apps/notifications/admin.py
# ==========================================

from django.contrib import admin
from .models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ['type', 'user', 'actor', 'is_read', 'created_at']
    list_filter = ['type', 'is_read', 'created_at']
    search_fields = ['user__email', 'actor__email', 'message']
    raw_id_fields = ['user', 'actor', 'friendship', 'event', 'drink_log']
    readonly_fields = ['created_at']
    date_hierarchy = 'created_at'

    actions = ['mark_read']

    @admin.action(description='Mark selected as read')
    def mark_read(self, request, queryset):
        count = queryset.update(is_read=True)
        self.message_user(request, f'Marked {count} notification(s) as read.')
