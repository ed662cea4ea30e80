# ==========================================
# apps/events/admin.py
# ==========================================

from django.contrib import admin
from .models import Event, EventRegistration, Location, UserLocation


class EventRegistrationInline(admin.TabularInline):
    model = EventRegistration
    extra = 0
    raw_id_fields = ['user']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ['name', 'organiser', 'party_type', 'type', 'is_public', 'start_time']
    list_filter = ['party_type', 'type', 'is_public', 'is_approval_required', 'start_time']
    search_fields = ['name', 'description', 'organiser__email']
    raw_id_fields = ['organiser', 'location', 'user_location']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'start_time'
    inlines = [EventRegistrationInline]

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'description', 'organiser', 'party_type', 'type', 'cover_image')
        }),
        ('Access', {
            'fields': ('is_public', 'is_approval_required', 'max_attendees', 'price'),
        }),
        ('When & Where', {
            'fields': ('start_time', 'end_time', 'location', 'user_location'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )


@admin.register(EventRegistration)
class EventRegistrationAdmin(admin.ModelAdmin):
    list_display = ['event', 'user', 'status', 'created_at']
    list_filter = ['status']
    search_fields = ['event__name', 'user__email']
    raw_id_fields = ['event', 'user']


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    list_display = ['name', 'city', 'country', 'rating']
    list_filter = ['country', 'city']
    search_fields = ['name', 'city', 'street_name']


@admin.register(UserLocation)
class UserLocationAdmin(admin.ModelAdmin):
    list_display = ['label', 'creator', 'street', 'house_nr', 'city']
    search_fields = ['label', 'creator__email', 'city']
    raw_id_fields = ['creator']
