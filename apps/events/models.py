# ==========================================
# apps/events/models.py
# ==========================================

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
import uuid


class PartyType(models.TextChoices):
    HOUSE_PARTY = 'house party', 'House party'
    OUTDOOR_EVENT = 'outdoor event', 'Outdoor event'
    BAR_MEETUP = 'bar meetup', 'Bar meetup'
    THEMED_PARTY = 'themed party', 'Themed party'


class EventType(models.TextChoices):
    PARTY = 'party', 'Party'
    EVENT = 'event', 'Event'


class RegistrationStatus(models.TextChoices):
    REGISTERED = 'registered', 'Registered'
    CANCELLED = 'cancelled', 'Cancelled'
    WAITLISTED = 'waitlisted', 'Waitlisted'


ACTIVE_REGISTRATION_STATUSES = (RegistrationStatus.REGISTERED, RegistrationStatus.WAITLISTED)


class Location(models.Model):
    """Public venue or bar."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    street_name = models.CharField(max_length=200, blank=True)
    street_nr = models.CharField(max_length=20, blank=True)
    city = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=100, blank=True)
    description = models.TextField(blank=True)
    image_url = models.URLField(max_length=500, blank=True)
    rating = models.DecimalField(
        max_digits=2,
        decimal_places=1,
        null=True,
        blank=True,
        validators=[MinValueValidator(0), MaxValueValidator(5)]
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'locations'
        ordering = ['name']

    def __str__(self):
        return self.name


class UserLocation(models.Model):
    """Private address saved by a user, e.g. home for house parties."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    creator = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='user_locations')
    label = models.CharField(max_length=100)
    street = models.CharField(max_length=200)
    house_nr = models.PositiveIntegerField()
    city = models.CharField(max_length=100)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'user_locations'
        ordering = ['label']

    def __str__(self):
        return f"{self.label} ({self.street} {self.house_nr}, {self.city})"


class Event(models.Model):
    """
    A party or event organised by a user.

    Held either at a public Location or at one of the organiser's own
    UserLocations, never both.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    organiser = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='organised_events')
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    party_type = models.CharField(max_length=20, choices=PartyType.choices, default=PartyType.HOUSE_PARTY)
    type = models.CharField(max_length=10, choices=EventType.choices, default=EventType.PARTY)

    is_public = models.BooleanField(default=False)
    is_approval_required = models.BooleanField(default=False)

    start_time = models.DateTimeField()
    end_time = models.DateTimeField(null=True, blank=True)
    max_attendees = models.PositiveIntegerField(null=True, blank=True)
    price = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True)
    cover_image = models.URLField(max_length=500, blank=True)

    location = models.ForeignKey(
        Location, on_delete=models.SET_NULL, null=True, blank=True, related_name='events'
    )
    user_location = models.ForeignKey(
        UserLocation, on_delete=models.SET_NULL, null=True, blank=True, related_name='events'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'events'
        indexes = [
            models.Index(fields=['organiser', 'start_time'], name='event_organiser_start_idx'),
            models.Index(fields=['is_public', 'start_time'], name='event_public_start_idx'),
        ]
        ordering = ['start_time']

    def __str__(self):
        return self.name

    def is_organiser(self, user):
        return self.organiser_id == user.id


class EventRegistration(models.Model):
    """A user's registration for an event. Cancelling keeps the row."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name='registrations')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='event_registrations')
    status = models.CharField(max_length=20, choices=RegistrationStatus.choices)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'event_registrations'
        unique_together = [['event', 'user']]
        indexes = [
            models.Index(fields=['event', 'status'], name='registration_event_status_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.user} @ {self.event} ({self.status})"

    @property
    def is_active(self):
        return self.status in ACTIVE_REGISTRATION_STATUSES
