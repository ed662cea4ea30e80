"""
Event management service.

Handles event CRUD. Only the organiser may change or delete an event.
"""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.events.models import Event, Location, UserLocation, PartyType, EventType

from .exceptions import (
    EventNotFoundError,
    LocationNotFoundError,
    InvalidEventDataError,
    InsufficientPermissionsError,
)
from .visibility import can_view_event

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    'name',
    'description',
    'party_type',
    'type',
    'is_public',
    'is_approval_required',
    'start_time',
    'end_time',
    'max_attendees',
    'price',
    'cover_image',
)


def _resolve_location(location_id) -> Optional[Location]:
    if not location_id:
        return None
    try:
        return Location.objects.get(id=location_id)
    except Location.DoesNotExist:
        raise LocationNotFoundError(f"Location with ID {location_id} not found")


def _resolve_user_location(user_location_id, organiser: User) -> Optional[UserLocation]:
    if not user_location_id:
        return None
    try:
        return UserLocation.objects.get(id=user_location_id, creator=organiser)
    except UserLocation.DoesNotExist:
        raise LocationNotFoundError(f"User location with ID {user_location_id} not found")


def _validate(event: Event) -> None:
    """Check cross-field rules on an unsaved or modified event."""
    if not event.name or not event.name.strip():
        raise InvalidEventDataError("Event name is required")
    if event.start_time is None:
        raise InvalidEventDataError("Start time is required")
    if event.end_time is not None and event.end_time <= event.start_time:
        raise InvalidEventDataError("End time must be after start time")
    if event.location_id and event.user_location_id:
        raise InvalidEventDataError("An event cannot have both a location and a user location")
    if event.max_attendees is not None and event.max_attendees < 0:
        raise InvalidEventDataError("max_attendees cannot be negative")
    if event.price is not None and Decimal(event.price) < 0:
        raise InvalidEventDataError("Price cannot be negative")
    if event.party_type not in PartyType.values:
        raise InvalidEventDataError(f"Unknown party type: {event.party_type}")
    if event.type not in EventType.values:
        raise InvalidEventDataError(f"Unknown event type: {event.type}")


@transaction.atomic
def create_event(
    *,
    organiser: User,
    name: str,
    start_time,
    description: str = "",
    party_type: str = PartyType.HOUSE_PARTY,
    type: str = EventType.PARTY,
    is_public: bool = False,
    is_approval_required: bool = False,
    end_time=None,
    max_attendees: Optional[int] = None,
    price: Optional[Decimal] = None,
    cover_image: str = "",
    location_id: Optional[UUID] = None,
    user_location_id: Optional[UUID] = None
) -> Event:
    """
    Create a new event organised by `organiser`.

    Args:
        organiser: User creating the event
        name: Event name
        start_time: When it starts
        location_id: Optional public Location
        user_location_id: Optional UserLocation, must belong to the organiser
        (remaining args map to Event fields)

    Returns:
        Created Event instance

    Raises:
        InvalidEventDataError: If a validation rule fails
        LocationNotFoundError: If a referenced location doesn't exist
    """
    if location_id and user_location_id:
        raise InvalidEventDataError("An event cannot have both a location and a user location")

    event = Event(
        organiser=organiser,
        name=name,
        description=description or "",
        party_type=party_type,
        type=type,
        is_public=is_public,
        is_approval_required=is_approval_required,
        start_time=start_time,
        end_time=end_time,
        max_attendees=max_attendees,
        price=price,
        cover_image=cover_image or "",
        location=_resolve_location(location_id),
        user_location=_resolve_user_location(user_location_id, organiser),
    )
    _validate(event)
    event.save()

    logger.info("Event %s created by %s", event.id, organiser.id)
    return event


def get_event_by_id(*, event_id: UUID, user: Optional[User] = None) -> Event:
    """
    Get an event by ID.

    When `user` is given, events the user may not see are reported as
    missing.

    Raises:
        EventNotFoundError: If event doesn't exist or is hidden from user
    """
    try:
        event = (
            Event.objects
            .select_related('organiser', 'location', 'user_location')
            .get(id=event_id)
        )
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    if user is not None and not can_view_event(event=event, user=user):
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    return event


def _get_own_event_for_update(event_id: UUID, user: User) -> Event:
    try:
        event = Event.objects.select_for_update().get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    if not event.is_organiser(user):
        raise InsufficientPermissionsError("Only the organiser can modify this event")

    return event


@transaction.atomic
def update_event(*, event_id: UUID, user: User, **fields) -> Event:
    """
    Update event fields (organiser only).

    `location_id` and `user_location_id` may be passed to move the event;
    passing None clears the reference.

    Raises:
        EventNotFoundError: If event doesn't exist
        InsufficientPermissionsError: If user is not the organiser
        InvalidEventDataError: If the result breaks a validation rule
        LocationNotFoundError: If a referenced location doesn't exist
    """
    event = _get_own_event_for_update(event_id, user)

    for name in UPDATABLE_FIELDS:
        if name in fields:
            setattr(event, name, fields[name])

    if 'location_id' in fields:
        event.location = _resolve_location(fields['location_id'])
    if 'user_location_id' in fields:
        event.user_location = _resolve_user_location(fields['user_location_id'], user)

    _validate(event)
    event.save()

    logger.info("Event %s updated", event.id)
    return event


@transaction.atomic
def delete_event(*, event_id: UUID, user: User) -> None:
    """
    Delete an event (organiser only). Registrations go with it.

    Raises:
        EventNotFoundError: If event doesn't exist
        InsufficientPermissionsError: If user is not the organiser
    """
    event = _get_own_event_for_update(event_id, user)
    event.delete()
    logger.info("Event %s deleted by %s", event_id, user.id)


def get_my_events(*, user: User) -> QuerySet[Event]:
    """Events organised by `user`, latest start first."""
    return (
        Event.objects
        .filter(organiser=user)
        .select_related('organiser', 'location', 'user_location')
        .order_by('-start_time')
    )


def get_public_events() -> QuerySet[Event]:
    """All public events, soonest first."""
    return (
        Event.objects
        .filter(is_public=True)
        .select_related('organiser', 'location', 'user_location')
        .order_by('start_time')
    )
