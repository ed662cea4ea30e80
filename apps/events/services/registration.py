"""
Event registration state machine.

    (none) -> registered | waitlisted -> cancelled -> registered | waitlisted

Events that require approval put new registrations on the waitlist; only the
organiser can move a waitlisted registration to registered. Cancelling keeps
the row, so re-registering updates it in place.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.events.models import (
    Event,
    EventRegistration,
    RegistrationStatus,
    ACTIVE_REGISTRATION_STATUSES,
)

from .exceptions import (
    EventNotFoundError,
    InsufficientPermissionsError,
    AlreadyRegisteredError,
    NotRegisteredError,
    RegistrationNotFoundError,
    InvalidRegistrationStateError,
)
from .visibility import can_view_event

logger = logging.getLogger(__name__)


def _get_event(event_id: UUID, lock: bool = False) -> Event:
    queryset = Event.objects.select_for_update() if lock else Event.objects
    try:
        return queryset.get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")


@transaction.atomic
def register_for_event(*, event_id: UUID, user: User) -> EventRegistration:
    """
    Register `user` for an event.

    The event row is locked so concurrent registrations for the same event
    are serialised.

    Args:
        event_id: UUID of the event
        user: User registering

    Returns:
        The created or reactivated EventRegistration. Its status is
        'waitlisted' when the event requires approval, else 'registered'.

    Raises:
        EventNotFoundError: If event doesn't exist or is not visible to user
        AlreadyRegisteredError: If user is already registered or waitlisted
    """
    event = _get_event(event_id, lock=True)

    if not can_view_event(event=event, user=user):
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    new_status = (
        RegistrationStatus.WAITLISTED
        if event.is_approval_required
        else RegistrationStatus.REGISTERED
    )

    registration = (
        EventRegistration.objects
        .select_for_update()
        .filter(event=event, user=user)
        .first()
    )

    if registration is not None:
        if registration.is_active:
            raise AlreadyRegisteredError("You are already registered for this event")
        registration.status = new_status
        registration.save(update_fields=['status', 'updated_at'])
    else:
        try:
            with transaction.atomic():
                registration = EventRegistration.objects.create(
                    event=event,
                    user=user,
                    status=new_status,
                )
        except IntegrityError:
            raise AlreadyRegisteredError("You are already registered for this event")

    logger.info("User %s %s for event %s", user.id, new_status, event.id)
    return registration


@transaction.atomic
def cancel_registration(*, event_id: UUID, user: User) -> EventRegistration:
    """
    Cancel the user's registration. The row is kept with status 'cancelled'.

    Raises:
        NotRegisteredError: If user has no registered or waitlisted row
    """
    registration = (
        EventRegistration.objects
        .select_for_update()
        .filter(
            event_id=event_id,
            user=user,
            status__in=ACTIVE_REGISTRATION_STATUSES,
        )
        .first()
    )
    if registration is None:
        raise NotRegisteredError("You are not registered for this event")

    registration.status = RegistrationStatus.CANCELLED
    registration.save(update_fields=['status', 'updated_at'])

    logger.info("User %s cancelled registration for event %s", user.id, event_id)
    return registration


@transaction.atomic
def decide_registration(
    *,
    event_id: UUID,
    user_id: UUID,
    decided_by: User,
    approve: bool
) -> EventRegistration:
    """
    Approve or reject a waitlisted registration (organiser only).

    Args:
        event_id: UUID of the event
        user_id: UUID of the waitlisted user
        decided_by: User making the decision, must be the organiser
        approve: True moves the row to 'registered', False to 'cancelled'

    Raises:
        EventNotFoundError: If event doesn't exist
        InsufficientPermissionsError: If decided_by is not the organiser
        RegistrationNotFoundError: If the user has no registration
        InvalidRegistrationStateError: If the registration is not waitlisted
    """
    event = _get_event(event_id)

    if not event.is_organiser(decided_by):
        raise InsufficientPermissionsError("Only the organiser can approve registrations")

    try:
        registration = (
            EventRegistration.objects
            .select_for_update()
            .get(event=event, user_id=user_id)
        )
    except EventRegistration.DoesNotExist:
        raise RegistrationNotFoundError("Registration not found")

    if registration.status != RegistrationStatus.WAITLISTED:
        raise InvalidRegistrationStateError("Only waitlisted registrations can be approved or rejected")

    registration.status = (
        RegistrationStatus.REGISTERED if approve else RegistrationStatus.CANCELLED
    )
    registration.save(update_fields=['status', 'updated_at'])

    logger.info(
        "Registration of %s for event %s %s",
        user_id, event.id, 'approved' if approve else 'rejected'
    )
    return registration


def get_user_event_registration(*, event_id: UUID, user: User) -> dict:
    """
    Registration state of `user` for an event.

    A cancelled row counts as no registration.

    Returns:
        {'is_registered': bool, 'status': 'registered' | 'waitlisted' | None}
    """
    registration = (
        EventRegistration.objects
        .filter(event_id=event_id, user=user, status__in=ACTIVE_REGISTRATION_STATUSES)
        .only('status')
        .first()
    )
    if registration is None:
        return {'is_registered': False, 'status': None}
    return {'is_registered': True, 'status': registration.status}


def get_event_registrations(
    *,
    event_id: UUID,
    user: User,
    status: Optional[str] = None
) -> QuerySet[EventRegistration]:
    """
    Attendees and waitlist of an event (organiser only).

    Cancelled rows are left out unless `status` asks for them explicitly.

    Raises:
        EventNotFoundError: If event doesn't exist
        InsufficientPermissionsError: If user is not the organiser
    """
    event = _get_event(event_id)

    if not event.is_organiser(user):
        raise InsufficientPermissionsError("Only the organiser can view registrations")

    registrations = (
        EventRegistration.objects
        .filter(event=event)
        .select_related('user')
        .order_by('created_at')
    )
    if status:
        return registrations.filter(status=status)
    return registrations.filter(status__in=ACTIVE_REGISTRATION_STATUSES)
