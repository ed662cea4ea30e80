"""Party invites sent by an organiser to their friends."""

import logging
from typing import Iterable, List
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.events.models import Event
from apps.friends.services import get_friend_ids
from apps.notifications.models import NotificationType
from apps.notifications.services import create_notification

from .exceptions import EventNotFoundError, InsufficientPermissionsError

logger = logging.getLogger(__name__)


@transaction.atomic
def invite_friends(
    *,
    event_id: UUID,
    organiser: User,
    friend_ids: Iterable[UUID]
) -> List[UUID]:
    """
    Send party invites for an event to some of the organiser's friends.

    Ids that are not accepted friends of the organiser are skipped, as are
    receivers who turned party invites off.

    Returns:
        Ids of users that received a notification

    Raises:
        EventNotFoundError: If event doesn't exist
        InsufficientPermissionsError: If user is not the organiser
    """
    try:
        event = Event.objects.get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    if not event.is_organiser(organiser):
        raise InsufficientPermissionsError("Only the organiser can invite friends")

    allowed = set(get_friend_ids(user=organiser))
    wanted = [UUID(str(friend_id)) for friend_id in friend_ids]
    receivers = User.objects.filter(id__in=[i for i in wanted if i in allowed], is_active=True)

    message = f"{organiser.get_display_name()} invited you to {event.name}"
    invited = []
    for receiver in receivers:
        notification = create_notification(
            receiver=receiver,
            actor=organiser,
            notification_type=NotificationType.PARTY_INVITE,
            event=event,
            message=message,
        )
        if notification is not None:
            invited.append(receiver.id)

    logger.info("Event %s: invited %d of %d users", event.id, len(invited), len(wanted))
    return invited
