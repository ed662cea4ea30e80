"""Notification creation, gated by the receiver's preferences."""

import logging
from typing import Optional

from django.db import transaction

from apps.accounts.models import User
from apps.notifications.models import Notification, NotificationType

logger = logging.getLogger(__name__)

# Settings key that must be enabled for the receiver, None = always delivered
PREFERENCE_BY_TYPE = {
    NotificationType.LIKE: 'likes',
    NotificationType.COMMENT: 'comments',
    NotificationType.FRIEND_REQUEST: 'friend_requests',
    NotificationType.FRIEND_ACCEPTED: 'friend_requests',
    NotificationType.PARTY_INVITE: 'party_invites',
    NotificationType.CLOSE_FRIEND_POST: None,
}


@transaction.atomic
def create_notification(
    *,
    receiver: User,
    actor: Optional[User],
    notification_type: str,
    friendship=None,
    event=None,
    drink_log=None,
    message: str = ""
) -> Optional[Notification]:
    """
    Create a notification unless the receiver opted out of its type.

    Args:
        receiver: User the notification is for
        actor: User who triggered it
        notification_type: One of NotificationType values
        friendship: Optional related Friendship
        event: Optional related Event
        drink_log: Optional related DrinkLog
        message: Text shown to the receiver

    Returns:
        Created Notification, or None when suppressed by the receiver's
        settings or when actor and receiver are the same user
    """
    if actor is not None and actor.id == receiver.id:
        return None

    preference = PREFERENCE_BY_TYPE.get(notification_type)
    if preference and not receiver.wants_notification(preference):
        logger.debug(
            "Suppressed %s notification for %s (%s off)",
            notification_type, receiver.id, preference
        )
        return None

    return Notification.objects.create(
        user=receiver,
        actor=actor,
        type=notification_type,
        friendship=friendship,
        event=event,
        drink_log=drink_log,
        message=message or "",
    )
