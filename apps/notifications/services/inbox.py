"""Reading and managing a user's notifications."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from django.conf import settings
from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

from apps.accounts.models import User
from apps.notifications.models import Notification

from .exceptions import NotificationNotFoundError


def get_notifications(*, user: User, limit: Optional[int] = None) -> QuerySet[Notification]:
    """Newest notifications for `user`, at most `limit` (default NOTIFICATIONS_PAGE_SIZE)."""
    if limit is None:
        limit = settings.NOTIFICATIONS_PAGE_SIZE

    return (
        Notification.objects
        .filter(user=user)
        .select_related('actor')
        .order_by('-created_at')[:limit]
    )


def get_unread_notification_count(*, user: User) -> int:
    return Notification.objects.filter(user=user, is_read=False).count()


@transaction.atomic
def mark_all_notifications_read(*, user: User) -> int:
    """
    Mark every unread notification of `user` as read.

    Returns:
        Number of notifications updated
    """
    return Notification.objects.filter(user=user, is_read=False).update(is_read=True)


@transaction.atomic
def delete_notification(*, notification_id: UUID, user: User) -> None:
    """
    Delete one of the user's notifications.

    Raises:
        NotificationNotFoundError: If it doesn't exist or belongs to someone else
    """
    deleted, _ = Notification.objects.filter(id=notification_id, user=user).delete()
    if not deleted:
        raise NotificationNotFoundError(f"Notification with ID {notification_id} not found")


def format_time_ago(value: datetime, now: Optional[datetime] = None) -> str:
    """
    Human readable age of a timestamp, e.g. '3 min ago' or '2 weeks ago'.
    """
    now = now or timezone.now()
    minutes = int((now - value).total_seconds() // 60)

    if minutes < 1:
        return 'Just now'
    if minutes < 60:
        return f'{minutes} min ago'

    hours = minutes // 60
    if hours < 24:
        return f'{hours} hour{"" if hours == 1 else "s"} ago'

    days = hours // 24
    if days < 7:
        return f'{days} day{"" if days == 1 else "s"} ago'

    weeks = days // 7
    return f'{weeks} week{"" if weeks == 1 else "s"} ago'
