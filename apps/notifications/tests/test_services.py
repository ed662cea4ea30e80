"""
Service layer unit tests for notifications app.

Tests cover:
- Preference-gated delivery
- Inbox listing, unread count, mark read and delete
- Relative time formatting
"""

import pytest
from datetime import datetime, timedelta, timezone as dt_timezone
from uuid import uuid4

from apps.notifications.models import Notification, NotificationType
from apps.notifications.services import (
    create_notification,
    get_notifications,
    get_unread_notification_count,
    mark_all_notifications_read,
    delete_notification,
    format_time_ago,
)
from apps.notifications.services.exceptions import NotificationNotFoundError


# =============================================================================
# DELIVERY
# =============================================================================

@pytest.mark.django_db
class TestCreateNotification:

    def test_creates_notification(self, receiver, actor):
        notification = create_notification(
            receiver=receiver,
            actor=actor,
            notification_type=NotificationType.COMMENT,
            message='Actor commented on your drink',
        )

        assert notification.user == receiver
        assert notification.actor == actor
        assert notification.type == NotificationType.COMMENT
        assert notification.is_read is False

    def test_no_self_notification(self, receiver):
        result = create_notification(
            receiver=receiver,
            actor=receiver,
            notification_type=NotificationType.LIKE,
        )

        assert result is None
        assert not Notification.objects.exists()

    @pytest.mark.parametrize('notification_type, preference', [
        (NotificationType.LIKE, 'likes'),
        (NotificationType.COMMENT, 'comments'),
        (NotificationType.FRIEND_REQUEST, 'friend_requests'),
        (NotificationType.FRIEND_ACCEPTED, 'friend_requests'),
    ])
    def test_suppressed_when_preference_off(self, receiver, actor, notification_type, preference):
        receiver.settings = {'notifications': {preference: False}}
        receiver.save()

        result = create_notification(receiver=receiver, actor=actor, notification_type=notification_type)

        assert result is None

    def test_party_invites_off_by_default(self, receiver, actor):
        result = create_notification(
            receiver=receiver,
            actor=actor,
            notification_type=NotificationType.PARTY_INVITE,
        )

        assert result is None

    def test_party_invites_when_enabled(self, receiver, actor):
        receiver.settings = {'notifications': {'party_invites': True}}
        receiver.save()

        result = create_notification(
            receiver=receiver,
            actor=actor,
            notification_type=NotificationType.PARTY_INVITE,
        )

        assert result is not None

    def test_close_friend_post_always_delivered(self, receiver, actor):
        receiver.settings = {
            'notifications': {
                'likes': False,
                'comments': False,
                'party_invites': False,
                'friend_requests': False,
            }
        }
        receiver.save()

        result = create_notification(
            receiver=receiver,
            actor=actor,
            notification_type=NotificationType.CLOSE_FRIEND_POST,
        )

        assert result is not None


# =============================================================================
# INBOX
# =============================================================================

@pytest.mark.django_db
class TestInbox:

    def test_newest_first(self, receiver, make_notification):
        first = make_notification(message='first')
        second = make_notification(message='second')
        Notification.objects.filter(id=first.id).update(created_at=second.created_at - timedelta(minutes=5))

        result = list(get_notifications(user=receiver))

        assert result == [second, first]

    def test_limit(self, receiver, make_notification):
        for _ in range(3):
            make_notification()

        assert len(get_notifications(user=receiver, limit=2)) == 2

    def test_default_limit_from_settings(self, settings, receiver, make_notification):
        settings.NOTIFICATIONS_PAGE_SIZE = 1
        make_notification()
        make_notification()

        assert len(get_notifications(user=receiver)) == 1

    def test_only_own_notifications(self, actor, make_notification):
        make_notification()

        assert list(get_notifications(user=actor)) == []

    def test_unread_count_and_mark_read(self, receiver, make_notification):
        make_notification()
        make_notification()
        make_notification(is_read=True)

        assert get_unread_notification_count(user=receiver) == 2
        assert mark_all_notifications_read(user=receiver) == 2
        assert get_unread_notification_count(user=receiver) == 0

    def test_delete(self, receiver, make_notification):
        notification = make_notification()

        delete_notification(notification_id=notification.id, user=receiver)

        assert not Notification.objects.exists()

    def test_cannot_delete_others(self, actor, make_notification):
        notification = make_notification()

        with pytest.raises(NotificationNotFoundError):
            delete_notification(notification_id=notification.id, user=actor)

        assert Notification.objects.filter(id=notification.id).exists()

    def test_delete_missing(self, receiver):
        with pytest.raises(NotificationNotFoundError):
            delete_notification(notification_id=uuid4(), user=receiver)


# =============================================================================
# TIME AGO
# =============================================================================

class TestFormatTimeAgo:

    NOW = datetime(2025, 6, 10, 12, 0, tzinfo=dt_timezone.utc)

    @pytest.mark.parametrize('delta, expected', [
        (timedelta(seconds=30), 'Just now'),
        (timedelta(minutes=1), '1 min ago'),
        (timedelta(minutes=59), '59 min ago'),
        (timedelta(hours=1), '1 hour ago'),
        (timedelta(hours=23), '23 hours ago'),
        (timedelta(days=1), '1 day ago'),
        (timedelta(days=6), '6 days ago'),
        (timedelta(days=7), '1 week ago'),
        (timedelta(days=21), '3 weeks ago'),
    ])
    def test_format(self, delta, expected):
        assert format_time_ago(self.NOW - delta, now=self.NOW) == expected
