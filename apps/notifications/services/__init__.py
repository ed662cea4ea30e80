"""Services for notifications business logic."""

from .exceptions import (
    NotificationsServiceError,
    NotificationNotFoundError,
)
from .delivery import create_notification, PREFERENCE_BY_TYPE
from .inbox import (
    get_notifications,
    get_unread_notification_count,
    mark_all_notifications_read,
    delete_notification,
    format_time_ago,
)

__all__ = [
    # Exceptions
    'NotificationsServiceError',
    'NotificationNotFoundError',
    # Services
    'create_notification',
    'PREFERENCE_BY_TYPE',
    'get_notifications',
    'get_unread_notification_count',
    'mark_all_notifications_read',
    'delete_notification',
    'format_time_ago',
]
