# ==========================================
# apps/notifications/models.py
# ==========================================

from django.db import models
import uuid


class NotificationType(models.TextChoices):
    LIKE = 'like', 'Like'
    COMMENT = 'comment', 'Comment'
    FRIEND_REQUEST = 'friend_request', 'Friend request'
    FRIEND_ACCEPTED = 'friend_accepted', 'Friend accepted'
    CLOSE_FRIEND_POST = 'close_friend_post', 'Close friend post'
    PARTY_INVITE = 'party_invite', 'Party invite'


class Notification(models.Model):
    """In-app notification delivered to `user` about something `actor` did."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='notifications')
    actor = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sent_notifications'
    )
    type = models.CharField(max_length=30, choices=NotificationType.choices)

    # Optional links to the subject of the notification
    friendship = models.ForeignKey(
        'friends.Friendship', on_delete=models.CASCADE, null=True, blank=True, related_name='notifications'
    )
    event = models.ForeignKey(
        'events.Event', on_delete=models.CASCADE, null=True, blank=True, related_name='notifications'
    )
    drink_log = models.ForeignKey(
        'drinklogs.DrinkLog', on_delete=models.CASCADE, null=True, blank=True, related_name='notifications'
    )

    message = models.TextField(blank=True)
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'notifications'
        indexes = [
            models.Index(fields=['user', 'is_read'], name='notification_user_read_idx'),
            models.Index(fields=['user', 'created_at'], name='notification_user_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.type} for {self.user}"
