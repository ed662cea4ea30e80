# ==========================================
# apps/friends/models.py
# ==========================================

from django.db import models
import uuid


class FriendshipStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    ACCEPTED = 'accepted', 'Accepted'
    DECLINED = 'declined', 'Declined'
    BLOCKED = 'blocked', 'Blocked'


class Friendship(models.Model):
    """
    Directional friendship row: `user` sent the request to `friend`.

    Once accepted the relation is symmetric. There is at most one row per
    unordered pair of users.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='sent_friendships')
    friend = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='received_friendships')
    status = models.CharField(max_length=20, choices=FriendshipStatus.choices, default=FriendshipStatus.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'friendships'
        unique_together = [['user', 'friend']]
        indexes = [
            models.Index(fields=['friend', 'status'], name='friendship_friend_status_idx'),
            models.Index(fields=['user', 'status'], name='friendship_user_status_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user} -> {self.friend} ({self.status})"

    def involves(self, user):
        return user.id in (self.user_id, self.friend_id)

    def other_party(self, user):
        """Return the participant that is not `user`."""
        return self.friend if self.user_id == user.id else self.user
