# ==========================================
# apps/drinklogs/models.py
# ==========================================

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
import uuid


class LogVisibility(models.TextChoices):
    PUBLIC = 'public', 'Public'
    FRIENDS = 'friends', 'Friends'
    PRIVATE = 'private', 'Private'
    ONLY_ME = 'only_me', 'Only me'


class DrinkLog(models.Model):
    """A drink a user had, optionally rated and tied to a cocktail and venue."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='drink_logs')
    cocktail = models.ForeignKey(
        'cocktails.Cocktail',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='drink_logs'
    )
    location = models.ForeignKey(
        'events.Location',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='drink_logs'
    )
    rating = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(0), MaxValueValidator(10)]
    )
    caption = models.TextField(blank=True)
    image_url = models.URLField(max_length=500, blank=True)
    visibility = models.CharField(max_length=10, choices=LogVisibility.choices, default=LogVisibility.PUBLIC)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'drink_logs'
        indexes = [
            models.Index(fields=['user', 'created_at'], name='drinklog_user_created_idx'),
            models.Index(fields=['visibility', 'created_at'], name='drinklog_vis_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user} - {self.cocktail or 'drink'}"


class DrinkLogLike(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    drink_log = models.ForeignKey(DrinkLog, on_delete=models.CASCADE, related_name='likes')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='drink_log_likes')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'drink_log_likes'
        unique_together = [['drink_log', 'user']]

    def __str__(self):
        return f"{self.user} likes {self.drink_log_id}"


class DrinkLogComment(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    drink_log = models.ForeignKey(DrinkLog, on_delete=models.CASCADE, related_name='comments')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='drink_log_comments')
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'drink_log_comments'
        indexes = [
            models.Index(fields=['drink_log', 'created_at'], name='comment_log_created_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.user} on {self.drink_log_id}"


class DrinkLogTag(models.Model):
    """Friend who was there for the drink."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    drink_log = models.ForeignKey(DrinkLog, on_delete=models.CASCADE, related_name='tags')
    tagged_user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='drink_log_tags')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'drink_log_tags'
        unique_together = [['drink_log', 'tagged_user']]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.tagged_user} tagged on {self.drink_log_id}"
