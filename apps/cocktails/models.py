# ==========================================
# apps/cocktails/models.py
# ==========================================

from django.db import models
import uuid


class Difficulty(models.TextChoices):
    EASY = 'easy', 'Easy'
    MEDIUM = 'medium', 'Medium'
    HARD = 'hard', 'Hard'


class CocktailOrigin(models.TextChoices):
    SYSTEM = 'system', 'System'
    USER = 'user', 'User'


class Cocktail(models.Model):
    """
    A cocktail recipe.

    System cocktails have no creator. `ingredients` holds a list of
    {"name", "amount", "unit"} objects and `instructions` a list of
    {"step", "description"} objects.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    creator = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='recipes'
    )
    ingredients = models.JSONField(default=list, blank=True)
    instructions = models.JSONField(default=list, blank=True)
    is_public = models.BooleanField(default=True)
    image_url = models.URLField(max_length=500, blank=True)
    difficulty = models.CharField(max_length=10, choices=Difficulty.choices, default=Difficulty.EASY)
    origin_type = models.CharField(max_length=10, choices=CocktailOrigin.choices, default=CocktailOrigin.SYSTEM)
    cocktail_type = models.CharField(max_length=50, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'cocktails'
        indexes = [
            models.Index(fields=['is_public', 'created_at'], name='cocktail_public_created_idx'),
            models.Index(fields=['creator', 'created_at'], name='cocktail_creator_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    @property
    def is_system(self):
        return self.creator_id is None
