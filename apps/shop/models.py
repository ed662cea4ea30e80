# ==========================================
# apps/shop/models.py
# ==========================================

from django.db import models
import uuid


class ShopItem(models.Model):
    """Bar gear or bottle in the curated shop; purchases happen on `store_url`."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=50, blank=True)
    price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    image_url = models.URLField(max_length=500, blank=True)
    store_url = models.URLField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'shop_items'
        indexes = [
            models.Index(fields=['category', 'name'], name='shopitem_category_name_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name
