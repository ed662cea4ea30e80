"""Read-only access to the shop catalogue."""

from typing import List, Optional
from uuid import UUID

from django.db.models import QuerySet

from apps.shop.models import ShopItem

from .exceptions import ShopItemNotFoundError


def get_shop_items(*, category: Optional[str] = None) -> QuerySet[ShopItem]:
    """All shop items ordered by name, optionally limited to one category."""
    items = ShopItem.objects.all()
    if category:
        items = items.filter(category__iexact=category)
    return items.order_by('name')


def get_shop_item_by_id(*, item_id: UUID) -> ShopItem:
    """
    Get a single shop item.

    Raises:
        ShopItemNotFoundError: If item doesn't exist
    """
    try:
        return ShopItem.objects.get(id=item_id)
    except ShopItem.DoesNotExist:
        raise ShopItemNotFoundError(f"Shop item with ID {item_id} not found")


def get_shop_categories() -> List[str]:
    """Distinct non-empty categories, alphabetical."""
    return list(
        ShopItem.objects
        .exclude(category='')
        .order_by('category')
        .values_list('category', flat=True)
        .distinct()
    )
