"""Services for shop business logic."""

from .exceptions import (
    ShopServiceError,
    ShopItemNotFoundError,
)
from .catalogue import (
    get_shop_items,
    get_shop_item_by_id,
    get_shop_categories,
)

__all__ = [
    # Exceptions
    'ShopServiceError',
    'ShopItemNotFoundError',
    # Catalogue
    'get_shop_items',
    'get_shop_item_by_id',
    'get_shop_categories',
]
