"""Domain-specific exceptions for shop services."""


class ShopServiceError(Exception):
    """Base exception for shop services."""
    pass


class ShopItemNotFoundError(ShopServiceError):
    """Raised when shop item does not exist."""
    pass
