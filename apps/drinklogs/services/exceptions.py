"""
Domain-specific exceptions for drinklogs app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class DrinkLogsServiceError(Exception):
    """Base exception for drinklogs services."""
    pass


class DrinkLogNotFoundError(DrinkLogsServiceError):
    """Raised when a drink log does not exist or is hidden from the user."""
    pass


class CocktailNotFoundError(DrinkLogsServiceError):
    """Raised when the logged cocktail does not exist or is not visible."""
    pass


class LocationNotFoundError(DrinkLogsServiceError):
    """Raised when the venue does not exist."""
    pass


class InvalidDrinkLogError(DrinkLogsServiceError):
    """Raised when rating or visibility are out of range."""
    pass


class InvalidCommentError(DrinkLogsServiceError):
    """Raised when a comment is empty."""
    pass


class InsufficientPermissionsError(DrinkLogsServiceError):
    """Raised when user lacks permission for the action."""
    pass


class InvalidTagError(DrinkLogsServiceError):
    """Raised when tagging someone who is not an accepted friend."""
    pass


class TagNotFoundError(DrinkLogsServiceError):
    """Raised when the user is not tagged on the drink log."""
    pass
