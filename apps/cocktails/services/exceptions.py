"""Domain-specific exceptions for cocktails services."""


class CocktailsServiceError(Exception):
    """Base exception for cocktails services."""
    pass


class CocktailNotFoundError(CocktailsServiceError):
    """Raised when cocktail does not exist or is not visible to the user."""
    pass


class InvalidRecipeError(CocktailsServiceError):
    """Raised when recipe data is malformed."""
    pass
