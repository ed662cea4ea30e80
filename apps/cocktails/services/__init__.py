"""Services for cocktails business logic."""

from .exceptions import (
    CocktailsServiceError,
    CocktailNotFoundError,
    InvalidRecipeError,
)
from .matching import (
    CocktailMatch,
    match_cocktails,
    match_percentage,
    normalize_ingredient,
    parse_ingredient_names,
)
from .cocktail_queries import (
    get_public_cocktails,
    get_personal_recipes,
    get_visible_cocktails,
    get_cocktail_by_id,
    get_cocktail_types,
    search_cocktails,
)
from .recipes import create_recipe, get_ingredient_usage

__all__ = [
    # Exceptions
    'CocktailsServiceError',
    'CocktailNotFoundError',
    'InvalidRecipeError',
    # Matching
    'CocktailMatch',
    'match_cocktails',
    'match_percentage',
    'normalize_ingredient',
    'parse_ingredient_names',
    # Queries
    'get_public_cocktails',
    'get_personal_recipes',
    'get_visible_cocktails',
    'get_cocktail_by_id',
    'get_cocktail_types',
    'search_cocktails',
    # Recipes
    'create_recipe',
    'get_ingredient_usage',
]
