"""User recipes and ingredient statistics."""

import logging
from collections import Counter
from typing import List, Optional

from django.conf import settings
from django.db import transaction

from apps.accounts.models import User
from apps.cocktails.models import Cocktail, CocktailOrigin, Difficulty

from .exceptions import InvalidRecipeError
from .matching import parse_ingredient_names

logger = logging.getLogger(__name__)


def _clean_ingredients(ingredients) -> List[dict]:
    if not isinstance(ingredients, list) or not ingredients:
        raise InvalidRecipeError("A recipe needs at least one ingredient")

    cleaned = []
    for entry in ingredients:
        if not isinstance(entry, dict) or not str(entry.get('name') or '').strip():
            raise InvalidRecipeError("Every ingredient needs a name")
        cleaned.append({
            'name': str(entry['name']).strip(),
            'amount': entry.get('amount'),
            'unit': entry.get('unit') or '',
        })
    return cleaned


def _clean_instructions(instructions) -> List[dict]:
    if not instructions:
        return []
    if not isinstance(instructions, list):
        raise InvalidRecipeError("Instructions must be a list of steps")

    cleaned = []
    for index, entry in enumerate(instructions, start=1):
        if isinstance(entry, str):
            entry = {'step': index, 'description': entry}
        if not isinstance(entry, dict) or not str(entry.get('description') or '').strip():
            raise InvalidRecipeError("Every step needs a description")
        cleaned.append({
            'step': entry.get('step') or index,
            'description': str(entry['description']).strip(),
        })
    return cleaned


@transaction.atomic
def create_recipe(
    *,
    creator: User,
    name: str,
    ingredients: list,
    instructions: Optional[list] = None,
    difficulty: str = Difficulty.EASY,
    is_public: bool = False,
    image_url: str = "",
    cocktail_type: str = ""
) -> Cocktail:
    """
    Create a user recipe.

    Args:
        creator: Recipe author
        name: Cocktail name
        ingredients: List of {"name", "amount", "unit"}
        instructions: List of {"step", "description"} or plain strings
        difficulty: easy, medium or hard
        is_public: Whether other users can see the recipe

    Returns:
        Created Cocktail with origin_type 'user'

    Raises:
        InvalidRecipeError: If name, ingredients or instructions are malformed
    """
    if not name or not name.strip():
        raise InvalidRecipeError("A recipe needs a name")
    if difficulty not in Difficulty.values:
        raise InvalidRecipeError(f"Unknown difficulty: {difficulty}")

    cocktail = Cocktail.objects.create(
        name=name.strip(),
        creator=creator,
        ingredients=_clean_ingredients(ingredients),
        instructions=_clean_instructions(instructions),
        difficulty=difficulty,
        is_public=is_public,
        image_url=image_url or "",
        cocktail_type=cocktail_type or "",
        origin_type=CocktailOrigin.USER,
    )

    logger.info("Recipe %s created by %s", cocktail.id, creator.id)
    return cocktail


def get_ingredient_usage(*, limit: Optional[int] = None) -> List[dict]:
    """
    How many recipe entries use each ingredient, across all cocktails.

    Args:
        limit: Max rows, defaults to INGREDIENT_USAGE_LIMIT

    Returns:
        List of {'name', 'count'} ordered by count desc, then name
    """
    if limit is None:
        limit = settings.INGREDIENT_USAGE_LIMIT

    counts = Counter()
    for raw in Cocktail.objects.values_list('ingredients', flat=True).iterator():
        counts.update(parse_ingredient_names(raw) or [])

    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [{'name': name, 'count': count} for name, count in ranked[:limit]]
