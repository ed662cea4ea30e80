"""Cocktail lookup and search."""

from typing import List, Optional
from uuid import UUID

from django.db.models import Q, QuerySet
from fuzzywuzzy import fuzz

from apps.accounts.models import User
from apps.cocktails.models import Cocktail

from .exceptions import CocktailNotFoundError

# Minimum fuzz.partial_ratio for a typo-tolerant name match
FUZZY_NAME_THRESHOLD = 80


def get_public_cocktails() -> QuerySet[Cocktail]:
    """Public cocktails (system and shared recipes), newest first."""
    return (
        Cocktail.objects
        .filter(is_public=True)
        .select_related('creator')
        .order_by('-created_at')
    )


def get_personal_recipes(*, user: User) -> QuerySet[Cocktail]:
    """Recipes created by `user`, public or not, newest first."""
    return (
        Cocktail.objects
        .filter(creator=user)
        .order_by('-created_at')
    )


def get_visible_cocktails(*, user: User) -> QuerySet[Cocktail]:
    """Public cocktails plus the user's own private recipes."""
    return (
        Cocktail.objects
        .filter(Q(is_public=True) | Q(creator=user))
        .select_related('creator')
        .order_by('-created_at')
    )


def get_cocktail_by_id(*, cocktail_id: UUID, user: Optional[User] = None) -> Cocktail:
    """
    Get a cocktail the user may see: public, or their own.

    Raises:
        CocktailNotFoundError: If it doesn't exist or is someone else's private recipe
    """
    try:
        cocktail = Cocktail.objects.select_related('creator').get(id=cocktail_id)
    except Cocktail.DoesNotExist:
        raise CocktailNotFoundError(f"Cocktail with ID {cocktail_id} not found")

    if cocktail.is_public:
        return cocktail
    if user is not None and cocktail.creator_id == user.id:
        return cocktail
    raise CocktailNotFoundError(f"Cocktail with ID {cocktail_id} not found")


def get_cocktail_types() -> List[str]:
    """Distinct non-empty cocktail types of system cocktails, sorted."""
    types = (
        Cocktail.objects
        .filter(creator__isnull=True)
        .exclude(cocktail_type='')
        .values_list('cocktail_type', flat=True)
        .distinct()
        .order_by('cocktail_type')
    )
    return list(types)


def search_cocktails(*, query: str, user: User) -> List[Cocktail]:
    """
    Search visible cocktails by name.

    Substring matches come first. When there are none, falls back to
    fuzzy matching so that small typos ("margartia") still find results.

    Args:
        query: Name fragment
        user: User searching

    Returns:
        List of Cocktail, best matches first
    """
    query = (query or '').strip()
    visible = get_visible_cocktails(user=user)
    if not query:
        return list(visible)

    exact = list(visible.filter(name__icontains=query))
    if exact:
        return exact

    needle = query.lower()
    scored = []
    for cocktail in visible:
        score = fuzz.partial_ratio(needle, cocktail.name.lower())
        if score >= FUZZY_NAME_THRESHOLD:
            scored.append((score, cocktail))

    scored.sort(key=lambda item: (-item[0], item[1].name.lower()))
    return [cocktail for _, cocktail in scored]
