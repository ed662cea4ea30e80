"""
Ingredient-match scoring for "what can I make" discovery.

Pure functions, no database access.
"""

import json
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, NamedTuple, Optional


class CocktailMatch(NamedTuple):
    cocktail: object
    match_percentage: int
    matched_count: int
    total_count: int


def normalize_ingredient(name) -> str:
    return str(name or '').strip().lower()


def parse_ingredient_names(raw) -> Optional[List[str]]:
    """
    Normalised ingredient names of a recipe.

    `raw` is the stored ingredients value: a list of {"name": ...} objects
    or the same list serialised as a JSON string. Entries without a name
    are dropped.

    Returns:
        List of names (duplicates kept), or None when `raw` can't be parsed
    """
    if not raw:
        return []

    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            return None

    if not isinstance(raw, list):
        return None

    names = []
    for entry in raw:
        name = normalize_ingredient(entry.get('name') if isinstance(entry, dict) else None)
        if name:
            names.append(name)
    return names


def match_percentage(matched: int, total: int) -> int:
    """matched/total as a whole percentage, halves rounded up."""
    value = Decimal(matched * 100) / Decimal(total)
    return int(value.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def match_cocktails(
    *,
    selected_ingredients: Iterable[str],
    cocktails: Iterable
) -> List[CocktailMatch]:
    """
    Score recipes against the ingredients a user has at hand.

    For each recipe, matched_count is the number of its ingredients found
    in the selection and total_count the number of its ingredients.
    Recipes with no ingredients, unparsable ingredients or zero matches
    are left out.

    Args:
        selected_ingredients: Ingredient names, compared case-insensitively
        cocktails: Objects with `name` and `ingredients` attributes

    Returns:
        Matches sorted by percentage descending, then name ascending
    """
    selected = {normalize_ingredient(name) for name in selected_ingredients}
    selected.discard('')
    if not selected:
        return []

    results = []
    for cocktail in cocktails:
        names = parse_ingredient_names(cocktail.ingredients)
        if not names:
            continue

        matched = sum(1 for name in names if name in selected)
        if matched == 0:
            continue

        results.append(CocktailMatch(
            cocktail=cocktail,
            match_percentage=match_percentage(matched, len(names)),
            matched_count=matched,
            total_count=len(names),
        ))

    results.sort(key=lambda m: (-m.match_percentage, (m.cocktail.name or '').lower()))
    return results
