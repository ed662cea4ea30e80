"""
Ingredient-match scoring, tested without the database.
"""

import json
from types import SimpleNamespace

from apps.cocktails.services import (
    match_cocktails,
    match_percentage,
    parse_ingredient_names,
)


def recipe(name, *ingredients):
    return SimpleNamespace(name=name, ingredients=[{'name': i} for i in ingredients])


class TestMatchPercentage:

    def test_all_matched_is_hundred(self):
        assert match_percentage(3, 3) == 100

    def test_halves_round_up(self):
        assert match_percentage(1, 8) == 13

    def test_thirds(self):
        assert match_percentage(1, 3) == 33
        assert match_percentage(2, 3) == 67


class TestParseIngredientNames:

    def test_normalises_names(self):
        raw = [{'name': '  Lime Juice '}, {'name': 'RUM'}]
        assert parse_ingredient_names(raw) == ['lime juice', 'rum']

    def test_drops_blank_and_nameless_entries(self):
        raw = [{'name': ''}, {'amount': '5'}, 'mint', {'name': 'Soda'}]
        assert parse_ingredient_names(raw) == ['soda']

    def test_parses_json_string(self):
        raw = json.dumps([{'name': 'Gin'}, {'name': 'Tonic'}])
        assert parse_ingredient_names(raw) == ['gin', 'tonic']

    def test_unparsable_string_returns_none(self):
        assert parse_ingredient_names('not json [') is None

    def test_non_list_returns_none(self):
        assert parse_ingredient_names({'name': 'Gin'}) is None

    def test_empty_returns_empty_list(self):
        assert parse_ingredient_names([]) == []
        assert parse_ingredient_names(None) == []


class TestMatchCocktails:

    def test_empty_selection_yields_nothing(self):
        cocktails = [recipe('Mojito', 'rum', 'lime')]
        assert match_cocktails(selected_ingredients=[], cocktails=cocktails) == []
        assert match_cocktails(selected_ingredients=['  '], cocktails=cocktails) == []

    def test_all_ingredients_matched(self):
        cocktails = [recipe('Daiquiri', 'Rum', 'Lime', 'Sugar')]

        result = match_cocktails(selected_ingredients=['rum', 'lime', 'sugar'], cocktails=cocktails)

        assert len(result) == 1
        assert result[0].match_percentage == 100
        assert result[0].matched_count == 3
        assert result[0].total_count == 3

    def test_ties_sorted_by_name(self):
        cocktails = [
            recipe('Mojito', 'rum', 'lime'),
            recipe('Margarita', 'tequila', 'lime'),
        ]

        result = match_cocktails(selected_ingredients=['lime'], cocktails=cocktails)

        assert [m.cocktail.name for m in result] == ['Margarita', 'Mojito']
        assert all(m.match_percentage == 50 for m in result)

    def test_sorted_by_percentage_first(self):
        cocktails = [
            recipe('Aviation', 'gin', 'lemon', 'maraschino', 'violette'),
            recipe('Gin Tonic', 'gin', 'tonic'),
        ]

        result = match_cocktails(selected_ingredients=['gin', 'tonic'], cocktails=cocktails)

        assert [m.cocktail.name for m in result] == ['Gin Tonic', 'Aviation']
        assert [m.match_percentage for m in result] == [100, 25]

    def test_selection_is_case_insensitive(self):
        cocktails = [recipe('Negroni', 'Gin', 'Campari', 'Sweet Vermouth')]

        result = match_cocktails(selected_ingredients=['GIN', ' campari '], cocktails=cocktails)

        assert result[0].matched_count == 2
        assert result[0].match_percentage == 67

    def test_zero_matches_excluded(self):
        cocktails = [recipe('Negroni', 'gin', 'campari')]
        assert match_cocktails(selected_ingredients=['vodka'], cocktails=cocktails) == []

    def test_recipes_without_ingredients_excluded(self):
        cocktails = [SimpleNamespace(name='Empty', ingredients=[])]
        assert match_cocktails(selected_ingredients=['gin'], cocktails=cocktails) == []

    def test_unparsable_recipe_skipped(self):
        cocktails = [
            SimpleNamespace(name='Broken', ingredients='{oops'),
            SimpleNamespace(name='Gimlet', ingredients=json.dumps([{'name': 'gin'}, {'name': 'lime'}])),
        ]

        result = match_cocktails(selected_ingredients=['gin'], cocktails=cocktails)

        assert [m.cocktail.name for m in result] == ['Gimlet']
        assert result[0].match_percentage == 50
