from rest_framework import serializers

from apps.accounts.serializers import UserPublicSerializer
from .models import Cocktail, Difficulty


class IngredientSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    amount = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    unit = serializers.CharField(max_length=30, required=False, allow_blank=True)


class InstructionSerializer(serializers.Serializer):
    step = serializers.IntegerField(min_value=1, required=False)
    description = serializers.CharField()


class CocktailSerializer(serializers.ModelSerializer):
    """Full cocktail recipe."""

    creator = UserPublicSerializer(read_only=True)

    class Meta:
        model = Cocktail
        fields = [
            'id',
            'name',
            'creator',
            'ingredients',
            'instructions',
            'is_public',
            'image_url',
            'difficulty',
            'origin_type',
            'cocktail_type',
            'created_at',
        ]
        read_only_fields = fields


class CocktailListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for cocktail lists."""

    class Meta:
        model = Cocktail
        fields = [
            'id',
            'name',
            'image_url',
            'difficulty',
            'origin_type',
            'cocktail_type',
            'is_public',
        ]
        read_only_fields = fields


class RecipeCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    ingredients = IngredientSerializer(many=True, allow_empty=False)
    instructions = InstructionSerializer(many=True, required=False)
    difficulty = serializers.ChoiceField(choices=Difficulty.choices, default=Difficulty.EASY)
    is_public = serializers.BooleanField(default=False)
    image_url = serializers.URLField(max_length=500, required=False, allow_blank=True)
    cocktail_type = serializers.CharField(max_length=50, required=False, allow_blank=True)


class MatchRequestSerializer(serializers.Serializer):
    ingredients = serializers.ListField(
        child=serializers.CharField(max_length=100, allow_blank=True),
        allow_empty=True
    )


class CocktailMatchSerializer(serializers.Serializer):
    cocktail = CocktailListSerializer()
    match_percentage = serializers.IntegerField()
    matched_count = serializers.IntegerField()
    total_count = serializers.IntegerField()


class IngredientUsageSerializer(serializers.Serializer):
    name = serializers.CharField()
    count = serializers.IntegerField()
