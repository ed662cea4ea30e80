from rest_framework import serializers

from apps.accounts.serializers import UserPublicSerializer
from apps.cocktails.serializers import CocktailListSerializer
from apps.events.serializers import LocationSerializer
from .models import DrinkLog, DrinkLogComment, DrinkLogTag, LogVisibility


class DrinkLogTagSerializer(serializers.ModelSerializer):
    tagged_user = UserPublicSerializer(read_only=True)

    class Meta:
        model = DrinkLogTag
        fields = ['tagged_user', 'created_at']
        read_only_fields = fields


class DrinkLogSerializer(serializers.ModelSerializer):
    """Drink log with its author, cocktail, venue and interaction counts."""

    user = UserPublicSerializer(read_only=True)
    cocktail = CocktailListSerializer(read_only=True)
    location = LocationSerializer(read_only=True)
    like_count = serializers.IntegerField(read_only=True, default=0)
    comment_count = serializers.IntegerField(read_only=True, default=0)
    tags = DrinkLogTagSerializer(many=True, read_only=True)

    class Meta:
        model = DrinkLog
        fields = [
            'id',
            'user',
            'cocktail',
            'location',
            'rating',
            'caption',
            'image_url',
            'visibility',
            'like_count',
            'comment_count',
            'tags',
            'created_at',
        ]
        read_only_fields = fields


class DrinkLogCreateSerializer(serializers.Serializer):
    cocktail_id = serializers.UUIDField(required=False, allow_null=True)
    location_id = serializers.UUIDField(required=False, allow_null=True)
    rating = serializers.IntegerField(min_value=0, max_value=10, required=False, allow_null=True)
    caption = serializers.CharField(required=False, allow_blank=True)
    image_url = serializers.URLField(max_length=500, required=False, allow_blank=True)
    visibility = serializers.ChoiceField(choices=LogVisibility.choices, default=LogVisibility.PUBLIC)
    tagged_user_ids = serializers.ListField(
        child=serializers.UUIDField(), required=False, allow_empty=True, max_length=50
    )


class TagFriendsSerializer(serializers.Serializer):
    tagged_user_ids = serializers.ListField(child=serializers.UUIDField(), allow_empty=False, max_length=50)


class DrinkLogCommentSerializer(serializers.ModelSerializer):
    user = UserPublicSerializer(read_only=True)

    class Meta:
        model = DrinkLogComment
        fields = ['id', 'drink_log', 'user', 'content', 'created_at']
        read_only_fields = ['id', 'drink_log', 'user', 'created_at']


class LikeResultSerializer(serializers.Serializer):
    liked = serializers.BooleanField()
    like_count = serializers.IntegerField()


class TopCocktailSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    count = serializers.IntegerField()


class PopularCocktailSerializer(serializers.Serializer):
    name = serializers.CharField()
    count = serializers.IntegerField()


class RatingBucketSerializer(serializers.Serializer):
    rating = serializers.IntegerField()
    count = serializers.IntegerField()


class UserStatsSerializer(serializers.Serializer):
    drinks_logged = serializers.IntegerField()
    avg_rating = serializers.FloatField()
    bars_visited = serializers.IntegerField()
    top_cocktails = TopCocktailSerializer(many=True)
    popular_cocktail = PopularCocktailSerializer(allow_null=True)
    rating_trend = RatingBucketSerializer(many=True)


class BadgeSerializer(serializers.Serializer):
    type = serializers.CharField()
    tier = serializers.CharField()
    count = serializers.IntegerField()
    label = serializers.CharField()
