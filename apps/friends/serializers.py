from rest_framework import serializers

from apps.accounts.serializers import UserPublicSerializer
from .models import Friendship


class FriendshipSerializer(serializers.ModelSerializer):
    """Friendship row with both parties."""

    user = UserPublicSerializer(read_only=True)
    friend = UserPublicSerializer(read_only=True)

    class Meta:
        model = Friendship
        fields = ['id', 'user', 'friend', 'status', 'created_at']
        read_only_fields = fields


class FriendSerializer(serializers.Serializer):
    """Accepted friend as seen from the current user."""

    friendship_id = serializers.UUIDField()
    created_at = serializers.DateTimeField()
    friend = UserPublicSerializer()


class SendFriendRequestSerializer(serializers.Serializer):
    friend_id = serializers.UUIDField()


class FriendshipStatusSerializer(serializers.Serializer):
    status = serializers.CharField()
