from rest_framework import serializers

from apps.accounts.serializers import UserPublicSerializer
from .models import Notification
from .services import format_time_ago


class NotificationSerializer(serializers.ModelSerializer):
    actor = UserPublicSerializer(read_only=True)
    time_ago = serializers.SerializerMethodField()

    class Meta:
        model = Notification
        fields = [
            'id',
            'type',
            'actor',
            'friendship',
            'event',
            'drink_log',
            'message',
            'is_read',
            'created_at',
            'time_ago',
        ]
        read_only_fields = fields

    def get_time_ago(self, obj) -> str:
        return format_time_ago(obj.created_at)


class UnreadCountSerializer(serializers.Serializer):
    unread = serializers.IntegerField()


class MarkedReadSerializer(serializers.Serializer):
    updated = serializers.IntegerField()
