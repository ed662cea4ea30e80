from rest_framework import serializers

from apps.accounts.serializers import UserPublicSerializer
from .models import (
    Event,
    EventRegistration,
    Location,
    UserLocation,
    PartyType,
    EventType,
    RegistrationStatus,
)


class LocationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Location
        fields = [
            'id',
            'name',
            'street_name',
            'street_nr',
            'city',
            'country',
            'description',
            'image_url',
            'rating',
        ]
        read_only_fields = fields


class UserLocationSerializer(serializers.ModelSerializer):
    class Meta:
        model = UserLocation
        fields = ['id', 'label', 'street', 'house_nr', 'city', 'created_at']
        read_only_fields = ['id', 'created_at']


class EventSerializer(serializers.ModelSerializer):
    """Full event for display."""

    organiser = UserPublicSerializer(read_only=True)
    location = LocationSerializer(read_only=True)
    user_location = UserLocationSerializer(read_only=True)

    class Meta:
        model = Event
        fields = [
            'id',
            'organiser',
            'name',
            'description',
            'party_type',
            'type',
            'is_public',
            'is_approval_required',
            'start_time',
            'end_time',
            'max_attendees',
            'price',
            'cover_image',
            'location',
            'user_location',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class EventWriteSerializer(serializers.Serializer):
    """Input for creating and updating events."""

    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True)
    party_type = serializers.ChoiceField(choices=PartyType.choices, required=False)
    type = serializers.ChoiceField(choices=EventType.choices, required=False)
    is_public = serializers.BooleanField(required=False)
    is_approval_required = serializers.BooleanField(required=False)
    start_time = serializers.DateTimeField()
    end_time = serializers.DateTimeField(required=False, allow_null=True)
    max_attendees = serializers.IntegerField(required=False, allow_null=True, min_value=0)
    price = serializers.DecimalField(
        max_digits=8, decimal_places=2, required=False, allow_null=True, min_value=0
    )
    cover_image = serializers.URLField(max_length=500, required=False, allow_blank=True)
    location_id = serializers.UUIDField(required=False, allow_null=True)
    user_location_id = serializers.UUIDField(required=False, allow_null=True)

    def validate(self, attrs):
        if attrs.get('location_id') and attrs.get('user_location_id'):
            raise serializers.ValidationError(
                'Choose either a location or a user location, not both'
            )
        return attrs


class VisibleEventsSerializer(serializers.Serializer):
    public = EventSerializer(many=True)
    friends = EventSerializer(many=True)


class EventRegistrationSerializer(serializers.ModelSerializer):
    user = UserPublicSerializer(read_only=True)

    class Meta:
        model = EventRegistration
        fields = ['id', 'event', 'user', 'status', 'created_at', 'updated_at']
        read_only_fields = fields


class RegistrationStatusSerializer(serializers.Serializer):
    is_registered = serializers.BooleanField()
    status = serializers.ChoiceField(choices=RegistrationStatus.choices, allow_null=True)


class DecideRegistrationSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    approve = serializers.BooleanField()


class InviteFriendsSerializer(serializers.Serializer):
    friend_ids = serializers.ListField(child=serializers.UUIDField(), allow_empty=False)


class InvitedSerializer(serializers.Serializer):
    invited = serializers.ListField(child=serializers.UUIDField())
