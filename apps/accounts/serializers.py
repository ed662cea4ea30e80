from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Own profile, as returned to the signed-in user."""

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'display_name',
            'avatar_url',
            'created_at',
            'last_login',
        ]
        read_only_fields = ['id', 'email', 'created_at', 'last_login']


class UserRegistrationSerializer(serializers.ModelSerializer):
    """Serializer for user registration."""

    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )

    class Meta:
        model = User
        fields = ['email', 'password', 'password_confirm', 'display_name']
        extra_kwargs = {
            # Uniqueness is checked case-insensitively by register_user
            'email': {'validators': []},
        }

    def validate(self, attrs):
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class ProfileUpdateSerializer(serializers.Serializer):
    display_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    avatar_url = serializers.URLField(max_length=500, required=False, allow_blank=True)


class NotificationPreferencesSerializer(serializers.Serializer):
    likes = serializers.BooleanField(required=False)
    comments = serializers.BooleanField(required=False)
    party_invites = serializers.BooleanField(required=False)
    friend_requests = serializers.BooleanField(required=False)


class UserSettingsSerializer(serializers.Serializer):
    """Notification settings document."""

    notifications = NotificationPreferencesSerializer()


class PasswordResetRequestSerializer(serializers.Serializer):
    email = serializers.EmailField(required=True)


class PasswordResetConfirmSerializer(serializers.Serializer):
    token = serializers.CharField(required=True)
    new_password = serializers.CharField(
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    new_password_confirm = serializers.CharField(
        required=True,
        style={'input_type': 'password'}
    )

    def validate(self, attrs):
        if attrs['new_password'] != attrs['new_password_confirm']:
            raise serializers.ValidationError({
                'new_password_confirm': 'Passwords do not match'
            })
        return attrs


class UserPublicSerializer(serializers.ModelSerializer):
    """Public profile (friends lists, comments, event organisers, etc.)."""

    class Meta:
        model = User
        fields = ['id', 'display_name', 'avatar_url']
        read_only_fields = fields
