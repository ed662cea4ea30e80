import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.notifications.models import Notification, NotificationType


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def client_for():
    """Build an API client authenticated as the given user."""
    def _client_for(user):
        client = APIClient()
        refresh = RefreshToken.for_user(user)
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
        return client
    return _client_for


@pytest.fixture
def receiver(db):
    return User.objects.create_user(
        email='receiver@example.com',
        password='TestPass123!',
        display_name='Receiver',
    )


@pytest.fixture
def actor(db):
    return User.objects.create_user(
        email='actor@example.com',
        password='TestPass123!',
        display_name='Actor',
    )


@pytest.fixture
def make_notification(receiver, actor):
    """Create a notification for `receiver` sent by `actor`."""
    def _make(**overrides):
        fields = {
            'user': receiver,
            'actor': actor,
            'type': NotificationType.LIKE,
            'message': 'Actor liked your drink',
        }
        fields.update(overrides)
        return Notification.objects.create(**fields)
    return _make
