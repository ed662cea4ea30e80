import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.friends.models import Friendship, FriendshipStatus


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
def alice(db):
    return User.objects.create_user(
        email='alice@example.com',
        password='TestPass123!',
        display_name='Alice',
    )


@pytest.fixture
def bob(db):
    return User.objects.create_user(
        email='bob@example.com',
        password='TestPass123!',
        display_name='Bob',
    )


@pytest.fixture
def carol(db):
    return User.objects.create_user(
        email='carol@example.com',
        password='TestPass123!',
        display_name='Carol',
    )


@pytest.fixture
def pending_request(db, alice, bob):
    """Alice has asked Bob to be friends."""
    return Friendship.objects.create(user=alice, friend=bob, status=FriendshipStatus.PENDING)


@pytest.fixture
def friendship(db, alice, carol):
    """Alice and Carol are friends."""
    return Friendship.objects.create(user=alice, friend=carol, status=FriendshipStatus.ACCEPTED)
