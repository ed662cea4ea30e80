import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.events.models import Event, Location, UserLocation, PartyType
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
def organiser(db):
    return User.objects.create_user(
        email='host@example.com',
        password='TestPass123!',
        display_name='Host',
    )


@pytest.fixture
def friend(db, organiser):
    """Accepted friend of the organiser."""
    user = User.objects.create_user(
        email='friend@example.com',
        password='TestPass123!',
        display_name='Friend',
    )
    Friendship.objects.create(user=organiser, friend=user, status=FriendshipStatus.ACCEPTED)
    return user


@pytest.fixture
def stranger(db):
    return User.objects.create_user(
        email='stranger@example.com',
        password='TestPass123!',
        display_name='Stranger',
    )


@pytest.fixture
def tomorrow():
    return timezone.now() + timedelta(days=1)


@pytest.fixture
def bar(db):
    return Location.objects.create(name='The Tiki Bar', city='Amsterdam', country='NL')


@pytest.fixture
def home(db, organiser):
    return UserLocation.objects.create(
        creator=organiser,
        label='Home',
        street='Main Street',
        house_nr=12,
        city='Amsterdam',
    )


@pytest.fixture
def private_event(db, organiser, tomorrow, home):
    return Event.objects.create(
        organiser=organiser,
        name='Friends Only Party',
        party_type=PartyType.HOUSE_PARTY,
        is_public=False,
        start_time=tomorrow,
        user_location=home,
    )


@pytest.fixture
def public_event(db, organiser, tomorrow, bar):
    return Event.objects.create(
        organiser=organiser,
        name='Open Bar Meetup',
        party_type=PartyType.BAR_MEETUP,
        is_public=True,
        start_time=tomorrow + timedelta(hours=2),
        location=bar,
    )


@pytest.fixture
def approval_event(db, organiser, tomorrow):
    return Event.objects.create(
        organiser=organiser,
        name='Guest List Only',
        party_type=PartyType.THEMED_PARTY,
        is_public=True,
        is_approval_required=True,
        start_time=tomorrow + timedelta(hours=4),
    )
