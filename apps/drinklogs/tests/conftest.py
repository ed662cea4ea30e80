import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.cocktails.models import Cocktail, CocktailOrigin
from apps.drinklogs.models import DrinkLog, LogVisibility
from apps.events.models import Location
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
def user(db):
    return User.objects.create_user(
        email='drinker@example.com',
        password='TestPass123!',
        display_name='Drinker',
    )


@pytest.fixture
def friend(db, user):
    """Accepted friend of `user`."""
    other = User.objects.create_user(
        email='buddy@example.com',
        password='TestPass123!',
        display_name='Buddy',
    )
    Friendship.objects.create(user=other, friend=user, status=FriendshipStatus.ACCEPTED)
    return other


@pytest.fixture
def stranger(db):
    return User.objects.create_user(
        email='stranger@example.com',
        password='TestPass123!',
        display_name='Stranger',
    )


@pytest.fixture
def negroni(db):
    return Cocktail.objects.create(
        name='Negroni',
        ingredients=[{'name': 'Gin'}, {'name': 'Campari'}, {'name': 'Sweet vermouth'}],
        origin_type=CocktailOrigin.SYSTEM,
    )


@pytest.fixture
def spritz(db):
    return Cocktail.objects.create(
        name='Spritz',
        ingredients=[{'name': 'Aperol'}, {'name': 'Prosecco'}, {'name': 'Soda'}],
        origin_type=CocktailOrigin.SYSTEM,
    )


@pytest.fixture
def bar(db):
    return Location.objects.create(name='Bar Basso', city='Milan', country='IT')


@pytest.fixture
def drink_log(db, user, negroni, bar):
    return DrinkLog.objects.create(
        user=user,
        cocktail=negroni,
        location=bar,
        rating=8,
        caption='Perfect bitterness',
        visibility=LogVisibility.PUBLIC,
    )


@pytest.fixture
def friends_log(db, user, negroni):
    return DrinkLog.objects.create(user=user, cocktail=negroni, visibility=LogVisibility.FRIENDS)


@pytest.fixture
def private_log(db, user, negroni):
    return DrinkLog.objects.create(user=user, cocktail=negroni, visibility=LogVisibility.ONLY_ME)
