import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.cocktails.models import Cocktail, CocktailOrigin


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
        email='mixer@example.com',
        password='TestPass123!',
        display_name='Mixer',
    )


@pytest.fixture
def other_user(db):
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
        display_name='Other',
    )


@pytest.fixture
def margarita(db):
    return Cocktail.objects.create(
        name='Margarita',
        cocktail_type='Sour',
        ingredients=[
            {'name': 'Tequila', 'amount': '50', 'unit': 'ml'},
            {'name': 'Lime juice', 'amount': '25', 'unit': 'ml'},
        ],
        origin_type=CocktailOrigin.SYSTEM,
    )


@pytest.fixture
def mojito(db):
    return Cocktail.objects.create(
        name='Mojito',
        cocktail_type='Highball',
        ingredients=[
            {'name': 'White rum', 'amount': '50', 'unit': 'ml'},
            {'name': 'Lime juice', 'amount': '25', 'unit': 'ml'},
        ],
        origin_type=CocktailOrigin.SYSTEM,
    )


@pytest.fixture
def private_recipe(db, other_user):
    """Someone else's unshared recipe."""
    return Cocktail.objects.create(
        name='Secret Sour',
        creator=other_user,
        cocktail_type='Sour',
        is_public=False,
        ingredients=[
            {'name': 'Whisky', 'amount': '50', 'unit': 'ml'},
            {'name': 'Lime juice', 'amount': '20', 'unit': 'ml'},
        ],
        origin_type=CocktailOrigin.USER,
    )
