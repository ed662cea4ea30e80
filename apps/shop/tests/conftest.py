import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.shop.models import ShopItem


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
        email='shopper@example.com',
        password='TestPass123!',
        display_name='Shopper',
    )


@pytest.fixture
def shaker(db):
    return ShopItem.objects.create(
        name='Boston Shaker',
        category='Tools',
        price=Decimal('24.90'),
        store_url='https://store.example.com/shaker',
    )


@pytest.fixture
def jigger(db):
    return ShopItem.objects.create(
        name='Japanese Jigger',
        category='Tools',
        price=Decimal('12.50'),
    )


@pytest.fixture
def bitters(db):
    return ShopItem.objects.create(
        name='Angostura Bitters',
        category='Bottles',
        price=None,
    )
