from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import ShopItemViewSet

app_name = 'shop'

router = SimpleRouter()
router.register(r'', ShopItemViewSet, basename='shopitem')

urlpatterns = [
    path('', include(router.urls)),
]

# Available endpoints:
# GET    /api/shop/                       - Shop items by name (?category=)
# GET    /api/shop/{id}/                  - Shop item detail
# GET    /api/shop/categories/            - Distinct categories
