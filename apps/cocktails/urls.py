from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import CocktailViewSet

app_name = 'cocktails'

router = SimpleRouter()
router.register(r'', CocktailViewSet, basename='cocktail')

urlpatterns = [
    path('', include(router.urls)),
]

# Available endpoints:
# GET    /api/cocktails/                  - Public cocktails (?search=)
# POST   /api/cocktails/                  - Create personal recipe
# GET    /api/cocktails/{id}/             - Cocktail detail (public or own)
# GET    /api/cocktails/mine/             - My recipes
# GET    /api/cocktails/types/            - Catalogue cocktail types
# GET    /api/cocktails/ingredients/      - Ingredient usage counts
# POST   /api/cocktails/match/            - Match by ingredients at hand
