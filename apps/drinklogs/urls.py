from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import DrinkLogViewSet

app_name = 'drinklogs'

router = SimpleRouter()
router.register(r'', DrinkLogViewSet, basename='drinklog')

urlpatterns = [
    path('', include(router.urls)),
]

# Available endpoints:
# GET    /api/logs/                     - My drink logs (?user= for someone else's)
# POST   /api/logs/                     - Log a drink
# GET    /api/logs/{id}/                - Drink log detail (if visible)
# DELETE /api/logs/{id}/                - Delete drink log (owner)
# POST   /api/logs/{id}/like/           - Like / unlike
# GET    /api/logs/{id}/comments/       - Comments, oldest first
# POST   /api/logs/{id}/comments/       - Add comment
# GET    /api/logs/{id}/tags/           - Tagged friends
# POST   /api/logs/{id}/tags/           - Tag more friends (owner)
# DELETE /api/logs/{id}/tags/{user_id}/ - Remove tag (owner or tagged user)
# GET    /api/logs/stats/               - My statistics
# GET    /api/logs/badges/              - My earned badges (?top=3)
