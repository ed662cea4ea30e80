from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import EventViewSet, UserLocationViewSet, location_list

app_name = 'events'

# SimpleRouter: the events ViewSet sits on the empty prefix, where a
# DefaultRouter API root would shadow the event list.
router = SimpleRouter()
router.register(r'user-locations', UserLocationViewSet, basename='user-location')
router.register(r'', EventViewSet, basename='event')

urlpatterns = [
    path('locations/', location_list, name='location-list'),
    path('', include(router.urls)),
]

# Available endpoints:
# GET    /api/events/                              - Events organised by me
# POST   /api/events/                              - Create event
# GET    /api/events/{id}/                         - Event detail (if visible)
# PUT    /api/events/{id}/                         - Update event (organiser)
# PATCH  /api/events/{id}/                         - Partial update (organiser)
# DELETE /api/events/{id}/                         - Delete event (organiser)
# GET    /api/events/public/                       - All public events
# GET    /api/events/visible/                      - Public + friends' events
# POST   /api/events/{id}/register/                - Register / join waitlist
# POST   /api/events/{id}/cancel_registration/     - Cancel registration
# GET    /api/events/{id}/registration/            - My registration state
# GET    /api/events/{id}/registrations/           - Attendees (organiser)
# POST   /api/events/{id}/decide/                  - Approve/reject waitlisted (organiser)
# POST   /api/events/{id}/invite/                  - Invite friends (organiser)
# GET    /api/events/locations/                    - Public venues
# GET    /api/events/user-locations/               - My addresses
# POST   /api/events/user-locations/               - Add address
# PATCH  /api/events/user-locations/{id}/          - Update address
# DELETE /api/events/user-locations/{id}/          - Delete address
