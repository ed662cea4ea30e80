"""Services for events business logic."""

from .exceptions import (
    EventsServiceError,
    EventNotFoundError,
    LocationNotFoundError,
    InvalidEventDataError,
    InsufficientPermissionsError,
    AlreadyRegisteredError,
    NotRegisteredError,
    RegistrationNotFoundError,
    InvalidRegistrationStateError,
)
from .event_management import (
    create_event,
    update_event,
    delete_event,
    get_event_by_id,
    get_my_events,
    get_public_events,
)
from .registration import (
    register_for_event,
    cancel_registration,
    decide_registration,
    get_user_event_registration,
    get_event_registrations,
)
from .visibility import can_view_event, get_visible_events
from .invitations import invite_friends
from .locations import (
    get_locations,
    get_user_locations,
    create_user_location,
    update_user_location,
    delete_user_location,
)

__all__ = [
    # Exceptions
    'EventsServiceError',
    'EventNotFoundError',
    'LocationNotFoundError',
    'InvalidEventDataError',
    'InsufficientPermissionsError',
    'AlreadyRegisteredError',
    'NotRegisteredError',
    'RegistrationNotFoundError',
    'InvalidRegistrationStateError',
    # Event management
    'create_event',
    'update_event',
    'delete_event',
    'get_event_by_id',
    'get_my_events',
    'get_public_events',
    # Registration
    'register_for_event',
    'cancel_registration',
    'decide_registration',
    'get_user_event_registration',
    'get_event_registrations',
    # Visibility
    'can_view_event',
    'get_visible_events',
    # Invitations
    'invite_friends',
    # Locations
    'get_locations',
    'get_user_locations',
    'create_user_location',
    'update_user_location',
    'delete_user_location',
]
