"""
Domain-specific exceptions for events app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class EventsServiceError(Exception):
    """Base exception for events services."""
    pass


class EventNotFoundError(EventsServiceError):
    """Raised when event does not exist or is not visible to the user."""
    pass


class LocationNotFoundError(EventsServiceError):
    """Raised when a location or user location does not exist."""
    pass


class InvalidEventDataError(EventsServiceError):
    """Raised when event fields break a validation rule."""
    pass


class InsufficientPermissionsError(EventsServiceError):
    """Raised when user lacks the required permissions."""
    pass


class AlreadyRegisteredError(EventsServiceError):
    """Raised when user already has an active registration."""
    pass


class NotRegisteredError(EventsServiceError):
    """Raised when user has no active registration to cancel."""
    pass


class RegistrationNotFoundError(EventsServiceError):
    """Raised when the registration row does not exist."""
    pass


class InvalidRegistrationStateError(EventsServiceError):
    """Raised when a registration is not in a state that allows the transition."""
    pass
