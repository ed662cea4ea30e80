"""
Domain-specific exceptions for friends app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class FriendsServiceError(Exception):
    """Base exception for friends services."""
    pass


class FriendshipNotFoundError(FriendsServiceError):
    """Raised when friendship row does not exist."""
    pass


class UserNotFoundError(FriendsServiceError):
    """Raised when the target user does not exist."""
    pass


class FriendRequestExistsError(FriendsServiceError):
    """Raised when a row already exists for the pair, in either direction."""
    pass


class SelfFriendshipError(FriendsServiceError):
    """Raised when a user tries to befriend themselves."""
    pass


class InvalidFriendshipStateError(FriendsServiceError):
    """Raised when the transition is not valid from the current status."""
    pass


class InsufficientPermissionsError(FriendsServiceError):
    """Raised when user is not the party allowed to perform the transition."""
    pass
