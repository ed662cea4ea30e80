"""Services for friends business logic."""

from .exceptions import (
    FriendsServiceError,
    FriendshipNotFoundError,
    UserNotFoundError,
    FriendRequestExistsError,
    SelfFriendshipError,
    InvalidFriendshipStateError,
    InsufficientPermissionsError,
)
from .friendship_management import (
    send_friend_request,
    accept_friend_request,
    reject_friend_request,
    cancel_friend_request,
    unfriend,
    get_friendship_status,
)
from .friend_queries import (
    get_pending_friend_requests,
    get_sent_friend_requests,
    get_friends,
    get_friend_ids,
    are_friends,
)

__all__ = [
    # Exceptions
    'FriendsServiceError',
    'FriendshipNotFoundError',
    'UserNotFoundError',
    'FriendRequestExistsError',
    'SelfFriendshipError',
    'InvalidFriendshipStateError',
    'InsufficientPermissionsError',
    # State machine
    'send_friend_request',
    'accept_friend_request',
    'reject_friend_request',
    'cancel_friend_request',
    'unfriend',
    'get_friendship_status',
    # Queries
    'get_pending_friend_requests',
    'get_sent_friend_requests',
    'get_friends',
    'get_friend_ids',
    'are_friends',
]
