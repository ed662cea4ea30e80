"""
Friendship state machine.

none -> pending -> accepted | none (rejected/cancelled), accepted -> none.
Rejection, cancellation and unfriending delete the row.
"""

import logging
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import Q

from apps.accounts.models import User
from apps.friends.models import Friendship, FriendshipStatus
from apps.notifications.models import NotificationType
from apps.notifications.services import create_notification

from .exceptions import (
    FriendshipNotFoundError,
    UserNotFoundError,
    FriendRequestExistsError,
    SelfFriendshipError,
    InvalidFriendshipStateError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)


def _pair_filter(user_id, other_id) -> Q:
    return (
        Q(user_id=user_id, friend_id=other_id)
        | Q(user_id=other_id, friend_id=user_id)
    )


def _get_locked_friendship(friendship_id: UUID) -> Friendship:
    try:
        return (
            Friendship.objects
            .select_for_update()
            .select_related('user', 'friend')
            .get(id=friendship_id)
        )
    except Friendship.DoesNotExist:
        raise FriendshipNotFoundError(f"Friendship with ID {friendship_id} not found")


@transaction.atomic
def send_friend_request(*, user: User, friend_id: UUID) -> Friendship:
    """
    Send a friend request from `user` to `friend_id`.

    Both profile rows are locked in id order so that two users requesting
    each other at the same time cannot both pass the existence check.

    Args:
        user: Requester
        friend_id: UUID of the recipient

    Returns:
        Created pending Friendship

    Raises:
        SelfFriendshipError: If friend_id is the requester
        UserNotFoundError: If the recipient does not exist
        FriendRequestExistsError: If any row exists for the pair
    """
    if str(user.id) == str(friend_id):
        raise SelfFriendshipError("You cannot send a friend request to yourself")

    locked = list(
        User.objects
        .select_for_update()
        .filter(id__in=[user.id, friend_id], is_active=True)
        .order_by('id')
    )
    friend = next((u for u in locked if str(u.id) == str(friend_id)), None)
    if friend is None:
        raise UserNotFoundError(f"User with ID {friend_id} not found")

    if Friendship.objects.filter(_pair_filter(user.id, friend.id)).exists():
        raise FriendRequestExistsError("Friend request already exists")

    try:
        with transaction.atomic():
            friendship = Friendship.objects.create(
                user=user,
                friend=friend,
                status=FriendshipStatus.PENDING,
            )
    except IntegrityError:
        raise FriendRequestExistsError("Friend request already exists")

    create_notification(
        receiver=friend,
        actor=user,
        notification_type=NotificationType.FRIEND_REQUEST,
        friendship=friendship,
        message=f"{user.get_display_name()} sent you a friend request",
    )

    logger.info("Friend request %s sent from %s to %s", friendship.id, user.id, friend.id)
    return friendship


@transaction.atomic
def accept_friend_request(*, friendship_id: UUID, user: User) -> Friendship:
    """
    Accept a pending request. Only the recipient can accept.

    Raises:
        FriendshipNotFoundError: If friendship doesn't exist
        InsufficientPermissionsError: If user is not the recipient
        InvalidFriendshipStateError: If the request is not pending
    """
    friendship = _get_locked_friendship(friendship_id)

    if friendship.friend_id != user.id:
        raise InsufficientPermissionsError("Only the recipient can accept a friend request")

    if friendship.status != FriendshipStatus.PENDING:
        raise InvalidFriendshipStateError("Friend request is not pending")

    friendship.status = FriendshipStatus.ACCEPTED
    friendship.save(update_fields=['status'])

    create_notification(
        receiver=friendship.user,
        actor=user,
        notification_type=NotificationType.FRIEND_ACCEPTED,
        friendship=friendship,
        message=f"{user.get_display_name()} accepted your friend request",
    )

    logger.info("Friend request %s accepted", friendship.id)
    return friendship


@transaction.atomic
def reject_friend_request(*, friendship_id: UUID, user: User) -> None:
    """
    Reject a pending request. Only the recipient can reject; the row is deleted.

    Raises:
        FriendshipNotFoundError: If friendship doesn't exist
        InsufficientPermissionsError: If user is not the recipient
        InvalidFriendshipStateError: If the request is not pending
    """
    friendship = _get_locked_friendship(friendship_id)

    if friendship.friend_id != user.id:
        raise InsufficientPermissionsError("Only the recipient can reject a friend request")

    if friendship.status != FriendshipStatus.PENDING:
        raise InvalidFriendshipStateError("Friend request is not pending")

    friendship.delete()
    logger.info("Friend request %s rejected", friendship_id)


@transaction.atomic
def cancel_friend_request(*, friendship_id: UUID, user: User) -> None:
    """
    Withdraw a pending request. Only the sender can cancel; the row is deleted.

    Raises:
        FriendshipNotFoundError: If friendship doesn't exist
        InsufficientPermissionsError: If user is not the sender
        InvalidFriendshipStateError: If the request is not pending
    """
    friendship = _get_locked_friendship(friendship_id)

    if friendship.user_id != user.id:
        raise InsufficientPermissionsError("Only the sender can cancel a friend request")

    if friendship.status != FriendshipStatus.PENDING:
        raise InvalidFriendshipStateError("Friend request is not pending")

    friendship.delete()
    logger.info("Friend request %s cancelled", friendship_id)


@transaction.atomic
def unfriend(*, friendship_id: UUID, user: User) -> None:
    """
    Remove an accepted friendship. Either party can unfriend.

    Raises:
        FriendshipNotFoundError: If friendship doesn't exist
        InsufficientPermissionsError: If user is not part of the friendship
        InvalidFriendshipStateError: If the friendship is not accepted
    """
    friendship = _get_locked_friendship(friendship_id)

    if not friendship.involves(user):
        raise InsufficientPermissionsError("You are not part of this friendship")

    if friendship.status != FriendshipStatus.ACCEPTED:
        raise InvalidFriendshipStateError("Friendship is not accepted")

    friendship.delete()
    logger.info("Friendship %s removed by %s", friendship_id, user.id)


def get_friendship_status(*, user_id: UUID, other_id: UUID) -> str:
    """
    Status of the row between two users in either direction.

    Returns:
        One of FriendshipStatus values, or 'none' if no row exists
    """
    friendship = (
        Friendship.objects
        .filter(_pair_filter(user_id, other_id))
        .only('status')
        .first()
    )
    return friendship.status if friendship else 'none'
