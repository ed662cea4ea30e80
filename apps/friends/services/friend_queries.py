"""Read-side queries over friendships."""

from typing import List
from uuid import UUID

from django.db.models import Q, QuerySet

from apps.accounts.models import User
from apps.friends.models import Friendship, FriendshipStatus


def get_pending_friend_requests(*, user: User) -> QuerySet[Friendship]:
    """Pending requests received by `user`, newest first, with sender profile."""
    return (
        Friendship.objects
        .filter(friend=user, status=FriendshipStatus.PENDING)
        .select_related('user')
        .order_by('-created_at')
    )


def get_sent_friend_requests(*, user: User) -> QuerySet[Friendship]:
    """Pending requests sent by `user`, newest first, with recipient profile."""
    return (
        Friendship.objects
        .filter(user=user, status=FriendshipStatus.PENDING)
        .select_related('friend')
        .order_by('-created_at')
    )


def _accepted_for(user_id) -> QuerySet[Friendship]:
    return Friendship.objects.filter(
        Q(user_id=user_id) | Q(friend_id=user_id),
        status=FriendshipStatus.ACCEPTED,
    )


def get_friends(*, user: User) -> List[dict]:
    """
    Accepted friendships of `user`, newest first.

    Returns:
        List of dicts with 'friendship_id', 'created_at' and 'friend',
        where 'friend' is the other party's profile
    """
    friendships = (
        _accepted_for(user.id)
        .select_related('user', 'friend')
        .order_by('-created_at')
    )
    return [
        {
            'friendship_id': friendship.id,
            'created_at': friendship.created_at,
            'friend': friendship.other_party(user),
        }
        for friendship in friendships
    ]


def get_friend_ids(*, user: User) -> List[UUID]:
    """Ids of every accepted friend of `user`."""
    ids = []
    for user_id, friend_id in _accepted_for(user.id).values_list('user_id', 'friend_id'):
        ids.append(friend_id if user_id == user.id else user_id)
    return ids


def are_friends(*, user_id: UUID, other_id: UUID) -> bool:
    return Friendship.objects.filter(
        Q(user_id=user_id, friend_id=other_id) | Q(user_id=other_id, friend_id=user_id),
        status=FriendshipStatus.ACCEPTED,
    ).exists()
