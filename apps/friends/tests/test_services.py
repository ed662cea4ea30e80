"""
Service layer unit tests for friends app.

Tests cover:
- Friendship state machine transitions
- Who may perform each transition
- Notifications emitted by requests and acceptances
"""

import pytest
from uuid import uuid4

from apps.friends.models import Friendship, FriendshipStatus
from apps.friends.services import (
    send_friend_request,
    accept_friend_request,
    reject_friend_request,
    cancel_friend_request,
    unfriend,
    get_friendship_status,
    get_pending_friend_requests,
    get_sent_friend_requests,
    get_friends,
    get_friend_ids,
    are_friends,
)
from apps.friends.services.exceptions import (
    FriendshipNotFoundError,
    UserNotFoundError,
    FriendRequestExistsError,
    SelfFriendshipError,
    InvalidFriendshipStateError,
    InsufficientPermissionsError,
)
from apps.notifications.models import Notification, NotificationType


# =============================================================================
# Sending Requests
# =============================================================================

@pytest.mark.django_db
class TestSendFriendRequest:

    def test_creates_pending_row_and_notification(self, alice, bob):
        friendship = send_friend_request(user=alice, friend_id=bob.id)

        assert friendship.status == FriendshipStatus.PENDING
        assert friendship.user == alice
        assert friendship.friend == bob

        notification = Notification.objects.get(user=bob)
        assert notification.type == NotificationType.FRIEND_REQUEST
        assert notification.actor == alice
        assert notification.friendship == friendship
        assert notification.message == 'Alice sent you a friend request'

    def test_duplicate_same_direction(self, alice, bob, pending_request):
        with pytest.raises(FriendRequestExistsError, match='already exists'):
            send_friend_request(user=alice, friend_id=bob.id)

        assert Friendship.objects.count() == 1

    def test_duplicate_reverse_direction(self, alice, bob, pending_request):
        with pytest.raises(FriendRequestExistsError, match='already exists'):
            send_friend_request(user=bob, friend_id=alice.id)

        assert Friendship.objects.count() == 1

    def test_existing_friendship_blocks_request(self, carol, alice, friendship):
        with pytest.raises(FriendRequestExistsError):
            send_friend_request(user=carol, friend_id=alice.id)

    def test_cannot_befriend_self(self, alice):
        with pytest.raises(SelfFriendshipError):
            send_friend_request(user=alice, friend_id=alice.id)

    def test_unknown_target(self, alice):
        with pytest.raises(UserNotFoundError):
            send_friend_request(user=alice, friend_id=uuid4())

    def test_notification_suppressed_by_preference(self, alice, bob):
        bob.settings = {'notifications': {'friend_requests': False}}
        bob.save()

        send_friend_request(user=alice, friend_id=bob.id)

        assert Friendship.objects.filter(user=alice, friend=bob).exists()
        assert not Notification.objects.filter(user=bob).exists()


# =============================================================================
# Transitions
# =============================================================================

@pytest.mark.django_db
class TestTransitions:

    def test_accept_by_recipient(self, alice, bob, pending_request):
        friendship = accept_friend_request(friendship_id=pending_request.id, user=bob)

        assert friendship.status == FriendshipStatus.ACCEPTED
        notification = Notification.objects.get(user=alice)
        assert notification.type == NotificationType.FRIEND_ACCEPTED
        assert notification.message == 'Bob accepted your friend request'

    def test_sender_cannot_accept(self, alice, pending_request):
        with pytest.raises(InsufficientPermissionsError):
            accept_friend_request(friendship_id=pending_request.id, user=alice)

        pending_request.refresh_from_db()
        assert pending_request.status == FriendshipStatus.PENDING

    def test_outsider_cannot_accept(self, carol, pending_request):
        with pytest.raises(InsufficientPermissionsError):
            accept_friend_request(friendship_id=pending_request.id, user=carol)

    def test_accept_twice(self, bob, pending_request):
        accept_friend_request(friendship_id=pending_request.id, user=bob)

        with pytest.raises(InvalidFriendshipStateError):
            accept_friend_request(friendship_id=pending_request.id, user=bob)

    def test_accept_missing(self, bob):
        with pytest.raises(FriendshipNotFoundError):
            accept_friend_request(friendship_id=uuid4(), user=bob)

    def test_reject_deletes_row(self, bob, pending_request):
        reject_friend_request(friendship_id=pending_request.id, user=bob)

        assert not Friendship.objects.filter(id=pending_request.id).exists()

    def test_sender_cannot_reject(self, alice, pending_request):
        with pytest.raises(InsufficientPermissionsError):
            reject_friend_request(friendship_id=pending_request.id, user=alice)

    def test_cancel_by_sender(self, alice, pending_request):
        cancel_friend_request(friendship_id=pending_request.id, user=alice)

        assert not Friendship.objects.filter(id=pending_request.id).exists()

    def test_recipient_cannot_cancel(self, bob, pending_request):
        with pytest.raises(InsufficientPermissionsError):
            cancel_friend_request(friendship_id=pending_request.id, user=bob)

    def test_cannot_cancel_accepted(self, alice, friendship):
        with pytest.raises(InvalidFriendshipStateError):
            cancel_friend_request(friendship_id=friendship.id, user=alice)

    def test_unfriend_by_either_party(self, carol, friendship):
        unfriend(friendship_id=friendship.id, user=carol)

        assert not Friendship.objects.filter(id=friendship.id).exists()

    def test_unfriend_pending(self, alice, pending_request):
        with pytest.raises(InvalidFriendshipStateError):
            unfriend(friendship_id=pending_request.id, user=alice)

    def test_outsider_cannot_unfriend(self, bob, friendship):
        with pytest.raises(InsufficientPermissionsError):
            unfriend(friendship_id=friendship.id, user=bob)

    def test_request_again_after_reject(self, alice, bob, pending_request):
        reject_friend_request(friendship_id=pending_request.id, user=bob)

        friendship = send_friend_request(user=bob, friend_id=alice.id)
        assert friendship.status == FriendshipStatus.PENDING


# =============================================================================
# Queries
# =============================================================================

@pytest.mark.django_db
class TestQueries:

    def test_status_both_directions(self, alice, bob, carol, pending_request, friendship):
        assert get_friendship_status(user_id=alice.id, other_id=bob.id) == 'pending'
        assert get_friendship_status(user_id=bob.id, other_id=alice.id) == 'pending'
        assert get_friendship_status(user_id=carol.id, other_id=alice.id) == 'accepted'
        assert get_friendship_status(user_id=bob.id, other_id=carol.id) == 'none'

    def test_pending_and_sent(self, alice, bob, pending_request):
        assert list(get_pending_friend_requests(user=bob)) == [pending_request]
        assert list(get_pending_friend_requests(user=alice)) == []
        assert list(get_sent_friend_requests(user=alice)) == [pending_request]

    def test_friends_carry_other_party(self, alice, carol, friendship, pending_request):
        alice_friends = get_friends(user=alice)
        carol_friends = get_friends(user=carol)

        assert [f['friend'] for f in alice_friends] == [carol]
        assert [f['friend'] for f in carol_friends] == [alice]
        assert alice_friends[0]['friendship_id'] == friendship.id

    def test_friend_ids(self, alice, bob, carol, friendship, pending_request):
        assert get_friend_ids(user=alice) == [carol.id]
        assert get_friend_ids(user=bob) == []

    def test_are_friends(self, alice, bob, carol, friendship, pending_request):
        assert are_friends(user_id=carol.id, other_id=alice.id)
        assert not are_friends(user_id=alice.id, other_id=bob.id)
