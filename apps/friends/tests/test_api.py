import pytest
from uuid import uuid4
from django.urls import reverse
from rest_framework import status

from apps.friends.models import Friendship, FriendshipStatus


# =============================================================================
# Friend List / Requests
# =============================================================================

@pytest.mark.django_db
class TestFriendRequestsAPI:
    """Tests for /api/friends/requests/"""

    def test_send_request(self, client_for, alice, bob):
        response = client_for(alice).post(
            reverse('friends:request-list'), {'friend_id': str(bob.id)}, format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == 'pending'
        assert response.data['friend']['id'] == str(bob.id)

    def test_send_duplicate(self, client_for, bob, alice, pending_request):
        response = client_for(bob).post(
            reverse('friends:request-list'), {'friend_id': str(alice.id)}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Friend request already exists'

    def test_send_to_unknown(self, client_for, alice):
        response = client_for(alice).post(
            reverse('friends:request-list'), {'friend_id': str(uuid4())}, format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_list_pending_and_sent(self, client_for, alice, bob, pending_request):
        received = client_for(bob).get(reverse('friends:request-list'))
        sent = client_for(alice).get(reverse('friends:sent-requests'))

        assert [r['id'] for r in received.data] == [str(pending_request.id)]
        assert received.data[0]['user']['display_name'] == 'Alice'
        assert [r['id'] for r in sent.data] == [str(pending_request.id)]

    def test_requires_auth(self, api_client):
        response = api_client.get(reverse('friends:request-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Transitions
# =============================================================================

@pytest.mark.django_db
class TestTransitionsAPI:

    def test_accept(self, client_for, bob, pending_request):
        url = reverse('friends:request-accept', args=[pending_request.id])
        response = client_for(bob).post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'accepted'

    def test_accept_by_sender_forbidden(self, client_for, alice, pending_request):
        url = reverse('friends:request-accept', args=[pending_request.id])
        response = client_for(alice).post(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_reject(self, client_for, bob, pending_request):
        url = reverse('friends:request-reject', args=[pending_request.id])
        response = client_for(bob).post(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Friendship.objects.exists()

    def test_cancel(self, client_for, alice, pending_request):
        url = reverse('friends:request-cancel', args=[pending_request.id])
        response = client_for(alice).post(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_unfriend(self, client_for, carol, friendship):
        response = client_for(carol).delete(reverse('friends:unfriend', args=[friendship.id]))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Friendship.objects.filter(status=FriendshipStatus.ACCEPTED).exists()

    def test_unknown_friendship(self, client_for, bob):
        url = reverse('friends:request-accept', args=[uuid4()])
        response = client_for(bob).post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Friends / Status
# =============================================================================

@pytest.mark.django_db
class TestFriendListAPI:

    def test_friend_list(self, client_for, alice, friendship):
        response = client_for(alice).get(reverse('friends:friend-list'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['friend']['display_name'] == 'Carol'
        assert response.data[0]['friendship_id'] == str(friendship.id)

    def test_status(self, client_for, bob, alice, carol, pending_request):
        client = client_for(bob)

        pending = client.get(reverse('friends:friendship-status', args=[alice.id]))
        none = client.get(reverse('friends:friendship-status', args=[carol.id]))

        assert pending.data == {'status': 'pending'}
        assert none.data == {'status': 'none'}
