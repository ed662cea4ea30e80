import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    FriendshipSerializer,
    FriendSerializer,
    SendFriendRequestSerializer,
    FriendshipStatusSerializer,
)
from .services import (
    send_friend_request,
    accept_friend_request,
    reject_friend_request,
    cancel_friend_request,
    unfriend as unfriend_service,
    get_friendship_status,
    get_pending_friend_requests,
    get_sent_friend_requests,
    get_friends,
    # Exceptions
    FriendsServiceError,
    FriendshipNotFoundError,
    UserNotFoundError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)


def _error_response(error: FriendsServiceError) -> Response:
    """Map a friends domain error to an HTTP response."""
    if isinstance(error, (FriendshipNotFoundError, UserNotFoundError)):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, InsufficientPermissionsError):
        code = status.HTTP_403_FORBIDDEN
    else:
        code = status.HTTP_400_BAD_REQUEST
    logger.warning("Friendship operation rejected: %s", error)
    return Response({'error': str(error)}, status=code)


@extend_schema(
    responses={200: FriendSerializer(many=True)},
    description="Accepted friends of the current user, newest first.",
    tags=['friends'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def friend_list(request):
    return Response(FriendSerializer(get_friends(user=request.user), many=True).data)


@extend_schema(
    methods=['GET'],
    responses={200: FriendshipSerializer(many=True)},
    description="Pending friend requests received by the current user.",
    tags=['friends'],
)
@extend_schema(
    methods=['POST'],
    request=SendFriendRequestSerializer,
    responses={201: FriendshipSerializer},
    description="Send a friend request.",
    tags=['friends'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def friend_requests(request):
    if request.method == 'GET':
        pending = get_pending_friend_requests(user=request.user)
        return Response(FriendshipSerializer(pending, many=True).data)

    serializer = SendFriendRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        friendship = send_friend_request(
            user=request.user,
            friend_id=serializer.validated_data['friend_id'],
        )
    except FriendsServiceError as e:
        return _error_response(e)

    return Response(FriendshipSerializer(friendship).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: FriendshipSerializer(many=True)},
    description="Pending friend requests sent by the current user.",
    tags=['friends'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def sent_requests(request):
    sent = get_sent_friend_requests(user=request.user)
    return Response(FriendshipSerializer(sent, many=True).data)


@extend_schema(request=None, responses={200: FriendshipSerializer}, tags=['friends'])
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def accept_request(request, pk):
    try:
        friendship = accept_friend_request(friendship_id=pk, user=request.user)
    except FriendsServiceError as e:
        return _error_response(e)

    return Response(FriendshipSerializer(friendship).data)


@extend_schema(request=None, responses={204: None}, tags=['friends'])
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def reject_request(request, pk):
    try:
        reject_friend_request(friendship_id=pk, user=request.user)
    except FriendsServiceError as e:
        return _error_response(e)

    return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(request=None, responses={204: None}, tags=['friends'])
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def cancel_request(request, pk):
    try:
        cancel_friend_request(friendship_id=pk, user=request.user)
    except FriendsServiceError as e:
        return _error_response(e)

    return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(responses={204: None}, tags=['friends'])
@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def unfriend(request, pk):
    try:
        unfriend_service(friendship_id=pk, user=request.user)
    except FriendsServiceError as e:
        return _error_response(e)

    return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    responses={200: FriendshipStatusSerializer},
    description="Friendship status with another user: pending, accepted, declined, blocked or none.",
    tags=['friends'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def friendship_status(request, user_id):
    return Response({
        'status': get_friendship_status(user_id=request.user.id, other_id=user_id)
    })
