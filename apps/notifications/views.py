import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .serializers import NotificationSerializer, UnreadCountSerializer, MarkedReadSerializer
from .services import (
    get_notifications,
    get_unread_notification_count,
    mark_all_notifications_read,
    delete_notification,
    NotificationNotFoundError,
)

logger = logging.getLogger(__name__)

MAX_LIMIT = 100


@extend_schema(
    parameters=[
        OpenApiParameter(name='limit', type=int, required=False, description='Max items (default 40)'),
    ],
    responses={200: NotificationSerializer(many=True)},
    description="Newest notifications of the current user.",
    tags=['notifications'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def notification_list(request):
    limit = request.query_params.get('limit')
    try:
        limit = max(1, min(int(limit), MAX_LIMIT)) if limit else None
    except ValueError:
        return Response({'error': 'limit must be an integer'}, status=status.HTTP_400_BAD_REQUEST)

    notifications = get_notifications(user=request.user, limit=limit)
    return Response(NotificationSerializer(notifications, many=True).data)


@extend_schema(
    responses={200: UnreadCountSerializer},
    tags=['notifications'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def unread_count(request):
    return Response({'unread': get_unread_notification_count(user=request.user)})


@extend_schema(
    request=None,
    responses={200: MarkedReadSerializer},
    tags=['notifications'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def mark_all_read(request):
    updated = mark_all_notifications_read(user=request.user)
    return Response({'updated': updated})


@extend_schema(
    responses={204: None, 404: None},
    tags=['notifications'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def notification_delete(request, pk):
    try:
        delete_notification(notification_id=pk, user=request.user)
    except NotificationNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(status=status.HTTP_204_NO_CONTENT)
