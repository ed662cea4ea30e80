import logging
from uuid import UUID

from django.shortcuts import get_object_or_404
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.models import User
from .serializers import (
    DrinkLogSerializer,
    DrinkLogCreateSerializer,
    DrinkLogCommentSerializer,
    DrinkLogTagSerializer,
    TagFriendsSerializer,
    LikeResultSerializer,
    UserStatsSerializer,
    BadgeSerializer,
)
from .services import (
    create_drink_log,
    get_drink_log_by_id,
    delete_drink_log,
    get_user_drink_logs,
    toggle_like,
    add_comment,
    get_comments,
    add_tags,
    get_tags_for_log,
    remove_tag as remove_tag_service,
    get_user_stats,
    get_user_badges,
    get_highest_badges,
    # Exceptions
    DrinkLogsServiceError,
    DrinkLogNotFoundError,
    CocktailNotFoundError,
    LocationNotFoundError,
    TagNotFoundError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)


def _error_response(error: DrinkLogsServiceError) -> Response:
    not_found = (DrinkLogNotFoundError, CocktailNotFoundError, LocationNotFoundError, TagNotFoundError)
    if isinstance(error, not_found):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, InsufficientPermissionsError):
        code = status.HTTP_403_FORBIDDEN
    else:
        code = status.HTTP_400_BAD_REQUEST
    logger.warning("Drink log operation rejected: %s", error)
    return Response({'error': str(error)}, status=code)


class DrinkLogPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class DrinkLogViewSet(viewsets.ModelViewSet):
    """
    ViewSet for drink logs.

    list: My drink logs, or those of ?user=<id> that I may see
    create: Log a drink
    retrieve: Get a visible drink log
    destroy: Delete my drink log
    """

    serializer_class = DrinkLogSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = DrinkLogPagination
    http_method_names = ['get', 'post', 'delete']
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def get_queryset(self):
        user_id = self.request.query_params.get('user')
        if user_id:
            try:
                user_id = UUID(user_id)
            except ValueError:
                raise NotFound("User not found")
            owner = get_object_or_404(User, id=user_id, is_active=True)
            return get_user_drink_logs(user=owner, viewer=self.request.user)
        return get_user_drink_logs(user=self.request.user)

    def get_serializer_class(self):
        if self.action == 'create':
            return DrinkLogCreateSerializer
        if self.action == 'comments' and self.request.method == 'POST':
            return DrinkLogCommentSerializer
        if self.action == 'tags' and self.request.method == 'POST':
            return TagFriendsSerializer
        return DrinkLogSerializer

    @extend_schema(
        parameters=[
            OpenApiParameter('user', OpenApiTypes.UUID, description='Show logs of this user instead of mine'),
        ],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=DrinkLogCreateSerializer, responses={201: DrinkLogSerializer})
    def create(self, request, *args, **kwargs):
        serializer = DrinkLogCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            drink_log = create_drink_log(user=request.user, **serializer.validated_data)
        except DrinkLogsServiceError as e:
            return _error_response(e)

        return Response(DrinkLogSerializer(drink_log).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, *args, **kwargs):
        try:
            drink_log = get_drink_log_by_id(drink_log_id=self.kwargs['pk'], user=request.user)
        except DrinkLogsServiceError as e:
            return _error_response(e)

        return Response(DrinkLogSerializer(drink_log).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_drink_log(drink_log_id=self.kwargs['pk'], user=request.user)
        except DrinkLogsServiceError as e:
            return _error_response(e)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={200: LikeResultSerializer})
    @action(detail=True, methods=['post'])
    def like(self, request, pk=None):
        """Like the drink log, or unlike it when already liked."""
        try:
            result = toggle_like(drink_log_id=pk, user=request.user)
        except DrinkLogsServiceError as e:
            return _error_response(e)

        return Response(result)

    @extend_schema(
        methods=['GET'],
        responses={200: DrinkLogCommentSerializer(many=True)},
    )
    @extend_schema(
        methods=['POST'],
        request=DrinkLogCommentSerializer,
        responses={201: DrinkLogCommentSerializer},
    )
    @action(detail=True, methods=['get', 'post'])
    def comments(self, request, pk=None):
        """List comments oldest first, or add one."""
        try:
            if request.method == 'GET':
                comments = get_comments(drink_log_id=pk, user=request.user)
                return Response(DrinkLogCommentSerializer(comments, many=True).data)

            serializer = DrinkLogCommentSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            comment = add_comment(
                drink_log_id=pk,
                user=request.user,
                content=serializer.validated_data['content'],
            )
        except DrinkLogsServiceError as e:
            return _error_response(e)

        return Response(DrinkLogCommentSerializer(comment).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        methods=['GET'],
        responses={200: DrinkLogTagSerializer(many=True)},
    )
    @extend_schema(
        methods=['POST'],
        request=TagFriendsSerializer,
        responses={201: DrinkLogTagSerializer(many=True)},
        description='Owner only. Every id must be an accepted friend; people already tagged are skipped.',
    )
    @action(detail=True, methods=['get', 'post'])
    def tags(self, request, pk=None):
        """Friends tagged on the drink log, or tag more of them."""
        try:
            if request.method == 'GET':
                tags = get_tags_for_log(drink_log_id=pk, user=request.user)
                return Response(DrinkLogTagSerializer(tags, many=True).data)

            serializer = TagFriendsSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            tags = add_tags(
                drink_log_id=pk,
                user=request.user,
                tagged_user_ids=serializer.validated_data['tagged_user_ids'],
            )
        except DrinkLogsServiceError as e:
            return _error_response(e)

        return Response(DrinkLogTagSerializer(tags, many=True).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=None, responses={204: None})
    @action(detail=True, methods=['delete'], url_path=r'tags/(?P<user_id>[0-9a-fA-F-]{36})')
    def remove_tag(self, request, pk=None, user_id=None):
        """Untag a user (log owner or the tagged user)."""
        try:
            remove_tag_service(drink_log_id=pk, tagged_user_id=user_id, user=request.user)
        except DrinkLogsServiceError as e:
            return _error_response(e)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: UserStatsSerializer})
    @action(detail=False, methods=['get'])
    def stats(self, request):
        """Drinking statistics of the current user."""
        return Response(get_user_stats(user=request.user))

    @extend_schema(
        parameters=[
            OpenApiParameter('top', OpenApiTypes.INT, description='Only the N best badges'),
        ],
        responses={200: BadgeSerializer(many=True)},
    )
    @action(detail=False, methods=['get'])
    def badges(self, request):
        """Earned badges of the current user."""
        badges = get_user_badges(user=request.user)

        top = request.query_params.get('top')
        if top:
            try:
                limit = int(top)
            except ValueError:
                return Response({'error': 'top must be an integer'}, status=status.HTTP_400_BAD_REQUEST)
            badges = get_highest_badges(badges, limit=limit)

        return Response(badges)
