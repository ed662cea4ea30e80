import logging

from rest_framework import viewsets, status, serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .serializers import ShopItemSerializer
from .services import (
    get_shop_items,
    get_shop_item_by_id,
    get_shop_categories,
    # Exceptions
    ShopServiceError,
    ShopItemNotFoundError,
)

logger = logging.getLogger(__name__)


def _error_response(error: ShopServiceError) -> Response:
    if isinstance(error, ShopItemNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    else:
        code = status.HTTP_400_BAD_REQUEST
    logger.warning("Shop lookup rejected: %s", error)
    return Response({'error': str(error)}, status=code)


class ShopItemPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class ShopItemViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only shop catalogue.

    list: Items ordered by name (?category=)
    retrieve: Single item
    """

    serializer_class = ShopItemSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = ShopItemPagination
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def get_queryset(self):
        return get_shop_items(category=self.request.query_params.get('category'))

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name='category',
                type=str,
                required=False,
                description='Only items in this category (case-insensitive)',
            ),
        ],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    def retrieve(self, request, *args, **kwargs):
        try:
            item = get_shop_item_by_id(item_id=self.kwargs['pk'])
        except ShopServiceError as e:
            return _error_response(e)

        return Response(ShopItemSerializer(item).data)

    @extend_schema(responses={200: serializers.ListField(child=serializers.CharField())})
    @action(detail=False, methods=['get'])
    def categories(self, request):
        return Response(get_shop_categories())
