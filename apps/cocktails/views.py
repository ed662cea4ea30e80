import logging

from rest_framework import viewsets, status, serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .serializers import (
    CocktailSerializer,
    CocktailListSerializer,
    RecipeCreateSerializer,
    MatchRequestSerializer,
    CocktailMatchSerializer,
    IngredientUsageSerializer,
)
from .services import (
    get_public_cocktails,
    get_personal_recipes,
    get_visible_cocktails,
    get_cocktail_by_id,
    get_cocktail_types,
    search_cocktails,
    create_recipe,
    get_ingredient_usage,
    match_cocktails,
    # Exceptions
    CocktailsServiceError,
    CocktailNotFoundError,
)

logger = logging.getLogger(__name__)


def _error_response(error: CocktailsServiceError) -> Response:
    if isinstance(error, CocktailNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    else:
        code = status.HTTP_400_BAD_REQUEST
    logger.warning("Cocktail operation rejected: %s", error)
    return Response({'error': str(error)}, status=code)


class CocktailPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class CocktailViewSet(viewsets.ModelViewSet):
    """
    ViewSet for cocktails and user recipes.

    list: Public cocktails, or visible cocktails matching ?search=
    create: Create a personal recipe
    retrieve: Get a cocktail (public or own)
    """

    serializer_class = CocktailSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = CocktailPagination
    http_method_names = ['get', 'post']
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def get_queryset(self):
        search = self.request.query_params.get('search')
        if search:
            return search_cocktails(query=search, user=self.request.user)
        return get_public_cocktails()

    def get_serializer_class(self):
        if self.action == 'list':
            return CocktailListSerializer
        if self.action == 'create':
            return RecipeCreateSerializer
        return CocktailSerializer

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name='search',
                type=str,
                required=False,
                description='Name fragment; tolerant of small typos',
            ),
        ],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    def retrieve(self, request, *args, **kwargs):
        try:
            cocktail = get_cocktail_by_id(cocktail_id=self.kwargs['pk'], user=request.user)
        except CocktailsServiceError as e:
            return _error_response(e)

        return Response(CocktailSerializer(cocktail).data)

    @extend_schema(request=RecipeCreateSerializer, responses={201: CocktailSerializer})
    def create(self, request, *args, **kwargs):
        serializer = RecipeCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            cocktail = create_recipe(creator=request.user, **serializer.validated_data)
        except CocktailsServiceError as e:
            return _error_response(e)

        return Response(CocktailSerializer(cocktail).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: CocktailSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def mine(self, request):
        """Recipes created by the current user."""
        recipes = get_personal_recipes(user=request.user)
        return Response(CocktailSerializer(recipes, many=True).data)

    @extend_schema(responses={200: serializers.ListField(child=serializers.CharField())})
    @action(detail=False, methods=['get'])
    def types(self, request):
        """Distinct cocktail types of the built-in catalogue."""
        return Response(get_cocktail_types())

    @extend_schema(responses={200: IngredientUsageSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def ingredients(self, request):
        """Ingredient names with the number of recipes using them."""
        return Response(get_ingredient_usage())

    @extend_schema(request=MatchRequestSerializer, responses={200: CocktailMatchSerializer(many=True)})
    @action(detail=False, methods=['post'])
    def match(self, request):
        """Rank visible cocktails by how many of their ingredients the user has."""
        serializer = MatchRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        matches = match_cocktails(
            selected_ingredients=serializer.validated_data['ingredients'],
            cocktails=get_visible_cocktails(user=request.user),
        )
        return Response(CocktailMatchSerializer(matches, many=True).data)
