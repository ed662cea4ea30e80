import logging

from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
    UserPublicSerializer,
    ProfileUpdateSerializer,
    UserSettingsSerializer,
    PasswordResetRequestSerializer,
    PasswordResetConfirmSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    request_password_reset as request_password_reset_service,
    confirm_password_reset as confirm_password_reset_service,
    get_user_by_id,
    update_profile as update_profile_service,
    search_users as search_users_service,
    get_user_settings,
    update_user_settings,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidTokenError,
    UserNotFoundError,
    InvalidSettingsError,
)

logger = logging.getLogger(__name__)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class LogoutRequestSerializer(serializers.Serializer):
    refresh = serializers.CharField(help_text="Refresh token issued at login")


def _auth_response(user, message, status_code=status.HTTP_200_OK):
    refresh = RefreshToken.for_user(user)
    return Response({
        'message': message,
        'user': UserSerializer(user).data,
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        }
    }, status=status_code)


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a new user account and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new user account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data.copy()
    data.pop('password_confirm', None)

    try:
        user = register_user(**data)
    except UserRegistrationError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return _auth_response(user, 'Registration successful', status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return _auth_response(user, 'Login successful')


@extend_schema(
    request=LogoutRequestSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Logout. The refresh token, if given, must be valid.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    """Logout; tokens are discarded client-side."""
    refresh_token = request.data.get('refresh')
    if refresh_token:
        try:
            RefreshToken(refresh_token)
        except TokenError:
            return Response({'error': 'Invalid token'}, status=status.HTTP_400_BAD_REQUEST)

    return Response({'message': 'Logout successful'})


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    return Response(UserSerializer(request.user).data)


@extend_schema(
    request=ProfileUpdateSerializer,
    responses={
        200: UserSerializer,
        400: ErrorResponseSerializer,
    },
    description="Update the current user's display name and avatar.",
    tags=['auth'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_profile(request):
    serializer = ProfileUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = update_profile_service(user=request.user, **serializer.validated_data)
    return Response(UserSerializer(user).data)


@extend_schema(
    methods=['GET'],
    responses={200: UserSettingsSerializer},
    description="Notification settings merged over the defaults.",
    tags=['auth'],
)
@extend_schema(
    methods=['PUT'],
    request=UserSettingsSerializer,
    responses={200: UserSettingsSerializer, 400: ErrorResponseSerializer},
    description="Update notification settings. Omitted keys keep their value.",
    tags=['auth'],
)
@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated])
def user_settings(request):
    if request.method == 'GET':
        return Response(get_user_settings(user=request.user))

    try:
        merged = update_user_settings(user=request.user, settings=request.data)
    except InvalidSettingsError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(merged)


@extend_schema(
    request=PasswordResetRequestSerializer,
    responses={200: MessageResponseSerializer},
    description="Request a password reset. Always returns success.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def request_password_reset(request):
    serializer = PasswordResetRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        request_password_reset_service(email=serializer.validated_data['email'])
    except UserNotFoundError:
        # Don't reveal whether the email exists
        logger.info("Password reset requested for unknown email")

    return Response({
        'message': 'If the account exists, a password reset email has been sent'
    })


@extend_schema(
    request=PasswordResetConfirmSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Confirm password reset with token and set new password.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def confirm_password_reset(request):
    serializer = PasswordResetConfirmSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        confirm_password_reset_service(
            token=serializer.validated_data['token'],
            new_password=serializer.validated_data['new_password'],
        )
    except InvalidTokenError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({'message': 'Password reset successful'})


@extend_schema(
    responses={200: UserPublicSerializer, 404: ErrorResponseSerializer},
    description="Public profile of a user.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def user_detail(request, pk):
    try:
        user = get_user_by_id(user_id=pk)
    except UserNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(UserPublicSerializer(user).data)


@extend_schema(
    parameters=[
        OpenApiParameter(name='q', type=str, required=True, description='Name or email fragment'),
    ],
    responses={200: UserPublicSerializer(many=True)},
    description="Search other users by display name or email.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def search_users(request):
    users = search_users_service(
        query=request.query_params.get('q', ''),
        current_user=request.user,
    )
    return Response(UserPublicSerializer(users, many=True).data)
