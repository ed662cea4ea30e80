import logging

from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .models import Event, RegistrationStatus
from .serializers import (
    EventSerializer,
    EventWriteSerializer,
    VisibleEventsSerializer,
    EventRegistrationSerializer,
    RegistrationStatusSerializer,
    DecideRegistrationSerializer,
    InviteFriendsSerializer,
    InvitedSerializer,
    LocationSerializer,
    UserLocationSerializer,
)
from apps.events.services import (
    create_event,
    update_event,
    delete_event,
    get_event_by_id,
    get_my_events,
    get_public_events,
    get_visible_events,
    register_for_event,
    cancel_registration as cancel_registration_service,
    decide_registration,
    get_user_event_registration,
    get_event_registrations,
    invite_friends,
    get_locations,
    get_user_locations,
    create_user_location,
    update_user_location,
    delete_user_location,
    # Exceptions
    EventsServiceError,
    EventNotFoundError,
    LocationNotFoundError,
    RegistrationNotFoundError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)


def _error_response(error: EventsServiceError) -> Response:
    """Map an events domain error to an HTTP response."""
    if isinstance(error, (EventNotFoundError, LocationNotFoundError, RegistrationNotFoundError)):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, InsufficientPermissionsError):
        code = status.HTTP_403_FORBIDDEN
    else:
        code = status.HTTP_400_BAD_REQUEST
    logger.warning("Event operation rejected: %s", error)
    return Response({'error': str(error)}, status=code)


class EventViewSet(viewsets.ModelViewSet):
    """
    ViewSet for events.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Events organised by the current user
    create: Create an event
    retrieve: Get an event visible to the current user
    update / partial_update: Change an event (organiser only)
    destroy: Delete an event (organiser only)
    """

    serializer_class = EventSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def get_queryset(self):
        return get_my_events(user=self.request.user)

    def get_serializer_class(self):
        if self.action in ('create', 'update', 'partial_update'):
            return EventWriteSerializer
        return EventSerializer

    @extend_schema(request=EventWriteSerializer, responses={201: EventSerializer})
    def create(self, request, *args, **kwargs):
        serializer = EventWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            event = create_event(organiser=request.user, **serializer.validated_data)
        except EventsServiceError as e:
            return _error_response(e)

        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, *args, **kwargs):
        try:
            event = get_event_by_id(event_id=self.kwargs['pk'], user=request.user)
        except EventsServiceError as e:
            return _error_response(e)

        return Response(EventSerializer(event).data)

    @extend_schema(request=EventWriteSerializer, responses={200: EventSerializer})
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = EventWriteSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            event = update_event(
                event_id=self.kwargs['pk'],
                user=request.user,
                **serializer.validated_data
            )
        except EventsServiceError as e:
            return _error_response(e)

        return Response(EventSerializer(event).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_event(event_id=self.kwargs['pk'], user=request.user)
        except EventsServiceError as e:
            return _error_response(e)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: EventSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def public(self, request):
        """All public events, soonest first."""
        return Response(EventSerializer(get_public_events(), many=True).data)

    @extend_schema(responses={200: VisibleEventsSerializer})
    @action(detail=False, methods=['get'])
    def visible(self, request):
        """Events of other users split into public and friends buckets."""
        buckets = get_visible_events(user=request.user)
        return Response({
            'public': EventSerializer(buckets['public'], many=True).data,
            'friends': EventSerializer(buckets['friends'], many=True).data,
        })

    @extend_schema(request=None, responses={201: EventRegistrationSerializer})
    @action(detail=True, methods=['post'])
    def register(self, request, pk=None):
        """Register for the event; waitlisted when approval is required."""
        try:
            registration = register_for_event(event_id=pk, user=request.user)
        except EventsServiceError as e:
            return _error_response(e)

        return Response(
            EventRegistrationSerializer(registration).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(request=None, responses={200: EventRegistrationSerializer})
    @action(detail=True, methods=['post'])
    def cancel_registration(self, request, pk=None):
        try:
            registration = cancel_registration_service(event_id=pk, user=request.user)
        except EventsServiceError as e:
            return _error_response(e)

        return Response(EventRegistrationSerializer(registration).data)

    @extend_schema(responses={200: RegistrationStatusSerializer})
    @action(detail=True, methods=['get'])
    def registration(self, request, pk=None):
        """Current user's registration state for the event."""
        try:
            event = get_event_by_id(event_id=pk, user=request.user)
        except EventsServiceError as e:
            return _error_response(e)

        return Response(get_user_event_registration(event_id=event.id, user=request.user))

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name='status',
                type=str,
                required=False,
                enum=RegistrationStatus.values,
                description='Only rows with this status; cancelled rows are hidden by default',
            ),
        ],
        responses={200: EventRegistrationSerializer(many=True)},
    )
    @action(detail=True, methods=['get'])
    def registrations(self, request, pk=None):
        """Attendees and waitlist (organiser only)."""
        wanted = request.query_params.get('status')
        if wanted and wanted not in RegistrationStatus.values:
            return Response({'error': f'Unknown status: {wanted}'}, status=status.HTTP_400_BAD_REQUEST)

        try:
            registrations = get_event_registrations(event_id=pk, user=request.user, status=wanted)
        except EventsServiceError as e:
            return _error_response(e)

        return Response(EventRegistrationSerializer(registrations, many=True).data)

    @extend_schema(request=DecideRegistrationSerializer, responses={200: EventRegistrationSerializer})
    @action(detail=True, methods=['post'])
    def decide(self, request, pk=None):
        """Approve or reject a waitlisted registration (organiser only)."""
        serializer = DecideRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            registration = decide_registration(
                event_id=pk,
                user_id=serializer.validated_data['user_id'],
                decided_by=request.user,
                approve=serializer.validated_data['approve'],
            )
        except EventsServiceError as e:
            return _error_response(e)

        return Response(EventRegistrationSerializer(registration).data)

    @extend_schema(
        request=InviteFriendsSerializer,
        responses={200: InvitedSerializer},
        description=(
            'Friends who have party invites turned off are skipped and not returned '
            'in `invited`. The party_invites setting is off by default, so a friend '
            'must opt in under notification settings before they can be invited.'
        ),
    )
    @action(detail=True, methods=['post'])
    def invite(self, request, pk=None):
        """Send party invites to friends (organiser only)."""
        serializer = InviteFriendsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            invited = invite_friends(
                event_id=pk,
                organiser=request.user,
                friend_ids=serializer.validated_data['friend_ids'],
            )
        except EventsServiceError as e:
            return _error_response(e)

        return Response({'invited': invited})


class UserLocationViewSet(viewsets.ModelViewSet):
    """CRUD over the current user's private addresses."""

    serializer_class = UserLocationSerializer
    permission_classes = [IsAuthenticated]
    http_method_names = ['get', 'post', 'patch', 'put', 'delete']

    def get_queryset(self):
        return get_user_locations(user=self.request.user)

    def create(self, request, *args, **kwargs):
        serializer = UserLocationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            location = create_user_location(user=request.user, **serializer.validated_data)
        except EventsServiceError as e:
            return _error_response(e)

        return Response(UserLocationSerializer(location).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = UserLocationSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            location = update_user_location(
                location_id=self.kwargs['pk'],
                user=request.user,
                **serializer.validated_data
            )
        except EventsServiceError as e:
            return _error_response(e)

        return Response(UserLocationSerializer(location).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_user_location(location_id=self.kwargs['pk'], user=request.user)
        except EventsServiceError as e:
            return _error_response(e)

        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    responses={200: LocationSerializer(many=True)},
    description="Public venues ordered by name.",
    tags=['events'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def location_list(request):
    return Response(LocationSerializer(get_locations(), many=True).data)
