"""Public venues and users' private addresses."""

from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.events.models import Location, UserLocation

from .exceptions import LocationNotFoundError, InvalidEventDataError

USER_LOCATION_FIELDS = ('label', 'street', 'house_nr', 'city')


def get_locations() -> QuerySet[Location]:
    """All public locations ordered by name."""
    return Location.objects.order_by('name')


def get_user_locations(*, user: User) -> QuerySet[UserLocation]:
    return UserLocation.objects.filter(creator=user).order_by('label')


@transaction.atomic
def create_user_location(
    *,
    user: User,
    label: str,
    street: str,
    house_nr: int,
    city: str
) -> UserLocation:
    """
    Save a private address for `user`.

    Raises:
        InvalidEventDataError: If house_nr is negative
    """
    if house_nr is None or int(house_nr) < 0:
        raise InvalidEventDataError("House number must be a positive number")

    return UserLocation.objects.create(
        creator=user,
        label=label,
        street=street,
        house_nr=house_nr,
        city=city,
    )


def _get_own_user_location(location_id: UUID, user: User) -> UserLocation:
    try:
        return (
            UserLocation.objects
            .select_for_update()
            .get(id=location_id, creator=user)
        )
    except UserLocation.DoesNotExist:
        raise LocationNotFoundError(f"User location with ID {location_id} not found")


@transaction.atomic
def update_user_location(*, location_id: UUID, user: User, **fields) -> UserLocation:
    """
    Update one of the user's own addresses.

    Raises:
        LocationNotFoundError: If it doesn't exist or belongs to someone else
    """
    location = _get_own_user_location(location_id, user)

    changed = [name for name in USER_LOCATION_FIELDS if name in fields]
    for name in changed:
        setattr(location, name, fields[name])

    if changed:
        location.save(update_fields=changed)
    return location


@transaction.atomic
def delete_user_location(*, location_id: UUID, user: User) -> None:
    """
    Delete one of the user's own addresses. Events held there lose the reference.

    Raises:
        LocationNotFoundError: If it doesn't exist or belongs to someone else
    """
    location = _get_own_user_location(location_id, user)
    location.delete()
