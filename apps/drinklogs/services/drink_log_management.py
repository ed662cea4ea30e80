"""Drink log management service - create, read and delete logs."""

import logging
from typing import Iterable, List, Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Count, QuerySet

from apps.accounts.models import User
from apps.cocktails.services import (
    get_cocktail_by_id,
    CocktailNotFoundError as CocktailLookupError,
)
from apps.drinklogs.models import DrinkLog, DrinkLogTag, LogVisibility
from apps.events.models import Location
from apps.friends.services import are_friends, get_friend_ids

from .exceptions import (
    DrinkLogNotFoundError,
    CocktailNotFoundError,
    LocationNotFoundError,
    InvalidDrinkLogError,
    InvalidTagError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)


def can_view_drink_log(drink_log: DrinkLog, viewer: Optional[User]) -> bool:
    """
    Owner sees everything; others see public logs, and friends-only logs
    when they are accepted friends. Private and only_me logs stay with
    the owner.
    """
    if viewer is not None and drink_log.user_id == viewer.id:
        return True
    if drink_log.visibility == LogVisibility.PUBLIC:
        return True
    if drink_log.visibility == LogVisibility.FRIENDS and viewer is not None:
        return are_friends(user_id=drink_log.user_id, other_id=viewer.id)
    return False


def tag_friends(*, drink_log: DrinkLog, user: User, tagged_user_ids: Iterable[UUID]) -> List[DrinkLogTag]:
    """
    Tag accepted friends of `user` on the drink log.

    Duplicates and people already tagged are skipped.

    Returns:
        Newly created tags

    Raises:
        InvalidTagError: If any id is not an accepted friend of `user`
    """
    wanted = list(dict.fromkeys(UUID(str(user_id)) for user_id in tagged_user_ids))
    if not wanted:
        return []

    friends = set(get_friend_ids(user=user))
    if any(user_id not in friends for user_id in wanted):
        raise InvalidTagError("Only accepted friends can be tagged")

    already = set(
        DrinkLogTag.objects
        .filter(drink_log=drink_log, tagged_user_id__in=wanted)
        .values_list('tagged_user_id', flat=True)
    )
    tags = DrinkLogTag.objects.bulk_create([
        DrinkLogTag(drink_log=drink_log, tagged_user_id=user_id)
        for user_id in wanted if user_id not in already
    ])

    logger.info("Drink log %s: tagged %d friends", drink_log.id, len(tags))
    return tags


@transaction.atomic
def create_drink_log(
    *,
    user: User,
    cocktail_id: Optional[UUID] = None,
    location_id: Optional[UUID] = None,
    rating: Optional[int] = None,
    caption: str = "",
    image_url: str = "",
    visibility: str = LogVisibility.PUBLIC,
    tagged_user_ids: Optional[Iterable[UUID]] = None
) -> DrinkLog:
    """
    Log a drink.

    Args:
        user: User logging the drink
        cocktail_id: Optional cocktail, must be visible to the user
        location_id: Optional venue
        rating: 0-10, optional
        caption: Free text
        visibility: public, friends, private or only_me
        tagged_user_ids: Accepted friends who were there

    Returns:
        Created DrinkLog

    Raises:
        InvalidDrinkLogError: If rating or visibility are invalid
        CocktailNotFoundError: If the cocktail doesn't exist or is someone else's private recipe
        LocationNotFoundError: If the venue doesn't exist
        InvalidTagError: If a tagged user is not an accepted friend
    """
    if rating is not None and not (0 <= rating <= 10):
        raise InvalidDrinkLogError("Rating must be between 0 and 10")
    if visibility not in LogVisibility.values:
        raise InvalidDrinkLogError(f"Unknown visibility: {visibility}")

    cocktail = None
    if cocktail_id:
        try:
            cocktail = get_cocktail_by_id(cocktail_id=cocktail_id, user=user)
        except CocktailLookupError as e:
            raise CocktailNotFoundError(str(e))

    location = None
    if location_id:
        try:
            location = Location.objects.get(id=location_id)
        except Location.DoesNotExist:
            raise LocationNotFoundError(f"Location with ID {location_id} not found")

    drink_log = DrinkLog.objects.create(
        user=user,
        cocktail=cocktail,
        location=location,
        rating=rating,
        caption=caption or "",
        image_url=image_url or "",
        visibility=visibility,
    )
    if tagged_user_ids:
        tag_friends(drink_log=drink_log, user=user, tagged_user_ids=tagged_user_ids)

    logger.info("Drink log %s created by %s", drink_log.id, user.id)
    return drink_log


def get_drink_log_by_id(*, drink_log_id: UUID, user: Optional[User] = None) -> DrinkLog:
    """
    Retrieve a drink log the user may see.

    Raises:
        DrinkLogNotFoundError: If it doesn't exist or is hidden from the user
    """
    try:
        drink_log = (
            DrinkLog.objects
            .select_related('user', 'cocktail', 'location')
            .prefetch_related('tags__tagged_user')
            .annotate(like_count=Count('likes', distinct=True), comment_count=Count('comments', distinct=True))
            .get(id=drink_log_id)
        )
    except DrinkLog.DoesNotExist:
        raise DrinkLogNotFoundError(f"Drink log with ID {drink_log_id} not found")

    if not can_view_drink_log(drink_log, user):
        raise DrinkLogNotFoundError(f"Drink log with ID {drink_log_id} not found")

    return drink_log


@transaction.atomic
def delete_drink_log(*, drink_log_id: UUID, user: User) -> None:
    """
    Delete a drink log. Only the owner can delete it.

    Raises:
        DrinkLogNotFoundError: If log doesn't exist
        InsufficientPermissionsError: If user is not the owner
    """
    try:
        drink_log = DrinkLog.objects.select_for_update().get(id=drink_log_id)
    except DrinkLog.DoesNotExist:
        raise DrinkLogNotFoundError(f"Drink log with ID {drink_log_id} not found")

    if drink_log.user_id != user.id:
        raise InsufficientPermissionsError("Only the owner can delete this drink log")

    drink_log.delete()
    logger.info("Drink log %s deleted by %s", drink_log_id, user.id)


def get_user_drink_logs(*, user: User, viewer: Optional[User] = None) -> QuerySet[DrinkLog]:
    """
    Drink logs of `user`, newest first.

    When `viewer` is someone else, only the logs they may see are
    returned (public, plus friends-only ones for accepted friends).

    Args:
        user: Owner of the logs
        viewer: User looking at them, defaults to the owner
    """
    logs = (
        DrinkLog.objects
        .filter(user=user)
        .select_related('user', 'cocktail', 'location')
        .prefetch_related('tags__tagged_user')
        .annotate(like_count=Count('likes', distinct=True), comment_count=Count('comments', distinct=True))
        .order_by('-created_at')
    )

    if viewer is None or viewer.id == user.id:
        return logs

    allowed = [LogVisibility.PUBLIC]
    if are_friends(user_id=user.id, other_id=viewer.id):
        allowed.append(LogVisibility.FRIENDS)
    return logs.filter(visibility__in=allowed)
