"""Tagging friends on drink logs."""

import logging
from typing import Iterable, List
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.drinklogs.models import DrinkLog, DrinkLogTag

from .drink_log_management import get_drink_log_by_id, tag_friends
from .exceptions import (
    DrinkLogNotFoundError,
    TagNotFoundError,
    InsufficientPermissionsError,
)

logger = logging.getLogger(__name__)


@transaction.atomic
def add_tags(*, drink_log_id: UUID, user: User, tagged_user_ids: Iterable[UUID]) -> List[DrinkLogTag]:
    """
    Tag more friends on an existing drink log. Only the owner can tag.

    Raises:
        DrinkLogNotFoundError: If log doesn't exist
        InsufficientPermissionsError: If user is not the owner
        InvalidTagError: If a tagged user is not an accepted friend
    """
    try:
        drink_log = DrinkLog.objects.select_for_update().get(id=drink_log_id)
    except DrinkLog.DoesNotExist:
        raise DrinkLogNotFoundError(f"Drink log with ID {drink_log_id} not found")

    if drink_log.user_id != user.id:
        raise InsufficientPermissionsError("Only the owner can tag friends on this drink log")

    return tag_friends(drink_log=drink_log, user=user, tagged_user_ids=tagged_user_ids)


def get_tags_for_log(*, drink_log_id: UUID, user: User) -> QuerySet[DrinkLogTag]:
    """Tags on a drink log the user may see, in tagging order."""
    drink_log = get_drink_log_by_id(drink_log_id=drink_log_id, user=user)
    return (
        DrinkLogTag.objects
        .filter(drink_log=drink_log)
        .select_related('tagged_user')
        .order_by('created_at')
    )


@transaction.atomic
def remove_tag(*, drink_log_id: UUID, tagged_user_id: UUID, user: User) -> None:
    """
    Remove a tag. The log owner and the tagged user may do this.

    Raises:
        TagNotFoundError: If that user is not tagged on the log
        InsufficientPermissionsError: If user is neither owner nor tagged user
    """
    try:
        tag = (
            DrinkLogTag.objects
            .select_for_update()
            .select_related('drink_log')
            .get(drink_log_id=drink_log_id, tagged_user_id=tagged_user_id)
        )
    except DrinkLogTag.DoesNotExist:
        raise TagNotFoundError(f"User {tagged_user_id} is not tagged on drink log {drink_log_id}")

    if user.id not in (tag.drink_log.user_id, tag.tagged_user_id):
        raise InsufficientPermissionsError("Only the owner or the tagged user can remove this tag")

    tag.delete()
    logger.info("Drink log %s: tag of %s removed by %s", drink_log_id, tagged_user_id, user.id)
