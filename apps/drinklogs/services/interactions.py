"""Likes and comments on drink logs."""

import logging
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.drinklogs.models import DrinkLogLike, DrinkLogComment
from apps.notifications.models import NotificationType
from apps.notifications.services import create_notification

from .drink_log_management import get_drink_log_by_id
from .exceptions import InvalidCommentError

logger = logging.getLogger(__name__)


@transaction.atomic
def toggle_like(*, drink_log_id: UUID, user: User) -> dict:
    """
    Like a drink log, or remove the like if it is already there.

    A new like notifies the log owner.

    Returns:
        {'liked': bool, 'like_count': int}

    Raises:
        DrinkLogNotFoundError: If log doesn't exist or is hidden from the user
    """
    drink_log = get_drink_log_by_id(drink_log_id=drink_log_id, user=user)

    deleted, _ = DrinkLogLike.objects.filter(drink_log=drink_log, user=user).delete()
    if deleted:
        liked = False
    else:
        try:
            with transaction.atomic():
                DrinkLogLike.objects.create(drink_log=drink_log, user=user)
        except IntegrityError:
            # Concurrent like from the same user already landed
            liked = True
        else:
            liked = True
            create_notification(
                receiver=drink_log.user,
                actor=user,
                notification_type=NotificationType.LIKE,
                drink_log=drink_log,
                message=f"{user.get_display_name()} liked your drink",
            )

    return {
        'liked': liked,
        'like_count': DrinkLogLike.objects.filter(drink_log=drink_log).count(),
    }


@transaction.atomic
def add_comment(*, drink_log_id: UUID, user: User, content: str) -> DrinkLogComment:
    """
    Comment on a drink log and notify its owner.

    Raises:
        InvalidCommentError: If content is blank
        DrinkLogNotFoundError: If log doesn't exist or is hidden from the user
    """
    if not content or not content.strip():
        raise InvalidCommentError("Comment is empty")

    drink_log = get_drink_log_by_id(drink_log_id=drink_log_id, user=user)

    comment = DrinkLogComment.objects.create(
        drink_log=drink_log,
        user=user,
        content=content.strip(),
    )

    create_notification(
        receiver=drink_log.user,
        actor=user,
        notification_type=NotificationType.COMMENT,
        drink_log=drink_log,
        message=f"{user.get_display_name()} commented on your drink",
    )

    logger.info("Comment %s added to drink log %s", comment.id, drink_log.id)
    return comment


def get_comments(*, drink_log_id: UUID, user: User) -> QuerySet[DrinkLogComment]:
    """Comments on a visible drink log, oldest first."""
    drink_log = get_drink_log_by_id(drink_log_id=drink_log_id, user=user)
    return (
        DrinkLogComment.objects
        .filter(drink_log=drink_log)
        .select_related('user')
        .order_by('created_at')
    )
