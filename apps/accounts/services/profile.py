"""Profile services: editing, search and notification settings."""

import logging
from copy import deepcopy

from django.conf import settings as django_settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Q

from ..models import DEFAULT_SETTINGS
from .exceptions import InvalidSettingsError, UserNotFoundError

User = get_user_model()

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ('display_name', 'avatar_url')


def get_user_by_id(*, user_id) -> User:
    """
    Fetch an active user profile.

    Raises:
        UserNotFoundError: If no active user has this id
    """
    try:
        return User.objects.get(id=user_id, is_active=True)
    except (User.DoesNotExist, ValueError):
        raise UserNotFoundError(f"User with id {user_id} not found")


@transaction.atomic
def update_profile(*, user: User, **fields) -> User:
    """
    Update editable profile fields. Unknown keys are ignored.

    Args:
        user: Profile owner
        **fields: display_name and/or avatar_url

    Returns:
        Updated User instance
    """
    changed = []
    for name in PROFILE_FIELDS:
        if name in fields:
            setattr(user, name, fields[name] or '')
            changed.append(name)

    if changed:
        user.save(update_fields=changed)

    return user


def search_users(*, query: str, current_user: User, limit: int = None):
    """
    Case-insensitive substring search on display name or email.

    The current user is excluded. A blank query returns an empty list.

    Args:
        query: Search text
        current_user: User performing the search
        limit: Max results, defaults to USER_SEARCH_LIMIT

    Returns:
        List of User instances ordered by display name
    """
    query = (query or '').strip()
    if not query:
        return []

    if limit is None:
        limit = django_settings.USER_SEARCH_LIMIT

    users = (
        User.objects
        .filter(is_active=True)
        .filter(Q(display_name__icontains=query) | Q(email__icontains=query))
        .exclude(id=current_user.id)
        .order_by('display_name', 'email')
    )
    return list(users[:limit])


def get_user_settings(*, user: User) -> dict:
    """Return the user's stored settings merged over the defaults."""
    return user.get_settings()


@transaction.atomic
def update_user_settings(*, user: User, settings: dict) -> dict:
    """
    Replace notification preferences for a user.

    Only the keys present in the defaults are accepted, and every value
    must be a boolean. Missing keys keep their current value.

    Args:
        user: Profile owner
        settings: Dict shaped like {'notifications': {'likes': False, ...}}

    Returns:
        The merged settings after the update

    Raises:
        InvalidSettingsError: If a key is unknown or a value is not boolean
    """
    if not isinstance(settings, dict):
        raise InvalidSettingsError("Settings must be an object")

    incoming = settings.get('notifications', {})
    if not isinstance(incoming, dict):
        raise InvalidSettingsError("'notifications' must be an object")

    allowed = DEFAULT_SETTINGS['notifications']
    for key, value in incoming.items():
        if key not in allowed:
            raise InvalidSettingsError(f"Unknown notification setting: {key}")
        if not isinstance(value, bool):
            raise InvalidSettingsError(f"Setting '{key}' must be true or false")

    user = User.objects.select_for_update().get(id=user.id)
    stored = deepcopy(user.settings or {})
    notifications = dict(stored.get('notifications') or {})
    notifications.update(incoming)
    stored['notifications'] = notifications
    user.settings = stored
    user.save(update_fields=['settings'])

    logger.info("Updated notification settings for user %s", user.id)
    return user.get_settings()
