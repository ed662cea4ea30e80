"""
Which events a user may see.

An event is visible to its organiser, to everyone when public, and to the
organiser's accepted friends when private. Everything else is hidden.
"""

from typing import Dict, List

from apps.accounts.models import User
from apps.events.models import Event
from apps.friends.services import are_friends, get_friend_ids


def can_view_event(*, event: Event, user: User) -> bool:
    if event.is_organiser(user) or event.is_public:
        return True
    return are_friends(user_id=user.id, other_id=event.organiser_id)


def get_visible_events(*, user: User) -> Dict[str, List[Event]]:
    """
    Split every event not organised by `user` into public and friends buckets.

    A public event lands in the public bucket even when the organiser is a
    friend. Private events of non-friends are left out. Both buckets are
    ordered by start time ascending.

    Returns:
        {'public': [...], 'friends': [...]}
    """
    friend_ids = set(get_friend_ids(user=user))

    events = (
        Event.objects
        .exclude(organiser=user)
        .select_related('organiser', 'location', 'user_location')
        .order_by('start_time')
    )

    buckets = {'public': [], 'friends': []}
    for event in events:
        if event.is_public:
            buckets['public'].append(event)
        elif event.organiser_id in friend_ids:
            buckets['friends'].append(event)

    return buckets
