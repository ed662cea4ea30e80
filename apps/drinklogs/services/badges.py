"""Achievement badges derived from a user's activity."""

from datetime import date, timedelta
from typing import Iterable, List, Optional

from django.conf import settings
from django.db.models import Q
from django.utils import timezone

from apps.accounts.models import User
from apps.cocktails.models import Cocktail
from apps.drinklogs.models import DrinkLog
from apps.events.models import Event, EventRegistration, RegistrationStatus
from apps.friends.models import Friendship, FriendshipStatus

# Number of most recent logs considered for the streak
STREAK_LOOKBACK = 365

BADGE_LABELS = {
    'cocktails': 'Cocktails Logged',
    'friends': 'Friends',
    'parties_hosted': 'Parties Hosted',
    'parties_attended': 'Parties Attended',
    'recipes': 'Recipes Created',
    'streak': 'Day Streak',
}

TIER_PRIORITY = {'gold': 3, 'silver': 2, 'bronze': 1}


def get_badge_tier(count: int) -> Optional[str]:
    """Highest tier whose threshold `count` reaches, or None."""
    thresholds = settings.BADGE_THRESHOLDS
    for tier in ('gold', 'silver', 'bronze'):
        if count >= thresholds[tier]:
            return tier
    return None


def calculate_streak(days: Iterable[date], today: Optional[date] = None) -> int:
    """
    Consecutive days with a log, counting back from today.

    Returns 0 when nothing was logged today.
    """
    today = today or timezone.localdate()
    logged = set(days)

    streak = 0
    current = today
    while current in logged:
        streak += 1
        current -= timedelta(days=1)
    return streak


def _activity_counts(user: User) -> dict:
    recent = (
        DrinkLog.objects
        .filter(user=user)
        .order_by('-created_at')
        .values_list('created_at', flat=True)[:STREAK_LOOKBACK]
    )

    return {
        'cocktails': DrinkLog.objects.filter(user=user).count(),
        'friends': Friendship.objects.filter(
            Q(user=user) | Q(friend=user),
            status=FriendshipStatus.ACCEPTED
        ).count(),
        'parties_hosted': Event.objects.filter(organiser=user).count(),
        'parties_attended': EventRegistration.objects.filter(
            user=user,
            status=RegistrationStatus.REGISTERED
        ).count(),
        'recipes': Cocktail.objects.filter(creator=user).count(),
        'streak': calculate_streak(timezone.localdate(created_at) for created_at in recent),
    }


def get_user_badges(*, user: User) -> List[dict]:
    """
    Badges the user has earned.

    Each badge is {'type', 'tier', 'count', 'label'}. Activities below
    the bronze threshold are left out.
    """
    badges = []
    for badge_type, count in _activity_counts(user).items():
        tier = get_badge_tier(count)
        if tier is None:
            continue
        badges.append({
            'type': badge_type,
            'tier': tier,
            'count': count,
            'label': BADGE_LABELS[badge_type],
        })
    return badges


def get_highest_badges(badges: List[dict], limit: int = 3) -> List[dict]:
    """Best badges for display: highest tier first, then highest count."""
    ranked = sorted(
        badges,
        key=lambda badge: (-TIER_PRIORITY.get(badge['tier'], 0), -badge['count'])
    )
    return ranked[:limit]
