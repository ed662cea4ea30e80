"""Services for drinklogs business logic."""

from .exceptions import (
    DrinkLogsServiceError,
    DrinkLogNotFoundError,
    CocktailNotFoundError,
    LocationNotFoundError,
    InvalidDrinkLogError,
    InvalidCommentError,
    InvalidTagError,
    TagNotFoundError,
    InsufficientPermissionsError,
)
from .drink_log_management import (
    can_view_drink_log,
    create_drink_log,
    get_drink_log_by_id,
    delete_drink_log,
    get_user_drink_logs,
    tag_friends,
)
from .tagging import add_tags, get_tags_for_log, remove_tag
from .interactions import toggle_like, add_comment, get_comments
from .stats import get_user_stats
from .badges import (
    get_badge_tier,
    calculate_streak,
    get_user_badges,
    get_highest_badges,
)

__all__ = [
    # Exceptions
    'DrinkLogsServiceError',
    'DrinkLogNotFoundError',
    'CocktailNotFoundError',
    'LocationNotFoundError',
    'InvalidDrinkLogError',
    'InvalidCommentError',
    'InvalidTagError',
    'TagNotFoundError',
    'InsufficientPermissionsError',
    # Drink logs
    'can_view_drink_log',
    'create_drink_log',
    'get_drink_log_by_id',
    'delete_drink_log',
    'get_user_drink_logs',
    # Tagging
    'tag_friends',
    'add_tags',
    'get_tags_for_log',
    'remove_tag',
    # Interactions
    'toggle_like',
    'add_comment',
    'get_comments',
    # Stats & badges
    'get_user_stats',
    'get_badge_tier',
    'calculate_streak',
    'get_user_badges',
    'get_highest_badges',
]
