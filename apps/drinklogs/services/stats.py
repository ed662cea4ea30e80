"""
Drink log statistics.

Read-only aggregations over a user's drink logs powering the profile
screen: totals, average rating, venues visited, favourite cocktails and
the rating distribution.

Example:
    Getting profile statistics::

        from apps.drinklogs.services import get_user_stats

        stats = get_user_stats(user=request.user)
        print(f"{stats['drinks_logged']} drinks, avg {stats['avg_rating']}")
"""

from decimal import Decimal, ROUND_HALF_UP

from django.db.models import Count

from apps.accounts.models import User
from apps.drinklogs.models import DrinkLog

TOP_COCKTAILS_LIMIT = 3
RATING_BUCKETS = range(0, 11)


def _average_rating(ratings) -> float:
    if not ratings:
        return 0.0
    value = Decimal(sum(ratings)) / Decimal(len(ratings))
    return float(value.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))


def get_user_stats(*, user: User) -> dict:
    """
    Calculate a user's drinking statistics.

    Args:
        user: Owner of the drink logs

    Returns:
        dict: A dictionary containing:
            - drinks_logged (int): Number of drink logs.
            - avg_rating (float): Mean of rated logs, one decimal, 0.0 if none.
            - bars_visited (int): Distinct venues across logs.
            - top_cocktails (list[dict]): Up to three {'id', 'name', 'count'}
              entries, most logged first.
            - popular_cocktail (dict | None): {'name', 'count'} of the most
              logged cocktail.
            - rating_trend (list[dict]): {'rating', 'count'} for each rating
              0 through 10.

    Note:
        Logs without a cocktail are counted in drinks_logged but not in
        the cocktail rankings. Ties in the ranking are ordered by name.
    """
    logs = DrinkLog.objects.filter(user=user)

    drinks_logged = logs.count()

    bars_visited = (
        logs.filter(location__isnull=False)
        .values('location_id')
        .distinct()
        .count()
    )

    ratings = list(logs.filter(rating__isnull=False).values_list('rating', flat=True))

    top_cocktails = [
        {'id': row['cocktail_id'], 'name': row['cocktail__name'], 'count': row['count']}
        for row in (
            logs.filter(cocktail__isnull=False)
            .values('cocktail_id', 'cocktail__name')
            .annotate(count=Count('id'))
            .order_by('-count', 'cocktail__name')[:TOP_COCKTAILS_LIMIT]
        )
    ]

    popular_cocktail = None
    if top_cocktails:
        popular_cocktail = {'name': top_cocktails[0]['name'], 'count': top_cocktails[0]['count']}

    rating_trend = [
        {'rating': bucket, 'count': sum(1 for r in ratings if r == bucket)}
        for bucket in RATING_BUCKETS
    ]

    return {
        'drinks_logged': drinks_logged,
        'avg_rating': _average_rating(ratings),
        'bars_visited': bars_visited,
        'top_cocktails': top_cocktails,
        'popular_cocktail': popular_cocktail,
        'rating_trend': rating_trend,
    }
