"""
Service layer unit tests for drinklogs app.

Tests cover:
- Logging, visibility and deletion
- Likes and comments with owner notifications
- Tagging friends
- Profile statistics
- Badges and streaks
"""

import pytest
from datetime import date, timedelta
from uuid import uuid4

from django.utils import timezone

from apps.cocktails.models import Cocktail, CocktailOrigin
from apps.drinklogs.models import DrinkLog, DrinkLogLike, DrinkLogTag, LogVisibility
from apps.drinklogs.services import (
    create_drink_log,
    get_drink_log_by_id,
    delete_drink_log,
    get_user_drink_logs,
    toggle_like,
    add_comment,
    get_comments,
    add_tags,
    get_tags_for_log,
    remove_tag,
    get_user_stats,
    get_badge_tier,
    calculate_streak,
    get_user_badges,
    get_highest_badges,
)
from apps.drinklogs.services.exceptions import (
    DrinkLogNotFoundError,
    CocktailNotFoundError,
    LocationNotFoundError,
    InvalidDrinkLogError,
    InvalidCommentError,
    InvalidTagError,
    TagNotFoundError,
    InsufficientPermissionsError,
)
from apps.events.models import Event, EventRegistration, RegistrationStatus
from apps.notifications.models import Notification, NotificationType


# =============================================================================
# DRINK LOGS
# =============================================================================

@pytest.mark.django_db
class TestCreateDrinkLog:

    def test_create(self, user, negroni, bar):
        drink_log = create_drink_log(
            user=user,
            cocktail_id=negroni.id,
            location_id=bar.id,
            rating=9,
            caption='Great',
        )

        assert drink_log.user == user
        assert drink_log.cocktail == negroni
        assert drink_log.location == bar
        assert drink_log.visibility == LogVisibility.PUBLIC

    def test_without_cocktail(self, user):
        drink_log = create_drink_log(user=user, caption='House wine')

        assert drink_log.cocktail is None

    def test_rating_out_of_range(self, user):
        with pytest.raises(InvalidDrinkLogError):
            create_drink_log(user=user, rating=11)

    def test_unknown_visibility(self, user):
        with pytest.raises(InvalidDrinkLogError):
            create_drink_log(user=user, visibility='everyone')

    def test_someone_elses_private_recipe(self, user, stranger):
        recipe = Cocktail.objects.create(
            name='Secret',
            creator=stranger,
            is_public=False,
            origin_type=CocktailOrigin.USER,
        )

        with pytest.raises(CocktailNotFoundError):
            create_drink_log(user=user, cocktail_id=recipe.id)

    def test_unknown_location(self, user):
        with pytest.raises(LocationNotFoundError):
            create_drink_log(user=user, location_id=uuid4())


@pytest.mark.django_db
class TestDrinkLogVisibility:

    def test_owner_sees_all(self, user, drink_log, friends_log, private_log):
        logs = list(get_user_drink_logs(user=user))

        assert len(logs) == 3

    def test_friend_sees_public_and_friends(self, user, friend, drink_log, friends_log, private_log):
        logs = set(get_user_drink_logs(user=user, viewer=friend))

        assert logs == {drink_log, friends_log}

    def test_stranger_sees_public_only(self, user, stranger, drink_log, friends_log, private_log):
        logs = list(get_user_drink_logs(user=user, viewer=stranger))

        assert logs == [drink_log]

    def test_hidden_log_not_found(self, stranger, private_log):
        with pytest.raises(DrinkLogNotFoundError):
            get_drink_log_by_id(drink_log_id=private_log.id, user=stranger)

    def test_detail_includes_counts(self, user, friend, drink_log):
        DrinkLogLike.objects.create(drink_log=drink_log, user=friend)

        result = get_drink_log_by_id(drink_log_id=drink_log.id, user=user)

        assert result.like_count == 1
        assert result.comment_count == 0


@pytest.mark.django_db
class TestDeleteDrinkLog:

    def test_owner_deletes(self, user, drink_log):
        delete_drink_log(drink_log_id=drink_log.id, user=user)

        assert not DrinkLog.objects.filter(id=drink_log.id).exists()

    def test_others_cannot_delete(self, friend, drink_log):
        with pytest.raises(InsufficientPermissionsError):
            delete_drink_log(drink_log_id=drink_log.id, user=friend)

    def test_missing(self, user):
        with pytest.raises(DrinkLogNotFoundError):
            delete_drink_log(drink_log_id=uuid4(), user=user)


# =============================================================================
# LIKES & COMMENTS
# =============================================================================

@pytest.mark.django_db
class TestToggleLike:

    def test_like_notifies_owner(self, user, friend, drink_log):
        result = toggle_like(drink_log_id=drink_log.id, user=friend)

        assert result == {'liked': True, 'like_count': 1}
        notification = Notification.objects.get(user=user)
        assert notification.type == NotificationType.LIKE
        assert notification.actor == friend
        assert notification.drink_log == drink_log

    def test_second_toggle_unlikes(self, user, friend, drink_log):
        toggle_like(drink_log_id=drink_log.id, user=friend)

        result = toggle_like(drink_log_id=drink_log.id, user=friend)

        assert result == {'liked': False, 'like_count': 0}
        assert Notification.objects.filter(user=user).count() == 1

    def test_own_like_does_not_notify(self, user, drink_log):
        toggle_like(drink_log_id=drink_log.id, user=user)

        assert not Notification.objects.exists()

    def test_likes_preference_off(self, user, friend, drink_log):
        user.settings = {'notifications': {'likes': False}}
        user.save()

        result = toggle_like(drink_log_id=drink_log.id, user=friend)

        assert result['liked'] is True
        assert not Notification.objects.exists()

    def test_cannot_like_hidden_log(self, stranger, friends_log):
        with pytest.raises(DrinkLogNotFoundError):
            toggle_like(drink_log_id=friends_log.id, user=stranger)


@pytest.mark.django_db
class TestComments:

    def test_add_comment_notifies_owner(self, user, friend, drink_log):
        comment = add_comment(drink_log_id=drink_log.id, user=friend, content='  Cheers! ')

        assert comment.content == 'Cheers!'
        notification = Notification.objects.get(user=user)
        assert notification.type == NotificationType.COMMENT

    def test_blank_comment_rejected(self, friend, drink_log):
        with pytest.raises(InvalidCommentError):
            add_comment(drink_log_id=drink_log.id, user=friend, content='   ')

    def test_comments_oldest_first(self, user, friend, drink_log):
        add_comment(drink_log_id=drink_log.id, user=friend, content='First')
        add_comment(drink_log_id=drink_log.id, user=user, content='Second')

        contents = [c.content for c in get_comments(drink_log_id=drink_log.id, user=user)]

        assert contents == ['First', 'Second']


# =============================================================================
# TAGS
# =============================================================================

@pytest.mark.django_db
class TestTagging:

    def test_create_with_tagged_friends(self, user, friend, negroni):
        drink_log = create_drink_log(
            user=user,
            cocktail_id=negroni.id,
            tagged_user_ids=[friend.id, friend.id],
        )

        tagged = [tag.tagged_user for tag in get_tags_for_log(drink_log_id=drink_log.id, user=user)]
        assert tagged == [friend]

    def test_create_rejects_non_friend(self, user, stranger, negroni):
        with pytest.raises(InvalidTagError):
            create_drink_log(user=user, cocktail_id=negroni.id, tagged_user_ids=[stranger.id])

        assert not DrinkLog.objects.exists()

    def test_cannot_tag_self(self, user, negroni):
        with pytest.raises(InvalidTagError):
            create_drink_log(user=user, cocktail_id=negroni.id, tagged_user_ids=[user.id])

    def test_add_tags_skips_existing(self, user, friend, drink_log):
        add_tags(drink_log_id=drink_log.id, user=user, tagged_user_ids=[friend.id])

        created = add_tags(drink_log_id=drink_log.id, user=user, tagged_user_ids=[friend.id])

        assert created == []
        assert DrinkLogTag.objects.filter(drink_log=drink_log).count() == 1

    def test_only_owner_adds_tags(self, friend, drink_log):
        with pytest.raises(InsufficientPermissionsError):
            add_tags(drink_log_id=drink_log.id, user=friend, tagged_user_ids=[friend.id])

    def test_tags_hidden_with_log(self, user, friend, stranger, friends_log):
        add_tags(drink_log_id=friends_log.id, user=user, tagged_user_ids=[friend.id])

        with pytest.raises(DrinkLogNotFoundError):
            get_tags_for_log(drink_log_id=friends_log.id, user=stranger)

    def test_tags_prefetched_on_log(self, user, friend, drink_log):
        add_tags(drink_log_id=drink_log.id, user=user, tagged_user_ids=[friend.id])

        result = get_drink_log_by_id(drink_log_id=drink_log.id, user=user)

        assert [tag.tagged_user for tag in result.tags.all()] == [friend]

    def test_tagged_user_removes_own_tag(self, user, friend, drink_log):
        add_tags(drink_log_id=drink_log.id, user=user, tagged_user_ids=[friend.id])

        remove_tag(drink_log_id=drink_log.id, tagged_user_id=friend.id, user=friend)

        assert not DrinkLogTag.objects.exists()

    def test_stranger_cannot_remove_tag(self, user, friend, stranger, drink_log):
        add_tags(drink_log_id=drink_log.id, user=user, tagged_user_ids=[friend.id])

        with pytest.raises(InsufficientPermissionsError):
            remove_tag(drink_log_id=drink_log.id, tagged_user_id=friend.id, user=stranger)

    def test_remove_missing_tag(self, user, friend, drink_log):
        with pytest.raises(TagNotFoundError):
            remove_tag(drink_log_id=drink_log.id, tagged_user_id=friend.id, user=user)


# =============================================================================
# STATS
# =============================================================================

@pytest.mark.django_db
class TestUserStats:

    def test_empty(self, user):
        stats = get_user_stats(user=user)

        assert stats['drinks_logged'] == 0
        assert stats['avg_rating'] == 0.0
        assert stats['bars_visited'] == 0
        assert stats['top_cocktails'] == []
        assert stats['popular_cocktail'] is None
        assert len(stats['rating_trend']) == 11
        assert all(bucket['count'] == 0 for bucket in stats['rating_trend'])

    def test_aggregates(self, user, negroni, spritz, bar):
        DrinkLog.objects.create(user=user, cocktail=negroni, location=bar, rating=7)
        DrinkLog.objects.create(user=user, cocktail=negroni, location=bar, rating=8)
        DrinkLog.objects.create(user=user, cocktail=spritz, rating=8)
        DrinkLog.objects.create(user=user)

        stats = get_user_stats(user=user)

        assert stats['drinks_logged'] == 4
        assert stats['avg_rating'] == 7.7
        assert stats['bars_visited'] == 1
        assert stats['top_cocktails'] == [
            {'id': negroni.id, 'name': 'Negroni', 'count': 2},
            {'id': spritz.id, 'name': 'Spritz', 'count': 1},
        ]
        assert stats['popular_cocktail'] == {'name': 'Negroni', 'count': 2}
        assert stats['rating_trend'][8] == {'rating': 8, 'count': 2}
        assert stats['rating_trend'][7] == {'rating': 7, 'count': 1}

    def test_top_cocktails_limited_to_three(self, user):
        for name in ['A', 'B', 'C', 'D']:
            cocktail = Cocktail.objects.create(name=name, origin_type=CocktailOrigin.SYSTEM)
            DrinkLog.objects.create(user=user, cocktail=cocktail)

        stats = get_user_stats(user=user)

        assert [row['name'] for row in stats['top_cocktails']] == ['A', 'B', 'C']


# =============================================================================
# BADGES
# =============================================================================

class TestBadgeHelpers:

    def test_tiers(self):
        assert get_badge_tier(4) is None
        assert get_badge_tier(5) == 'bronze'
        assert get_badge_tier(20) == 'silver'
        assert get_badge_tier(50) == 'gold'

    def test_streak_requires_today(self):
        today = date(2025, 6, 10)
        days = [today - timedelta(days=1), today - timedelta(days=2)]

        assert calculate_streak(days, today=today) == 0

    def test_streak_counts_consecutive_days(self):
        today = date(2025, 6, 10)
        days = [today, today - timedelta(days=1), today - timedelta(days=2), today - timedelta(days=4)]

        assert calculate_streak(days, today=today) == 3

    def test_highest_badges(self):
        badges = [
            {'type': 'friends', 'tier': 'bronze', 'count': 7, 'label': 'Friends'},
            {'type': 'cocktails', 'tier': 'gold', 'count': 60, 'label': 'Cocktails Logged'},
            {'type': 'recipes', 'tier': 'silver', 'count': 21, 'label': 'Recipes Created'},
            {'type': 'streak', 'tier': 'silver', 'count': 30, 'label': 'Day Streak'},
        ]

        top = get_highest_badges(badges, limit=3)

        assert [b['type'] for b in top] == ['cocktails', 'streak', 'recipes']


@pytest.mark.django_db
class TestUserBadges:

    def test_no_badges_below_bronze(self, user, drink_log):
        assert get_user_badges(user=user) == []

    def test_cocktail_and_streak_badges(self, user):
        now = timezone.now()
        for offset in range(5):
            log = DrinkLog.objects.create(user=user)
            DrinkLog.objects.filter(id=log.id).update(created_at=now - timedelta(days=offset))

        badges = {b['type']: b for b in get_user_badges(user=user)}

        assert badges['cocktails']['tier'] == 'bronze'
        assert badges['cocktails']['count'] == 5
        assert badges['streak']['count'] == 5
        assert badges['streak']['label'] == 'Day Streak'

    def test_parties_count_registered_only(self, user, stranger):
        start = timezone.now() + timedelta(days=1)
        for index in range(5):
            event = Event.objects.create(organiser=stranger, name=f'Party {index}', start_time=start)
            EventRegistration.objects.create(event=event, user=user, status=RegistrationStatus.REGISTERED)
        waitlisted = Event.objects.create(organiser=stranger, name='Waitlist', start_time=start)
        EventRegistration.objects.create(event=waitlisted, user=user, status=RegistrationStatus.WAITLISTED)

        badges = {b['type']: b for b in get_user_badges(user=user)}

        assert badges['parties_attended']['count'] == 5
        assert 'parties_hosted' not in badges

    def test_thresholds_from_settings(self, settings, user, drink_log):
        settings.BADGE_THRESHOLDS = {'bronze': 1, 'silver': 2, 'gold': 3}

        badges = {b['type']: b['tier'] for b in get_user_badges(user=user)}

        assert badges['cocktails'] == 'bronze'
