"""Password reset service."""

import logging
import secrets

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.mail import send_mail
from django.db import transaction

from .exceptions import UserNotFoundError, InvalidTokenError

User = get_user_model()

logger = logging.getLogger(__name__)


def send_password_reset_email(user, reset_token: str) -> None:
    """Email the reset link (or bare token when no link template is set)."""
    if settings.PASSWORD_RESET_URL:
        target = settings.PASSWORD_RESET_URL.format(token=reset_token)
    else:
        target = f"Your reset token: {reset_token}"

    send_mail(
        subject="Reset your Cocktail Social password",
        message=(
            f"Hi {user.get_display_name()},\n\n"
            f"Use the following to choose a new password:\n\n{target}\n\n"
            "If you didn't ask for this, you can ignore this email."
        ),
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[user.email],
    )
    logger.info("Password reset email sent to user %s", user.id)


@transaction.atomic
def request_password_reset(*, email: str) -> str:
    """
    Generate a password reset token and email it to the user.

    Args:
        email: User's email address

    Returns:
        Reset token

    Raises:
        UserNotFoundError: If user does not exist
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(email__iexact=email, is_active=True)
        )
    except User.DoesNotExist:
        raise UserNotFoundError(f"No active user with email: {email}")

    reset_token = secrets.token_urlsafe(32)
    user.reset_token = reset_token
    user.save(update_fields=['reset_token'])

    # Send only once the token is committed
    transaction.on_commit(lambda: send_password_reset_email(user, reset_token))

    return reset_token


@transaction.atomic
def confirm_password_reset(*, token: str, new_password: str) -> User:
    """
    Reset user password with token.

    Args:
        token: Reset token
        new_password: New password

    Returns:
        User instance

    Raises:
        InvalidTokenError: If token is invalid or expired
    """
    if not token:
        raise InvalidTokenError("Invalid or expired reset token")

    try:
        user = (
            User.objects
            .select_for_update()
            .get(reset_token=token, is_active=True)
        )
    except User.DoesNotExist:
        raise InvalidTokenError("Invalid or expired reset token")

    # Set new password and clear token
    user.set_password(new_password)
    user.reset_token = None
    user.save(update_fields=['password', 'reset_token'])

    return user
