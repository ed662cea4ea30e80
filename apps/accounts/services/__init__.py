"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidTokenError,
    UserNotFoundError,
    InvalidSettingsError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .password_reset import request_password_reset, confirm_password_reset
from .profile import (
    get_user_by_id,
    update_profile,
    search_users,
    get_user_settings,
    update_user_settings,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'InvalidTokenError',
    'UserNotFoundError',
    'InvalidSettingsError',
    # Services
    'register_user',
    'authenticate_user',
    'request_password_reset',
    'confirm_password_reset',
    'get_user_by_id',
    'update_profile',
    'search_users',
    'get_user_settings',
    'update_user_settings',
]
