"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    RoleChangeNotAllowedError,
    CannotDeleteSelfError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .user_management import get_user_by_id, update_user, delete_user

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    'RoleChangeNotAllowedError',
    'CannotDeleteSelfError',
    # Services
    'register_user',
    'authenticate_user',
    'get_user_by_id',
    'update_user',
    'delete_user',
]
