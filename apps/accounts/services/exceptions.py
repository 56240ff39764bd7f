"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserRegistrationError(AccountsServiceError):
    """Raised when user registration fails."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class UserNotFoundError(AccountsServiceError):
    """Raised when user does not exist."""
    pass


class RoleChangeNotAllowedError(AccountsServiceError):
    """Raised when a non-admin tries to change a role."""
    pass


class CannotDeleteSelfError(AccountsServiceError):
    """Raised when an administrator tries to delete their own account."""
    pass
