"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserRegistrationError(AccountsServiceError):
    """Raised when user registration fails."""
    pass


class EmailAlreadyRegisteredError(UserRegistrationError):
    """Raised when the email already belongs to an account."""
    pass


class InvalidRoleError(UserRegistrationError):
    """Raised when the requested role set is empty or unknown."""
    pass


class AuthenticationError(AccountsServiceError):
    """Base for credential and token failures.

    Messages never say which part of the credential was wrong.
    """
    pass


class InvalidCredentialsError(AuthenticationError):
    """Raised when authentication credentials are invalid."""
    pass


class InvalidTokenError(AuthenticationError):
    """Raised when an access token is malformed or its signature is wrong."""
    pass


class TokenExpiredError(AuthenticationError):
    """Raised when an access token is past its expiry."""
    pass
