"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    EmailAlreadyRegisteredError,
    InvalidRoleError,
    AuthenticationError,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .tokens import issue_token, decode_token, verify_token

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'EmailAlreadyRegisteredError',
    'InvalidRoleError',
    'AuthenticationError',
    'InvalidCredentialsError',
    'InvalidTokenError',
    'TokenExpiredError',
    # Services
    'register_user',
    'authenticate_user',
    'issue_token',
    'decode_token',
    'verify_token',
]
