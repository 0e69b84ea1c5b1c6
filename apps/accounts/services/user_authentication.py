"""User authentication service."""

from django.contrib.auth import get_user_model
from django.contrib.auth.hashers import make_password

from .exceptions import InvalidCredentialsError

User = get_user_model()

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


def authenticate_user(*, email: str, password: str) -> User:
    """
    Authenticate user with email and password.

    Unknown email and wrong password fail identically, including the
    cost of a hash computation, so callers cannot tell them apart.

    Args:
        email: User's email
        password: User's password

    Returns:
        Authenticated User instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
    """
    try:
        user = User.objects.get(email__iexact=User.objects.normalize_email(email))
    except User.DoesNotExist:
        # Run the hasher anyway to keep timing uniform
        make_password(password)
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

    if not user.check_password(password):
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

    return user
