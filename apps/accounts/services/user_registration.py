"""User registration service."""

import logging
from typing import Iterable

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from .exceptions import EmailAlreadyRegisteredError, InvalidRoleError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    roles: Iterable[str]
) -> User:
    """
    Register a new user with a set of roles.

    Only a one-way hash of the password is stored.

    Args:
        email: User's email address
        password: User's password (will be hashed)
        roles: Roles granted to the account (moderator and/or employee)

    Returns:
        Created User instance

    Raises:
        InvalidRoleError: If roles is empty or contains an unknown role
        EmailAlreadyRegisteredError: If the email is already registered
    """
    email = User.objects.normalize_email(email)

    if User.objects.filter(email__iexact=email).exists():
        raise EmailAlreadyRegisteredError(f"Email {email} is already registered")

    try:
        # Savepoint keeps the outer transaction usable after a constraint failure
        with transaction.atomic():
            user = User.objects.create_user(
                email=email,
                password=password,
                roles=roles,
            )
    except ValueError as e:
        raise InvalidRoleError(str(e))
    except IntegrityError:
        # Concurrent registration won the unique constraint
        raise EmailAlreadyRegisteredError(f"Email {email} is already registered")

    logger.info("Registered user %s with roles %s", user.id, user.roles)
    return user
