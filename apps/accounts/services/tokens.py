"""Access token issuing and verification."""

from typing import Optional
from uuid import UUID

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

from apps.accounts.models import Role

from .exceptions import InvalidTokenError, TokenExpiredError

ROLE_CLAIM = 'role'


def issue_token(*, subject_id: Optional[UUID], role: str) -> str:
    """
    Issue a signed access token for a subject acting in a role.

    Args:
        subject_id: Account id, or None for anonymous dummy logins
        role: Role the bearer acts in

    Returns:
        Encoded JWT

    Raises:
        ValueError: If role is not a known role
    """
    if role not in Role.values:
        raise ValueError(f"Unknown role: {role}")

    token = AccessToken()
    token[api_settings.USER_ID_CLAIM] = str(subject_id) if subject_id else ''
    token[ROLE_CLAIM] = role
    return str(token)


def decode_token(raw_token) -> AccessToken:
    """
    Validate signature, expiry and claims of an encoded token.

    Raises:
        TokenExpiredError: If the token is past its expiry
        InvalidTokenError: For any other defect
    """
    if isinstance(raw_token, bytes):
        raw_token = raw_token.decode('utf-8', errors='replace')

    try:
        token = AccessToken(raw_token)
    except TokenError:
        if _is_expired(raw_token):
            raise TokenExpiredError("Token expired. Please login again")
        raise InvalidTokenError("Invalid token")

    if token.get(ROLE_CLAIM) not in Role.values:
        raise InvalidTokenError("Invalid token")
    if api_settings.USER_ID_CLAIM not in token:
        raise InvalidTokenError("Invalid token")

    return token


def verify_token(raw_token) -> Optional[str]:
    """Return the subject id carried by a valid token ('' maps to None)."""
    token = decode_token(raw_token)
    return token[api_settings.USER_ID_CLAIM] or None


def _is_expired(raw_token: str) -> bool:
    try:
        unverified = AccessToken(raw_token, verify=False)
    except TokenError:
        return False
    try:
        unverified.check_exp()
    except TokenError:
        return True
    return False
