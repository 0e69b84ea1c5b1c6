"""
Stateless JWT authentication.

Tokens carry the subject id and the role the bearer acts in, so requests
are authenticated without a database lookup. Dummy-login tokens have an
empty subject.
"""

from django.utils.functional import cached_property
from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework_simplejwt.models import TokenUser
from rest_framework_simplejwt.settings import api_settings

from .services import decode_token, AuthenticationError
from .services.tokens import ROLE_CLAIM


class RoleTokenUser(TokenUser):
    """Request user built from token claims."""

    @cached_property
    def id(self):
        # Empty subject means an anonymous dummy login
        return self.token.get(api_settings.USER_ID_CLAIM) or None

    @cached_property
    def role(self):
        return self.token.get(ROLE_CLAIM)


class RoleTokenAuthentication(JWTStatelessUserAuthentication):
    """Authenticate `Authorization: Bearer <token>` headers."""

    def get_validated_token(self, raw_token):
        try:
            return decode_token(raw_token)
        except AuthenticationError:
            # Same answer for expired and forged tokens
            raise InvalidToken('Token is invalid or expired')
