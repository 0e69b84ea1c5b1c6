"""Shared lookups for pvz services."""

import logging
from typing import Optional
from uuid import UUID

from apps.accounts.models import User
from apps.pvz.models import PickupPoint, Reception

from .exceptions import InvalidIdentifierError, PickupPointNotFoundError

logger = logging.getLogger(__name__)


def parse_identifier(value, *, field: str = 'id') -> UUID:
    """Coerce value to a UUID or raise InvalidIdentifierError."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        raise InvalidIdentifierError(f"{field} is not a valid UUID: {value!r}")


def lock_pickup_point(pvz_id) -> PickupPoint:
    """
    Fetch a pickup point and lock its row until the transaction ends.

    Every lifecycle mutation goes through this lock, so mutations of one
    pickup point run one at a time. Must be called inside transaction.atomic().

    On SQLite, which has no row locks, the database-wide write lock taken by
    BEGIN IMMEDIATE (see SQLITE_OPTIONS in settings) serializes instead.

    Raises:
        InvalidIdentifierError: If pvz_id is not a UUID
        PickupPointNotFoundError: If the pickup point does not exist
    """
    pvz_uuid = parse_identifier(pvz_id, field='pvzId')
    try:
        return (
            PickupPoint.objects
            .select_for_update()
            .get(id=pvz_uuid)
        )
    except PickupPoint.DoesNotExist:
        raise PickupPointNotFoundError(f"Pickup point {pvz_uuid} not found")


def get_open_reception(pickup_point: PickupPoint) -> Optional[Reception]:
    return (
        Reception.objects
        .filter(pickup_point=pickup_point, is_open=True)
        .order_by('-created_at')
        .first()
    )


def resolve_creator(created_by_id) -> Optional[UUID]:
    """
    Return the account id to record as creator, or None.

    Tokens from dummy logins carry no subject; a subject whose account is
    gone is recorded as anonymous.
    """
    if not created_by_id:
        return None
    try:
        creator_id = UUID(str(created_by_id))
    except ValueError:
        logger.warning("Ignoring malformed creator id %r", created_by_id)
        return None
    if not User.objects.filter(id=creator_id).exists():
        logger.warning("Creator %s has no account; recording as anonymous", creator_id)
        return None
    return creator_id
