"""
Pickup point management service.

Pickup points are created once and never changed or deleted.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.utils import timezone

from apps.pvz.models import PickupPoint, City

from .exceptions import InvalidCityError, PickupPointAlreadyExistsError
from .lookups import parse_identifier, resolve_creator

logger = logging.getLogger(__name__)


@transaction.atomic
def create_pickup_point(
    *,
    city: str,
    pvz_id: Optional[UUID] = None,
    created_at: Optional[datetime] = None,
    created_by_id: Optional[UUID] = None
) -> PickupPoint:
    """
    Register a new pickup point.

    Args:
        city: One of the served cities
        pvz_id: Optional caller-chosen id (generated when omitted)
        created_at: Optional registration date (now when omitted)
        created_by_id: Account creating the pickup point, for attribution

    Returns:
        Created PickupPoint instance

    Raises:
        InvalidCityError: If city is not served
        InvalidIdentifierError: If pvz_id is not a UUID
        PickupPointAlreadyExistsError: If pvz_id is already taken
    """
    if city not in City.values:
        raise InvalidCityError(
            f"Invalid city: {city!r}. Valid options: {', '.join(City.values)}"
        )

    fields = {
        'city': city,
        'created_at': created_at or timezone.now(),
        'created_by_id': resolve_creator(created_by_id),
    }
    if pvz_id is not None:
        fields['id'] = parse_identifier(pvz_id, field='id')
        if PickupPoint.objects.filter(id=fields['id']).exists():
            raise PickupPointAlreadyExistsError(f"Pickup point {fields['id']} already exists")

    try:
        with transaction.atomic():
            pickup_point = PickupPoint.objects.create(**fields)
    except IntegrityError:
        raise PickupPointAlreadyExistsError(f"Pickup point {fields.get('id')} already exists")

    logger.info("Created pickup point %s in %s", pickup_point.id, pickup_point.city)
    return pickup_point
