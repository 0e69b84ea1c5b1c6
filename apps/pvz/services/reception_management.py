"""
Reception lifecycle service.

A reception is created Open and can only move to Closed; Closed is
terminal. At most one reception per pickup point is open at a time:
checked under the pickup point row lock and backed by a partial unique
constraint on the receptions table.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError

from apps.pvz.models import Reception

from .exceptions import (
    ReceptionAlreadyOpenError,
    ReceptionAlreadyClosedError,
    ReceptionNotFoundError,
)
from .lookups import lock_pickup_point, get_open_reception, resolve_creator

logger = logging.getLogger(__name__)


@transaction.atomic
def open_reception(*, pvz_id, created_by_id: Optional[UUID] = None) -> Reception:
    """
    Open a new reception at a pickup point.

    Args:
        pvz_id: UUID of the pickup point
        created_by_id: Account opening the reception, for attribution

    Returns:
        The new, open Reception

    Raises:
        InvalidIdentifierError: If pvz_id is not a UUID
        PickupPointNotFoundError: If the pickup point doesn't exist
        ReceptionAlreadyOpenError: If a reception is already open there
    """
    pickup_point = lock_pickup_point(pvz_id)

    if get_open_reception(pickup_point) is not None:
        raise ReceptionAlreadyOpenError(
            f"Pickup point {pickup_point.id} already has an open reception"
        )

    try:
        with transaction.atomic():
            reception = Reception.objects.create(
                pickup_point=pickup_point,
                is_open=True,
                created_by_id=resolve_creator(created_by_id),
            )
    except IntegrityError:
        # one_open_reception_per_pvz caught a concurrent open
        raise ReceptionAlreadyOpenError(
            f"Pickup point {pickup_point.id} already has an open reception"
        )

    logger.info("Opened reception %s at pickup point %s", reception.id, pickup_point.id)
    return reception


@transaction.atomic
def close_reception(*, pvz_id) -> Reception:
    """
    Close the most recent reception of a pickup point.

    Args:
        pvz_id: UUID of the pickup point

    Returns:
        The closed Reception

    Raises:
        InvalidIdentifierError: If pvz_id is not a UUID
        PickupPointNotFoundError: If the pickup point doesn't exist
        ReceptionNotFoundError: If no reception was ever opened there
        ReceptionAlreadyClosedError: If the latest reception is already closed
    """
    pickup_point = lock_pickup_point(pvz_id)

    # The open reception if there is one, else the latest closed one
    reception = (
        Reception.objects
        .filter(pickup_point=pickup_point)
        .order_by('-is_open', '-created_at')
        .first()
    )
    if reception is None:
        raise ReceptionNotFoundError(
            f"Pickup point {pickup_point.id} has no receptions"
        )
    if not reception.is_open:
        raise ReceptionAlreadyClosedError(
            f"Reception {reception.id} is already closed"
        )

    reception.is_open = False
    reception.save(update_fields=['is_open'])

    logger.info("Closed reception %s at pickup point %s", reception.id, pickup_point.id)
    return reception
