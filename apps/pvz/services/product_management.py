"""
Product management service.

Products are an append-only log per reception with LIFO removal: only
the most recently added product of the open reception can be deleted.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Max

from apps.pvz.models import Product, ProductType

from .exceptions import (
    InvalidProductTypeError,
    NoOpenReceptionError,
    ProductNotFoundError,
)
from .lookups import lock_pickup_point, get_open_reception, resolve_creator

logger = logging.getLogger(__name__)


def _require_open_reception(pickup_point):
    reception = get_open_reception(pickup_point)
    if reception is None:
        raise NoOpenReceptionError(
            f"Pickup point {pickup_point.id} has no open reception"
        )
    return reception


@transaction.atomic
def add_product(
    *,
    pvz_id,
    product_type: str,
    created_by_id: Optional[UUID] = None
) -> Product:
    """
    Append a product to the open reception of a pickup point.

    Args:
        pvz_id: UUID of the pickup point
        product_type: One of electronics, clothing, shoes
        created_by_id: Account adding the product, for attribution

    Returns:
        Created Product instance

    Raises:
        InvalidProductTypeError: If product_type is not recognized
        InvalidIdentifierError: If pvz_id is not a UUID
        PickupPointNotFoundError: If the pickup point doesn't exist
        NoOpenReceptionError: If no reception is open
    """
    if product_type not in ProductType.values:
        raise InvalidProductTypeError(
            f"Invalid product type: {product_type!r}. "
            f"Valid options: {', '.join(ProductType.values)}"
        )

    pickup_point = lock_pickup_point(pvz_id)
    reception = _require_open_reception(pickup_point)

    last_position = (
        reception.products.aggregate(last=Max('position'))['last'] or 0
    )
    product = Product.objects.create(
        reception=reception,
        type=product_type,
        position=last_position + 1,
        created_by_id=resolve_creator(created_by_id),
    )

    logger.info(
        "Added %s product %s to reception %s", product.type, product.id, reception.id
    )
    return product


@transaction.atomic
def delete_last_product(*, pvz_id) -> Product:
    """
    Remove the most recently added product of the open reception.

    Args:
        pvz_id: UUID of the pickup point

    Returns:
        The deleted Product (no longer in the database)

    Raises:
        InvalidIdentifierError: If pvz_id is not a UUID
        PickupPointNotFoundError: If the pickup point doesn't exist
        NoOpenReceptionError: If no reception is open
        ProductNotFoundError: If the open reception has no products
    """
    pickup_point = lock_pickup_point(pvz_id)
    reception = _require_open_reception(pickup_point)

    product = (
        reception.products
        .order_by('-created_at', '-position')
        .first()
    )
    if product is None:
        raise ProductNotFoundError(f"Reception {reception.id} has no products")

    product_id = product.id
    product.delete()
    # delete() clears the pk; keep it for callers reporting what was removed
    product.id = product_id

    logger.info("Deleted product %s from reception %s", product_id, reception.id)
    return product
