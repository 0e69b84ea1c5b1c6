"""
Pickup point listing queries.

`list_pickup_points` pages over products, not pickup points: the window
`OFFSET limit * (page - 1) LIMIT limit` is applied to the flat
product → reception → pickup point join, and the rows inside the window
are folded back into a pickup point → reception → product tree in one
pass. A pickup point or reception appears only when at least one of its
products falls inside the window.

Reads take no locks and see the latest committed state.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional

from django.db.models import QuerySet

from apps.pvz.models import PickupPoint, Reception, Product

from .exceptions import InvalidPaginationError, InvalidDateRangeError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

# Newest first at every level; ids and positions keep groups contiguous
# and the order total, so equal timestamps cannot interleave groups.
JOIN_ORDERING = (
    '-reception__pickup_point__created_at',
    'reception__pickup_point_id',
    '-reception__created_at',
    'reception_id',
    '-created_at',
    '-position',
)


@dataclass
class ReceptionTree:
    reception: Reception
    products: List[Product] = field(default_factory=list)


@dataclass
class PickupPointTree:
    pickup_point: PickupPoint
    receptions: List[ReceptionTree] = field(default_factory=list)


def _validate_positive(value, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidPaginationError(f"{name} must be a positive integer, got {value!r}")


def product_rows(
    *,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None
) -> QuerySet[Product]:
    """Products created within [start_date, end_date], in tree order."""
    rows = Product.objects.select_related('reception__pickup_point')
    if start_date is not None:
        rows = rows.filter(created_at__gte=start_date)
    if end_date is not None:
        rows = rows.filter(created_at__lte=end_date)
    return rows.order_by(*JOIN_ORDERING)


def group_rows(rows: Iterable[Product]) -> List[PickupPointTree]:
    """
    Fold ordered join rows into a nested tree.

    A new pickup point group starts whenever the pickup point id differs
    from the previous row's; a new reception group whenever the reception
    id does. Rows must already be in JOIN_ORDERING.
    """
    trees: List[PickupPointTree] = []
    current_point: Optional[PickupPointTree] = None
    current_reception: Optional[ReceptionTree] = None

    for product in rows:
        reception = product.reception
        pickup_point = reception.pickup_point

        if current_point is None or current_point.pickup_point.id != pickup_point.id:
            current_point = PickupPointTree(pickup_point=pickup_point)
            trees.append(current_point)
            current_reception = None

        if current_reception is None or current_reception.reception.id != reception.id:
            current_reception = ReceptionTree(reception=reception)
            current_point.receptions.append(current_reception)

        current_reception.products.append(product)

    return trees


def list_pickup_points(
    *,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT
) -> List[PickupPointTree]:
    """
    List pickup points with their receptions and products.

    Args:
        start_date: Inclusive lower bound on product creation time
        end_date: Inclusive upper bound on product creation time
        page: 1-based page over product rows
        limit: Product rows per page

    Returns:
        List of PickupPointTree, newest pickup point first

    Raises:
        InvalidPaginationError: If page or limit is not a positive integer
        InvalidDateRangeError: If start_date is after end_date
    """
    _validate_positive(page, 'page')
    _validate_positive(limit, 'limit')
    if start_date is not None and end_date is not None and start_date > end_date:
        raise InvalidDateRangeError("startDate must not be after endDate")

    offset = limit * (page - 1)
    window = product_rows(start_date=start_date, end_date=end_date)[offset:offset + limit]
    return group_rows(window)


def list_all_pickup_points() -> QuerySet[PickupPoint]:
    """Every pickup point, without receptions, newest first."""
    return PickupPoint.objects.order_by('-created_at', 'id')
