"""
Pvz app services layer.

Services contain the reception/product lifecycle rules and the listing
queries. All state-changing operations run in a transaction holding the
pickup point row lock.
"""

from .exceptions import (
    PvzServiceError,
    PvzValidationError,
    InvalidIdentifierError,
    InvalidCityError,
    InvalidProductTypeError,
    InvalidPaginationError,
    InvalidDateRangeError,
    PvzNotFoundError,
    PickupPointNotFoundError,
    ReceptionNotFoundError,
    ProductNotFoundError,
    PvzConflictError,
    PickupPointAlreadyExistsError,
    ReceptionAlreadyOpenError,
    ReceptionAlreadyClosedError,
    NoOpenReceptionError,
)

from .pickup_point_management import (
    create_pickup_point,
)

from .reception_management import (
    open_reception,
    close_reception,
)

from .product_management import (
    add_product,
    delete_last_product,
)

from .pickup_point_listing import (
    PickupPointTree,
    ReceptionTree,
    list_pickup_points,
    list_all_pickup_points,
)


__all__ = [
    # Exceptions
    'PvzServiceError',
    'PvzValidationError',
    'InvalidIdentifierError',
    'InvalidCityError',
    'InvalidProductTypeError',
    'InvalidPaginationError',
    'InvalidDateRangeError',
    'PvzNotFoundError',
    'PickupPointNotFoundError',
    'ReceptionNotFoundError',
    'ProductNotFoundError',
    'PvzConflictError',
    'PickupPointAlreadyExistsError',
    'ReceptionAlreadyOpenError',
    'ReceptionAlreadyClosedError',
    'NoOpenReceptionError',

    # Pickup points
    'create_pickup_point',

    # Receptions
    'open_reception',
    'close_reception',

    # Products
    'add_product',
    'delete_last_product',

    # Listing
    'PickupPointTree',
    'ReceptionTree',
    'list_pickup_points',
    'list_all_pickup_points',
]
