"""
Domain-specific exceptions for the pvz app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.

Exception Hierarchy:
    PvzServiceError (base)
    ├── PvzValidationError          malformed input, never retried
    │   ├── InvalidIdentifierError
    │   ├── InvalidCityError
    │   ├── InvalidProductTypeError
    │   ├── InvalidPaginationError
    │   └── InvalidDateRangeError
    ├── PvzNotFoundError            referenced entity does not exist
    │   ├── PickupPointNotFoundError
    │   ├── ReceptionNotFoundError
    │   └── ProductNotFoundError
    └── PvzConflictError            an invariant would be violated
        ├── PickupPointAlreadyExistsError
        ├── ReceptionAlreadyOpenError
        ├── ReceptionAlreadyClosedError
        └── NoOpenReceptionError
"""


class PvzServiceError(Exception):
    """Base exception for all pvz service errors."""
    pass


# =============================================================================
# Validation
# =============================================================================

class PvzValidationError(PvzServiceError):
    """Raised when input is malformed."""
    pass


class InvalidIdentifierError(PvzValidationError):
    """Raised when an identifier is not a well-formed UUID."""
    pass


class InvalidCityError(PvzValidationError):
    """Raised when a city is not one of the served cities."""
    pass


class InvalidProductTypeError(PvzValidationError):
    """Raised when a product type is not recognized."""
    pass


class InvalidPaginationError(PvzValidationError):
    """Raised when page or limit is not a positive integer."""
    pass


class InvalidDateRangeError(PvzValidationError):
    """Raised when the start date is after the end date."""
    pass


# =============================================================================
# Not found
# =============================================================================

class PvzNotFoundError(PvzServiceError):
    """Raised when a referenced entity does not exist."""
    pass


class PickupPointNotFoundError(PvzNotFoundError):
    """Raised when a pickup point does not exist."""
    pass


class ReceptionNotFoundError(PvzNotFoundError):
    """Raised when a pickup point has never had a reception."""
    pass


class ProductNotFoundError(PvzNotFoundError):
    """Raised when the open reception has no products to remove."""
    pass


# =============================================================================
# Conflicts
# =============================================================================

class PvzConflictError(PvzServiceError):
    """Raised when an operation would break a lifecycle invariant."""
    pass


class PickupPointAlreadyExistsError(PvzConflictError):
    """Raised when a caller-supplied pickup point id is taken."""
    pass


class ReceptionAlreadyOpenError(PvzConflictError):
    """Raised when opening a reception while another one is open."""
    pass


class ReceptionAlreadyClosedError(PvzConflictError):
    """Raised when closing a reception that is already closed."""
    pass


class NoOpenReceptionError(PvzConflictError):
    """Raised when a product operation finds no open reception."""
    pass
