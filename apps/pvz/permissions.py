"""
Role-based access policy for pickup point operations.

`authorize` is a pure function over (role, operation) so it can be
checked without a request. `RolePolicyPermission` applies it in DRF
views, which declare the operation each HTTP method performs:

    class PickupPointListCreateView(APIView):
        permission_classes = [IsAuthenticated, RolePolicyPermission]
        policy_operations = {
            'GET': Operation.LIST_PICKUP_POINTS,
            'POST': Operation.CREATE_PICKUP_POINT,
        }

The lifecycle services never check roles themselves.
"""

from django.db import models
from rest_framework.permissions import BasePermission

from apps.accounts.models import Role


class Operation(models.TextChoices):
    CREATE_PICKUP_POINT = 'create_pickup_point', 'Create pickup point'
    LIST_PICKUP_POINTS = 'list_pickup_points', 'List pickup points'
    OPEN_RECEPTION = 'open_reception', 'Open reception'
    CLOSE_RECEPTION = 'close_reception', 'Close reception'
    ADD_PRODUCT = 'add_product', 'Add product'
    DELETE_LAST_PRODUCT = 'delete_last_product', 'Delete last product'


POLICY = {
    Role.MODERATOR: frozenset({
        Operation.CREATE_PICKUP_POINT,
        Operation.LIST_PICKUP_POINTS,
    }),
    Role.EMPLOYEE: frozenset({
        Operation.LIST_PICKUP_POINTS,
        Operation.OPEN_RECEPTION,
        Operation.CLOSE_RECEPTION,
        Operation.ADD_PRODUCT,
        Operation.DELETE_LAST_PRODUCT,
    }),
}


def authorize(role, operation) -> bool:
    """Return True if role may perform operation; unknown input is denied."""
    try:
        role = Role(role)
        operation = Operation(operation)
    except ValueError:
        return False
    return operation in POLICY.get(role, frozenset())


class RolePolicyPermission(BasePermission):
    """
    Permission: the token's role must allow the view's operation.

    Views without an operation for the request method are denied.
    """

    message = 'Your role does not allow this action.'

    def has_permission(self, request, view):
        operations = getattr(view, 'policy_operations', {})
        operation = operations.get(request.method)
        if operation is None:
            return False
        return authorize(getattr(request.user, 'role', None), operation)
