from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from apps.accounts.models import User, Role
from apps.accounts.services import issue_token
from apps.pvz.models import PickupPoint, Reception, City


def client_for(role, subject_id=None):
    """Return an API client carrying a bearer token for role."""
    client = APIClient()
    token = issue_token(subject_id=subject_id, role=role)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def employee(db):
    """Create and return an employee account."""
    return User.objects.create_user(
        email='employee@example.com',
        password='TestPass123!',
        roles=[Role.EMPLOYEE],
    )


@pytest.fixture
def employee_client(employee):
    """API client authenticated as a registered employee."""
    return client_for(Role.EMPLOYEE, employee.id)


@pytest.fixture
def moderator_client(db):
    """API client authenticated through a dummy moderator login."""
    return client_for(Role.MODERATOR)


@pytest.fixture
def pickup_point(db):
    """Create and return a pickup point in Moscow."""
    return PickupPoint.objects.create(
        city=City.MOSCOW,
        created_at=timezone.now() - timedelta(days=1),
    )


@pytest.fixture
def other_pickup_point(db):
    """Create and return a newer pickup point in Kazan."""
    return PickupPoint.objects.create(city=City.KAZAN)


@pytest.fixture
def open_reception(pickup_point):
    """Open reception at pickup_point."""
    return Reception.objects.create(pickup_point=pickup_point, is_open=True)


@pytest.fixture
def closed_reception(pickup_point):
    """Closed reception at pickup_point."""
    return Reception.objects.create(
        pickup_point=pickup_point,
        is_open=False,
        created_at=timezone.now() - timedelta(hours=1),
    )
