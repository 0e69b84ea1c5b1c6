import pytest
from rest_framework.test import APIClient
from apps.accounts.models import User, Role
from apps.accounts.services import issue_token


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
def moderator(db):
    """Create and return a moderator account."""
    return User.objects.create_user(
        email='moderator@example.com',
        password='TestPass123!',
        roles=[Role.MODERATOR],
    )


@pytest.fixture
def employee_token(employee):
    return issue_token(subject_id=employee.id, role=Role.EMPLOYEE)
