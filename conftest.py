import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User


def client_for(user):
    """Return a fresh API client authenticated as ``user`` with a JWT."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        display_name='Test User',
    )


@pytest.fixture
def other_user(db):
    """Create and return another tenant."""
    return User.objects.create_user(
        email='otheruser@example.com',
        password='OtherPass123!',
        display_name='Other User',
    )


@pytest.fixture
def admin_user(db):
    """Create and return an administrator."""
    return User.objects.create_user(
        email='admin@example.com',
        password='AdminPass123!',
        display_name='Admin',
        is_staff=True,
    )


@pytest.fixture
def authenticated_client(user):
    """Return an authenticated API client using JWT."""
    return client_for(user)


@pytest.fixture
def other_client(other_user):
    """Return API client authenticated as the other tenant."""
    return client_for(other_user)


@pytest.fixture
def admin_client(admin_user):
    """Return API client authenticated as an administrator."""
    return client_for(admin_user)
