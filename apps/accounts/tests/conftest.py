import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test participant."""
    return User.objects.create_user(
        cpf='52998224725',
        password='TestPass123!',
        name='Test User',
        phone='11987654321',
    )


@pytest.fixture
def other_user(db):
    """Create and return another participant."""
    return User.objects.create_user(
        cpf='12345678909',
        password='OtherPass123!',
        name='Other User',
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        cpf='39053344705',
        password='TestPass123!',
        name='Inactive User',
        is_active=False,
    )


@pytest.fixture
def admin_user(db):
    """Create and return an administrator."""
    return User.objects.create_user(
        cpf='11144477735',
        password='AdminPass123!',
        name='Admin User',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an API client authenticated as the participant."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def admin_client(admin_user):
    """Return an API client authenticated as the administrator."""
    client = APIClient()
    refresh = RefreshToken.for_user(admin_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client
