import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.configuration.models import SystemConfig


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def participant(db):
    return User.objects.create_user(
        cpf='52998224725',
        password='TestPass123!',
        name='Participant',
    )


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        cpf='11144477735',
        password='AdminPass123!',
        name='Admin User',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def participant_client(participant):
    client = APIClient()
    refresh = RefreshToken.for_user(participant)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    refresh = RefreshToken.for_user(admin_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def system_name(db):
    """Create and return the system_name entry."""
    return SystemConfig.objects.create(key='system_name', value='Rifa Teste')
