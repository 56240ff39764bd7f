import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.numbers.models import RaffleNumber
from apps.raffles.models import Raffle, Prize


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def participant(db):
    return User.objects.create_user(
        cpf='52998224725',
        password='TestPass123!',
        name='Participant One',
    )


@pytest.fixture
def other_participant(db):
    return User.objects.create_user(
        cpf='12345678909',
        password='TestPass123!',
        name='Participant Two',
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
def raffle(db):
    """Open raffle with a main prize and a two-slot second prize."""
    raffle = Raffle.objects.create(name='Summer Raffle', total_numbers=100)
    Prize.objects.create(raffle=raffle, name='Car', number_count=1, order=1)
    Prize.objects.create(raffle=raffle, name='Bike', number_count=2, order=2)
    return raffle


@pytest.fixture
def raffle_without_prizes(db):
    return Raffle.objects.create(name='Plain Raffle', total_numbers=50)


@pytest.fixture
def sold_numbers(raffle, participant, other_participant):
    """Five numbers held by participant and three by other_participant."""
    numbers = [
        RaffleNumber(raffle=raffle, user=participant, number=f'{value:05d}')
        for value in range(1, 6)
    ] + [
        RaffleNumber(raffle=raffle, user=other_participant, number=f'{value:05d}')
        for value in range(6, 9)
    ]
    return RaffleNumber.objects.bulk_create(numbers)
