import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.coupons.models import Coupon, CouponType
from apps.numbers.models import RaffleNumber
from apps.raffles.models import Raffle


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
    return Raffle.objects.create(name='Numbers Raffle', total_numbers=1000)


@pytest.fixture
def small_raffle(db):
    """Raffle whose range holds only 25 numbers."""
    return Raffle.objects.create(name='Small Raffle', total_numbers=1000, min_number=1, max_number=25)


@pytest.fixture
def bonus_coupon(db):
    return Coupon.objects.create(code='BONUS5', coupon_type=CouponType.QUANTITY, value=5)


@pytest.fixture
def discount_coupon(db):
    return Coupon.objects.create(code='OFF50', coupon_type=CouponType.PERCENTAGE, value=50)


@pytest.fixture
def participant_numbers(raffle, participant):
    return RaffleNumber.objects.bulk_create([
        RaffleNumber(raffle=raffle, user=participant, number=f'{v:05d}')
        for v in (11, 22, 33)
    ])


@pytest.fixture
def other_numbers(raffle, other_participant):
    return RaffleNumber.objects.bulk_create([
        RaffleNumber(raffle=raffle, user=other_participant, number=f'{v:05d}')
        for v in (44, 55)
    ])
