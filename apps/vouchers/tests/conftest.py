import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.coupons.models import Coupon, CouponType
from apps.raffles.models import Raffle
from apps.vouchers.models import Voucher


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
def other_client(other_participant):
    client = APIClient()
    refresh = RefreshToken.for_user(other_participant)
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
    return Raffle.objects.create(name='Voucher Raffle', total_numbers=1000)


@pytest.fixture
def small_raffle(db):
    """Raffle with room for 15 numbers only."""
    return Raffle.objects.create(name='Small Raffle', total_numbers=15)


@pytest.fixture
def bonus_coupon(db):
    return Coupon.objects.create(code='BONUS5', coupon_type=CouponType.QUANTITY, value=5, max_uses=1)


@pytest.fixture
def discount_coupon(db):
    return Coupon.objects.create(code='OFF20', coupon_type=CouponType.PERCENTAGE, value=20)


@pytest.fixture
def pending_voucher(participant, raffle):
    """Pending voucher of 250.00 (20 numbers with default config)."""
    return Voucher.objects.create(
        user=participant,
        raffle=raffle,
        amount_informed=Decimal('250.00'),
        image='https://example.com/receipts/1.jpg',
    )


@pytest.fixture
def other_voucher(other_participant, raffle):
    return Voucher.objects.create(
        user=other_participant,
        raffle=raffle,
        amount_informed=Decimal('100.00'),
        image='https://example.com/receipts/2.jpg',
    )
