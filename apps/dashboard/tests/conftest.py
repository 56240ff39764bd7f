import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.numbers.models import RaffleNumber
from apps.raffles.models import Raffle
from apps.vouchers.models import Voucher, VoucherStatus


@pytest.fixture
def participant(db):
    return User.objects.create_user(
        cpf='52998224725',
        password='TestPass123!',
        name='Alice',
    )


@pytest.fixture
def other_participant(db):
    return User.objects.create_user(
        cpf='12345678909',
        password='TestPass123!',
        name='Bruno',
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
    return Raffle.objects.create(name='Dashboard Raffle', total_numbers=200)


@pytest.fixture
def activity(raffle, participant, other_participant):
    """
    Alice: approved 300 (read 350, discount 50) and rejected 100.
    Bruno: approved 100 and pending 200. Four numbers issued.
    """
    Voucher.objects.create(
        user=participant, raffle=raffle, amount_informed=Decimal('300.00'),
        amount_read=Decimal('350.00'), discount_applied=Decimal('50.00'),
        status=VoucherStatus.APPROVED, image='a1.jpg',
    )
    Voucher.objects.create(
        user=participant, raffle=raffle, amount_informed=Decimal('100.00'),
        status=VoucherStatus.REJECTED, image='a2.jpg',
    )
    Voucher.objects.create(
        user=other_participant, raffle=raffle, amount_informed=Decimal('100.00'),
        status=VoucherStatus.APPROVED, image='b1.jpg',
    )
    Voucher.objects.create(
        user=other_participant, raffle=raffle, amount_informed=Decimal('200.00'),
        status=VoucherStatus.PENDING, image='b2.jpg',
    )
    RaffleNumber.objects.bulk_create([
        RaffleNumber(raffle=raffle, user=participant, number=f'{v:05d}')
        for v in range(1, 5)
    ])
