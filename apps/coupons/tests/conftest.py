import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.coupons.models import Coupon, CouponType


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
def bonus_coupon(db):
    """Quantity coupon worth 5 extra numbers."""
    return Coupon.objects.create(code='BONUS5', coupon_type=CouponType.QUANTITY, value=5)


@pytest.fixture
def discount_coupon(db):
    """10% discount coupon."""
    return Coupon.objects.create(code='OFF10', coupon_type=CouponType.PERCENTAGE, value=10)


@pytest.fixture
def expired_coupon(db):
    return Coupon.objects.create(
        code='OLD',
        value=5,
        expires_at=timezone.now() - timedelta(days=1),
    )


@pytest.fixture
def exhausted_coupon(db):
    return Coupon.objects.create(code='USEDUP', value=5, max_uses=2, current_uses=2)


@pytest.fixture
def inactive_coupon(db):
    return Coupon.objects.create(code='OFF', value=5, is_active=False)
