import pytest
from decimal import Decimal

from apps.coupons.services import (
    validate_coupon,
    calculate_discount,
    bonus_numbers,
    redeem_coupon,
    CouponNotFoundError,
    CouponInactiveError,
    CouponExpiredError,
    CouponExhaustedError,
)


@pytest.mark.django_db
class TestValidateCoupon:

    def test_lookup_is_case_insensitive(self, bonus_coupon):
        assert validate_coupon(code=' bonus5 ') == bonus_coupon

    def test_not_found(self):
        with pytest.raises(CouponNotFoundError):
            validate_coupon(code='MISSING')

    def test_inactive(self, inactive_coupon):
        with pytest.raises(CouponInactiveError):
            validate_coupon(code=inactive_coupon.code)

    def test_expired(self, expired_coupon):
        with pytest.raises(CouponExpiredError):
            validate_coupon(code=expired_coupon.code)

    def test_exhausted(self, exhausted_coupon):
        with pytest.raises(CouponExhaustedError):
            validate_coupon(code=exhausted_coupon.code)


@pytest.mark.django_db
class TestCouponEffects:

    def test_percentage_discount(self, discount_coupon):
        assert calculate_discount(discount_coupon, Decimal('250.00')) == Decimal('25.00')

    def test_quantity_coupon_has_no_discount(self, bonus_coupon):
        assert calculate_discount(bonus_coupon, Decimal('250.00')) == Decimal('0.00')

    def test_no_coupon(self):
        assert calculate_discount(None, Decimal('250.00')) == Decimal('0.00')
        assert bonus_numbers(None) == 0

    def test_bonus_numbers(self, bonus_coupon, discount_coupon):
        assert bonus_numbers(bonus_coupon) == 5
        assert bonus_numbers(discount_coupon) == 0

    def test_redeem_increments_uses(self, bonus_coupon):
        redeem_coupon(coupon=bonus_coupon)
        redeem_coupon(coupon=bonus_coupon)

        bonus_coupon.refresh_from_db()
        assert bonus_coupon.current_uses == 2
