"""
Coupon validation and redemption.

A coupon is usable when it exists, is active, has not expired and still has
uses left. Redemption happens once, when the voucher carrying it is approved.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from django.db import transaction
from django.db.models import F

from apps.coupons.models import Coupon, CouponType

from .exceptions import (
    CouponNotFoundError,
    CouponInactiveError,
    CouponExpiredError,
    CouponExhaustedError,
)

logger = logging.getLogger(__name__)


def normalize_code(code: str) -> str:
    return (code or '').strip().upper()


def get_coupon_by_code(code: str) -> Optional[Coupon]:
    """Coupon for ``code`` or None; no usability checks."""
    code = normalize_code(code)
    if not code:
        return None
    return Coupon.objects.filter(code=code).first()


def validate_coupon(*, code: str) -> Coupon:
    """
    Return the coupon for ``code`` if it can be used right now.

    Raises:
        CouponNotFoundError: If no coupon has this code
        CouponInactiveError: If the coupon was deactivated
        CouponExpiredError: If the coupon has expired
        CouponExhaustedError: If max_uses has been reached
    """
    coupon = get_coupon_by_code(code)
    if coupon is None:
        raise CouponNotFoundError("Coupon not found")
    if not coupon.is_active:
        raise CouponInactiveError("Coupon is not active")
    if coupon.is_expired:
        raise CouponExpiredError("Coupon has expired")
    if coupon.is_exhausted:
        raise CouponExhaustedError("Coupon has reached its usage limit")
    return coupon


def calculate_discount(coupon: Optional[Coupon], amount: Decimal) -> Decimal:
    """Discount granted by a percentage coupon; zero for any other coupon."""
    if coupon is None or coupon.coupon_type != CouponType.PERCENTAGE:
        return Decimal('0.00')
    discount = Decimal(amount) * Decimal(coupon.value) / Decimal(100)
    return min(Decimal(amount), discount).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


def bonus_numbers(coupon: Optional[Coupon]) -> int:
    """Extra numbers granted by a quantity coupon."""
    if coupon is None or coupon.coupon_type != CouponType.QUANTITY:
        return 0
    return coupon.value


@transaction.atomic
def redeem_coupon(*, coupon: Coupon) -> Coupon:
    """Count one use of ``coupon``."""
    Coupon.objects.filter(id=coupon.id).update(current_uses=F('current_uses') + 1)
    coupon.refresh_from_db(fields=['current_uses'])
    logger.info("Coupon %s redeemed (%s uses)", coupon.code, coupon.current_uses)
    return coupon
