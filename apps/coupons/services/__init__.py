"""
Coupons services.
"""

from .coupon_validation import (
    normalize_code,
    get_coupon_by_code,
    validate_coupon,
    calculate_discount,
    bonus_numbers,
    redeem_coupon,
)
from .exceptions import (
    CouponsServiceError,
    CouponNotFoundError,
    CouponInactiveError,
    CouponExpiredError,
    CouponExhaustedError,
)

__all__ = [
    'normalize_code',
    'get_coupon_by_code',
    'validate_coupon',
    'calculate_discount',
    'bonus_numbers',
    'redeem_coupon',
    # Exceptions
    'CouponsServiceError',
    'CouponNotFoundError',
    'CouponInactiveError',
    'CouponExpiredError',
    'CouponExhaustedError',
]
