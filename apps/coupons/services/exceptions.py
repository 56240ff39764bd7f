"""
Domain-specific exceptions for coupons app.
"""


class CouponsServiceError(Exception):
    """Base exception for all coupon service errors."""
    pass


class CouponNotFoundError(CouponsServiceError):
    """Raised when no coupon matches the given code."""
    pass


class CouponInactiveError(CouponsServiceError):
    """Raised when the coupon has been deactivated."""
    pass


class CouponExpiredError(CouponsServiceError):
    """Raised when the coupon's expiry date has passed."""
    pass


class CouponExhaustedError(CouponsServiceError):
    """Raised when the coupon reached its maximum number of uses."""
    pass
