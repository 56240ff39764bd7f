"""
Domain-specific exceptions for vouchers app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class VouchersServiceError(Exception):
    """Base exception for all voucher service errors."""
    pass


class VoucherNotFoundError(VouchersServiceError):
    """Raised when a voucher does not exist."""
    pass


class VoucherAlreadyReviewedError(VouchersServiceError):
    """Raised when approving or rejecting a voucher that is not pending."""
    pass


class RaffleUnavailableError(VouchersServiceError):
    """Raised when a voucher targets a missing or closed raffle."""

    def __init__(self, message, *, missing=False):
        self.missing = missing
        super().__init__(message)


class DepositTooLowError(VouchersServiceError):
    """Raised when the informed amount is below the minimum deposit."""
    pass


class InvalidCouponError(VouchersServiceError):
    """Raised when the coupon on a voucher cannot be used."""
    pass


class NotEnoughNumbersLeftError(VouchersServiceError):
    """Raised when a voucher would buy more numbers than the raffle has left."""

    def __init__(self, *, remaining: int, requested: int):
        self.remaining = remaining
        self.requested = requested
        super().__init__(
            f"Not enough numbers left in this raffle: "
            f"{requested} requested, {remaining} remaining"
        )

    @property
    def details(self) -> dict:
        return {'remaining': self.remaining, 'requested': self.requested}
