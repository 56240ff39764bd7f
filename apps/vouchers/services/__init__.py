"""
Vouchers services.

Voucher submission and administrator review.
"""

from .voucher_review import (
    DEFAULT_REJECTION_RESPONSE,
    get_voucher_by_id,
    projected_number_count,
    submit_voucher,
    approve_voucher,
    reject_voucher,
)
from .exceptions import (
    VouchersServiceError,
    VoucherNotFoundError,
    VoucherAlreadyReviewedError,
    RaffleUnavailableError,
    DepositTooLowError,
    InvalidCouponError,
    NotEnoughNumbersLeftError,
)

__all__ = [
    'DEFAULT_REJECTION_RESPONSE',
    'get_voucher_by_id',
    'projected_number_count',
    'submit_voucher',
    'approve_voucher',
    'reject_voucher',
    # Exceptions
    'VouchersServiceError',
    'VoucherNotFoundError',
    'VoucherAlreadyReviewedError',
    'RaffleUnavailableError',
    'DepositTooLowError',
    'InvalidCouponError',
    'NotEnoughNumbersLeftError',
]
