"""
Voucher submission and review service.

A participant submits a voucher for an open raffle; an administrator then
approves it (issuing raffle numbers) or rejects it. Approval is a single
transaction: if numbers cannot be issued the voucher stays pending.
"""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.configuration.services import (
    get_block_value,
    get_numbers_per_block,
    get_min_deposit_amount,
)
from apps.coupons.models import CouponType
from apps.coupons.services import (
    get_coupon_by_code,
    validate_coupon,
    calculate_discount,
    bonus_numbers,
    redeem_coupon,
    CouponsServiceError,
)
from apps.numbers.services import (
    calculate_number_count,
    get_remaining_numbers,
    issue_numbers,
)
from apps.raffles.models import Raffle
from apps.vouchers.models import Voucher, VoucherStatus

from .exceptions import (
    VoucherNotFoundError,
    VoucherAlreadyReviewedError,
    RaffleUnavailableError,
    DepositTooLowError,
    InvalidCouponError,
    NotEnoughNumbersLeftError,
)

logger = logging.getLogger(__name__)

DEFAULT_REJECTION_RESPONSE = 'Voucher rejected by administrator'


def get_voucher_by_id(*, voucher_id: UUID) -> Voucher:
    try:
        return Voucher.objects.select_related('user', 'raffle', 'reviewed_by').get(id=voucher_id)
    except Voucher.DoesNotExist:
        raise VoucherNotFoundError(f"Voucher with ID {voucher_id} not found")


def projected_number_count(*, amount: Decimal, discount: Decimal, coupon=None) -> int:
    """Numbers a voucher would earn if approved as submitted."""
    return calculate_number_count(
        effective_amount=max(Decimal('0'), amount - discount),
        block_value=get_block_value(),
        numbers_per_block=get_numbers_per_block(),
        bonus=bonus_numbers(coupon),
    )


@transaction.atomic
def submit_voucher(
    *,
    user: User,
    raffle_id: UUID,
    amount_informed: Decimal,
    image: str,
    coupon_code: str = ''
) -> Voucher:
    """
    Create a pending voucher.

    Raises:
        RaffleUnavailableError: If raffle is missing or closed
        DepositTooLowError: If amount is below min_deposit_amount
        InvalidCouponError: If coupon_code is given but unusable
        NotEnoughNumbersLeftError: If the raffle cannot cover the projected numbers
    """
    try:
        raffle = Raffle.objects.get(id=raffle_id)
    except Raffle.DoesNotExist:
        raise RaffleUnavailableError(f"Raffle with ID {raffle_id} not found", missing=True)
    if not raffle.is_open:
        raise RaffleUnavailableError("Raffle is not accepting vouchers")

    min_deposit = get_min_deposit_amount()
    if amount_informed < min_deposit:
        raise DepositTooLowError(f"Minimum deposit is {min_deposit}")

    coupon = None
    if coupon_code:
        try:
            coupon = validate_coupon(code=coupon_code)
        except CouponsServiceError as e:
            raise InvalidCouponError(str(e))

    discount = calculate_discount(coupon, amount_informed)
    requested = projected_number_count(amount=amount_informed, discount=discount, coupon=coupon)
    remaining = get_remaining_numbers(raffle)
    if requested > remaining:
        raise NotEnoughNumbersLeftError(remaining=remaining, requested=requested)

    voucher = Voucher.objects.create(
        user=user,
        raffle=raffle,
        amount_informed=amount_informed,
        image=image,
        coupon_code=coupon.code if coupon else '',
        discount_applied=discount,
    )
    logger.info(
        "Voucher %s submitted by user %s for raffle %s (%s)",
        voucher.id, user.id, raffle.id, amount_informed
    )
    return voucher


def _lock_pending_voucher(voucher_id: UUID) -> Voucher:
    try:
        voucher = Voucher.objects.select_for_update().get(id=voucher_id)
    except Voucher.DoesNotExist:
        raise VoucherNotFoundError(f"Voucher with ID {voucher_id} not found")
    if voucher.status != VoucherStatus.PENDING:
        raise VoucherAlreadyReviewedError(f"Voucher has already been {voucher.status}")
    return voucher


@transaction.atomic
def approve_voucher(
    *,
    voucher_id: UUID,
    approved_by: User,
    amount_read: Optional[Decimal] = None
) -> tuple[Voucher, list]:
    """
    Approve a pending voucher and issue its raffle numbers.

    The coupon recorded at submission is honored even if it has since been
    deactivated or exhausted; its usage is counted once here. A percentage
    discount is recomputed when the admin corrects the amount.

    Args:
        voucher_id: Voucher to approve
        approved_by: Reviewing administrator
        amount_read: Amount confirmed by the admin (defaults to amount_informed)

    Returns:
        Tuple of (approved voucher, issued RaffleNumber list)

    Raises:
        VoucherNotFoundError: If voucher doesn't exist
        VoucherAlreadyReviewedError: If voucher is not pending
        InvalidCouponError: If the recorded coupon has been deleted
        NumbersServiceError: If the raffle is missing, closed or out of numbers
    """
    voucher = _lock_pending_voucher(voucher_id)

    if amount_read is not None:
        voucher.amount_read = amount_read

    coupon = None
    if voucher.coupon_code:
        coupon = get_coupon_by_code(voucher.coupon_code)
        if coupon is None:
            raise InvalidCouponError(
                f"Coupon {voucher.coupon_code} recorded on this voucher no longer exists"
            )
    if coupon is not None and coupon.coupon_type == CouponType.PERCENTAGE:
        voucher.discount_applied = calculate_discount(coupon, voucher.base_amount)

    count = calculate_number_count(
        effective_amount=voucher.effective_amount,
        block_value=get_block_value(),
        numbers_per_block=get_numbers_per_block(),
        bonus=bonus_numbers(coupon),
    )
    numbers = issue_numbers(
        raffle_id=voucher.raffle_id,
        user=voucher.user,
        count=count,
        voucher=voucher,
    )

    if coupon is not None:
        redeem_coupon(coupon=coupon)

    voucher.status = VoucherStatus.APPROVED
    voucher.reviewed_by = approved_by
    voucher.reviewed_at = timezone.now()
    voucher.save()

    logger.info(
        "Voucher %s approved by %s: %d numbers issued",
        voucher.id, approved_by.id, len(numbers)
    )
    return voucher, numbers


@transaction.atomic
def reject_voucher(
    *,
    voucher_id: UUID,
    rejected_by: User,
    admin_response: str = ''
) -> Voucher:
    """
    Reject a pending voucher. No numbers are issued.

    Raises:
        VoucherNotFoundError: If voucher doesn't exist
        VoucherAlreadyReviewedError: If voucher is not pending
    """
    voucher = _lock_pending_voucher(voucher_id)

    voucher.status = VoucherStatus.REJECTED
    voucher.admin_response = admin_response or DEFAULT_REJECTION_RESPONSE
    voucher.reviewed_by = rejected_by
    voucher.reviewed_at = timezone.now()
    voucher.save()

    logger.info("Voucher %s rejected by %s", voucher.id, rejected_by.id)
    return voucher
