"""
Raffle number generation service.

Converts deposited amounts into raffle numbers and issues them:

    blocks = floor(effective_amount / block_value)
    count  = blocks * numbers_per_block + coupon bonus

Numbers are drawn without replacement from the raffle's range, skipping
numbers already issued, using the operating system's CSPRNG. Issuance locks
the raffle row so concurrent approvals cannot oversell it.
"""

import logging
import secrets
from decimal import Decimal
from typing import Iterable, Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.configuration.services import get_block_value, get_numbers_per_block
from apps.coupons.services import validate_coupon, calculate_discount, bonus_numbers
from apps.numbers.models import RaffleNumber
from apps.raffles.models import Raffle, NUMBER_WIDTH

from .exceptions import (
    RaffleNotFoundError,
    RaffleClosedError,
    ParticipantNotFoundError,
    InsufficientNumbersError,
)

logger = logging.getLogger(__name__)

_random = secrets.SystemRandom()


def calculate_number_count(
    *,
    effective_amount: Decimal,
    block_value: Decimal,
    numbers_per_block: int,
    bonus: int = 0
) -> int:
    """Numbers earned by an amount, e.g. 250 with blocks of 100 x 10 gives 20."""
    if effective_amount <= 0:
        blocks = 0
    else:
        blocks = int(Decimal(effective_amount) // Decimal(block_value))
    return blocks * numbers_per_block + bonus


def format_number(value: int) -> str:
    return str(value).zfill(NUMBER_WIDTH)


def draw_unique_numbers(
    *,
    count: int,
    min_number: int,
    max_number: int,
    taken: Iterable[str] = ()
) -> list[str]:
    """
    Pick ``count`` distinct numbers in [min_number, max_number] not in ``taken``.

    Raises:
        InsufficientNumbersError: If the range has fewer free numbers than ``count``
    """
    taken = set(taken)
    free_total = (max_number - min_number + 1) - sum(
        1 for number in taken if min_number <= int(number) <= max_number
    )
    if count > free_total:
        raise InsufficientNumbersError(remaining=max(0, free_total), requested=count)

    # Sparse raffles: rejection sampling. Dense ones: sample the free pool.
    if count * 4 < free_total:
        chosen = set()
        while len(chosen) < count:
            candidate = format_number(_random.randint(min_number, max_number))
            if candidate not in taken:
                chosen.add(candidate)
        result = list(chosen)
        _random.shuffle(result)
        return result

    candidates = (format_number(value) for value in range(min_number, max_number + 1))
    pool = [number for number in candidates if number not in taken]
    return _random.sample(pool, count)


def _lock_open_raffle(raffle_id: UUID) -> Raffle:
    try:
        raffle = Raffle.objects.select_for_update().get(id=raffle_id)
    except Raffle.DoesNotExist:
        raise RaffleNotFoundError(f"Raffle with ID {raffle_id} not found")
    if not raffle.is_open:
        raise RaffleClosedError("Raffle is not open")
    return raffle


def get_remaining_numbers(raffle: Raffle) -> int:
    return max(0, raffle.capacity - raffle.numbers.count())


@transaction.atomic
def issue_numbers(
    *,
    raffle_id: UUID,
    user: User,
    count: int,
    voucher=None
) -> list[RaffleNumber]:
    """
    Issue ``count`` new numbers of a raffle to ``user``.

    Must be the only path that creates RaffleNumber rows: it holds the raffle
    row lock while checking capacity and inserting.

    Args:
        raffle_id: Raffle to issue from
        user: Number holder
        count: How many numbers to issue (0 issues nothing)
        voucher: Optional voucher the numbers were bought with

    Returns:
        The created RaffleNumber instances

    Raises:
        RaffleNotFoundError: If raffle doesn't exist
        RaffleClosedError: If raffle is not open
        InsufficientNumbersError: If capacity would be exceeded
    """
    raffle = _lock_open_raffle(raffle_id)

    if count <= 0:
        return []

    taken = list(raffle.numbers.values_list('number', flat=True))
    remaining = max(0, raffle.capacity - len(taken))
    if count > remaining:
        raise InsufficientNumbersError(remaining=remaining, requested=count)

    chosen = draw_unique_numbers(
        count=count,
        min_number=raffle.min_number,
        max_number=raffle.max_number,
        taken=taken,
    )
    numbers = RaffleNumber.objects.bulk_create([
        RaffleNumber(user=user, raffle=raffle, voucher=voucher, number=number)
        for number in chosen
    ])

    logger.info(
        "Issued %d numbers of raffle %s to user %s (%d remaining)",
        len(numbers), raffle.id, user.id, remaining - len(numbers)
    )
    return numbers


def generate_numbers_for_amount(
    *,
    raffle_id: UUID,
    user_id: UUID,
    amount: Decimal,
    coupon_code: str = '',
    discount_applied: Optional[Decimal] = None
) -> list[RaffleNumber]:
    """
    Issue the numbers an amount buys, outside the voucher flow.

    A percentage coupon's discount is computed unless ``discount_applied`` is
    given; a quantity coupon adds its bonus. Coupon usage is not counted here.

    Raises:
        ParticipantNotFoundError: If user doesn't exist
        CouponsServiceError: If coupon_code is given but unusable
        plus everything issue_numbers raises
    """
    try:
        user = User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise ParticipantNotFoundError(f"User with ID {user_id} not found")

    coupon = validate_coupon(code=coupon_code) if coupon_code else None
    if discount_applied is None:
        discount_applied = calculate_discount(coupon, amount)

    count = calculate_number_count(
        effective_amount=max(Decimal('0'), Decimal(amount) - Decimal(discount_applied)),
        block_value=get_block_value(),
        numbers_per_block=get_numbers_per_block(),
        bonus=bonus_numbers(coupon),
    )
    return issue_numbers(raffle_id=raffle_id, user=user, count=count)
