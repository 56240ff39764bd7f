"""
Raffle management service.

CRUD for raffles and their prize lists, plus sales statistics.
"""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Count

from apps.raffles.models import Raffle, Prize, RaffleStatus

from .exceptions import RaffleNotFoundError, InvalidNumberRangeError

logger = logging.getLogger(__name__)


def get_raffle_by_id(*, raffle_id: UUID) -> Raffle:
    """
    Get a raffle by ID with its prizes prefetched.

    Raises:
        RaffleNotFoundError: If raffle doesn't exist
    """
    try:
        return Raffle.objects.prefetch_related('prizes').get(id=raffle_id)
    except Raffle.DoesNotExist:
        raise RaffleNotFoundError(f"Raffle with ID {raffle_id} not found")


def get_active_raffles():
    """Open raffles, newest first."""
    return (
        Raffle.objects
        .filter(status=RaffleStatus.OPEN)
        .prefetch_related('prizes')
        .order_by('-created_at')
    )


def _check_number_range(min_number: int, max_number: int) -> None:
    if min_number > max_number:
        raise InvalidNumberRangeError(
            f"min_number ({min_number}) must not exceed max_number ({max_number})"
        )


def _replace_prizes(raffle: Raffle, prizes: list) -> None:
    raffle.prizes.all().delete()
    Prize.objects.bulk_create([
        Prize(
            raffle=raffle,
            name=prize['name'],
            number_count=prize.get('number_count', 1),
            order=prize.get('order', position),
        )
        for position, prize in enumerate(prizes, start=1)
    ])


@transaction.atomic
def create_raffle(*, name: str, prizes: Optional[list] = None, **fields) -> Raffle:
    """
    Create a raffle together with its prize list.

    Args:
        name: Raffle name
        prizes: Optional list of dicts with ``name``, ``number_count`` and ``order``
        **fields: Any other Raffle field (dates, number range, media...)

    Raises:
        InvalidNumberRangeError: If min_number > max_number
    """
    raffle = Raffle(name=name, **fields)
    _check_number_range(raffle.min_number, raffle.max_number)
    raffle.save()

    if prizes:
        _replace_prizes(raffle, prizes)

    logger.info("Raffle %s created: %s", raffle.id, raffle.name)
    return get_raffle_by_id(raffle_id=raffle.id)


@transaction.atomic
def update_raffle(*, raffle_id: UUID, prizes: Optional[list] = None, **fields) -> Raffle:
    """
    Update raffle fields. When ``prizes`` is given the prize list is replaced.

    Raises:
        RaffleNotFoundError: If raffle doesn't exist
        InvalidNumberRangeError: If the resulting range is empty
    """
    try:
        raffle = Raffle.objects.select_for_update().get(id=raffle_id)
    except Raffle.DoesNotExist:
        raise RaffleNotFoundError(f"Raffle with ID {raffle_id} not found")

    for field, value in fields.items():
        setattr(raffle, field, value)
    _check_number_range(raffle.min_number, raffle.max_number)
    raffle.save()

    if prizes is not None:
        _replace_prizes(raffle, prizes)

    return get_raffle_by_id(raffle_id=raffle.id)


@transaction.atomic
def delete_raffle(*, raffle_id: UUID) -> None:
    """Delete a raffle; prizes, numbers and vouchers cascade."""
    deleted, _ = Raffle.objects.filter(id=raffle_id).delete()
    if not deleted:
        raise RaffleNotFoundError(f"Raffle with ID {raffle_id} not found")
    logger.info("Raffle %s deleted", raffle_id)


def get_raffle_statistics(*, raffle_id: UUID) -> dict:
    """
    Sales summary for a raffle.

    Returns:
        Dict with total_numbers (capacity), numbers_sold, numbers_remaining,
        percent_sold and participants (distinct number holders).
    """
    raffle = get_raffle_by_id(raffle_id=raffle_id)

    summary = raffle.numbers.aggregate(
        sold=Count('id'),
        participants=Count('user', distinct=True),
    )
    capacity = raffle.capacity
    sold = summary['sold']
    percent = (
        (Decimal(sold) * 100 / Decimal(capacity)).quantize(Decimal('0.1'))
        if capacity else Decimal('0.0')
    )

    return {
        'raffle_id': raffle.id,
        'total_numbers': capacity,
        'numbers_sold': sold,
        'numbers_remaining': max(0, capacity - sold),
        'percent_sold': percent,
        'participants': summary['participants'],
    }
