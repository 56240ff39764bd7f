"""
Draw resolution service.

Closes a raffle and stores its winning numbers, chosen in one of three ways:

- ``manual``: numbers typed in by an administrator
- ``auto``: a uniform sample of the numbers already issued for the raffle
- ``federal``: random 5-digit values standing in for a federal lottery
  result (no external integration)

Winning numbers map to prize slots by position: each prize, in ``order``,
contributes ``number_count`` consecutive slots.
"""

import logging
import secrets
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.numbers.models import RaffleNumber
from apps.raffles.models import Raffle, RaffleStatus, ResultType, NUMBER_WIDTH

from .exceptions import (
    RaffleNotFoundError,
    RaffleAlreadyClosedError,
    InvalidResultTypeError,
    InvalidManualNumbersError,
    NoNumbersIssuedError,
)

logger = logging.getLogger(__name__)

FALLBACK_PRIZE_NAME = 'Main Prize'
FEDERAL_MIN = 10000
FEDERAL_MAX = 99999

_random = secrets.SystemRandom()


def parse_manual_numbers(raw) -> list[str]:
    """
    Parse admin input into zero-padded number strings.

    Accepts a comma-separated string or a list of strings. Entries are
    trimmed and empty ones dropped.

    Raises:
        InvalidManualNumbersError: If nothing remains or an entry is not a
            number of at most five digits
    """
    if isinstance(raw, str):
        parts = raw.split(',')
    else:
        parts = list(raw or [])

    numbers = [str(part).strip() for part in parts]
    numbers = [number for number in numbers if number]

    if not numbers:
        raise InvalidManualNumbersError("At least one winning number is required")

    for number in numbers:
        if not number.isdigit() or len(number) > NUMBER_WIDTH:
            raise InvalidManualNumbersError(
                f"Invalid winning number '{number}': expected up to {NUMBER_WIDTH} digits"
            )

    return [number.zfill(NUMBER_WIDTH) for number in numbers]


def _prize_slots(raffle: Raffle) -> list:
    slots = []
    for prize in raffle.prizes.order_by('order', 'created_at'):
        slots.extend([prize] * prize.number_count)
    return slots


def assign_prizes(raffle: Raffle, winning_numbers: list[str]) -> list[dict]:
    """
    Pair each winning number with its prize slot and owner.

    Positions past the configured slots fall back to the main prize name.
    """
    slots = _prize_slots(raffle)
    owners = {
        entry.number: entry.user
        for entry in (
            RaffleNumber.objects
            .filter(raffle=raffle, number__in=winning_numbers)
            .select_related('user')
        )
    }

    winners = []
    for position, number in enumerate(winning_numbers):
        prize = slots[position] if position < len(slots) else None
        winners.append({
            'position': position + 1,
            'number': number,
            'prize_name': prize.name if prize else FALLBACK_PRIZE_NAME,
            'prize_order': prize.order if prize else 1,
            'is_main': prize.is_main if prize else True,
            'user': owners.get(number),
        })
    return winners


def _choose_numbers(raffle: Raffle, result_type: str, manual_numbers) -> list[str]:
    if result_type == ResultType.MANUAL:
        return parse_manual_numbers(manual_numbers)

    winners_needed = raffle.total_winners()

    if result_type == ResultType.AUTO:
        issued = list(raffle.numbers.values_list('number', flat=True))
        _random.shuffle(issued)
        return issued[:min(winners_needed, len(issued))]

    if result_type == ResultType.FEDERAL:
        return [
            str(_random.randint(FEDERAL_MIN, FEDERAL_MAX))
            for _ in range(winners_needed)
        ]

    raise InvalidResultTypeError(
        f"Unknown result type '{result_type}'. "
        f"Expected one of: {', '.join(ResultType.values)}"
    )


@transaction.atomic
def resolve_draw(
    *,
    raffle_id: UUID,
    result_type: str,
    manual_numbers=None,
    resolved_by: Optional[User] = None
) -> tuple[Raffle, list[dict]]:
    """
    Draw the winners of an open raffle and close it.

    The raffle row is locked for the whole operation so no number can be
    issued while the draw is being resolved.

    Args:
        raffle_id: Raffle to draw
        result_type: 'manual', 'auto' or 'federal'
        manual_numbers: Comma-separated string or list (manual mode only)
        resolved_by: Administrator performing the draw (for logging)

    Returns:
        Tuple of (closed raffle, winner entries)

    Raises:
        RaffleNotFoundError: If raffle doesn't exist
        RaffleAlreadyClosedError: If raffle is not open
        NoNumbersIssuedError: If no number was ever issued for the raffle
        InvalidResultTypeError: If result_type is unknown
        InvalidManualNumbersError: If manual input is malformed
    """
    try:
        raffle = Raffle.objects.select_for_update().get(id=raffle_id)
    except Raffle.DoesNotExist:
        raise RaffleNotFoundError(f"Raffle with ID {raffle_id} not found")

    if raffle.status != RaffleStatus.OPEN:
        raise RaffleAlreadyClosedError("Raffle is already closed")

    if not raffle.numbers.exists():
        raise NoNumbersIssuedError("No numbers have been issued for this raffle")

    winning_numbers = _choose_numbers(raffle, result_type, manual_numbers)

    raffle.winning_numbers = winning_numbers
    raffle.result_type = result_type
    raffle.status = RaffleStatus.CLOSED
    raffle.end_date = timezone.now()
    raffle.save(update_fields=[
        'winning_numbers', 'result_type', 'status', 'end_date', 'updated_at'
    ])

    logger.info(
        "Raffle %s drawn (%s) by %s: %s",
        raffle.id, result_type, getattr(resolved_by, 'id', None), ', '.join(winning_numbers)
    )
    return raffle, assign_prizes(raffle, winning_numbers)


def get_winners(*, raffle_id: UUID) -> list[dict]:
    """Winner entries for a drawn raffle; empty before the draw."""
    try:
        raffle = Raffle.objects.get(id=raffle_id)
    except Raffle.DoesNotExist:
        raise RaffleNotFoundError(f"Raffle with ID {raffle_id} not found")
    return assign_prizes(raffle, list(raffle.winning_numbers or []))
