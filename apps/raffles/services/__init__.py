"""
Raffles services.

Business logic for raffle management and draw resolution.
"""

from .raffle_management import (
    get_raffle_by_id,
    get_active_raffles,
    create_raffle,
    update_raffle,
    delete_raffle,
    get_raffle_statistics,
)
from .draw import (
    parse_manual_numbers,
    assign_prizes,
    resolve_draw,
    get_winners,
)
from .exceptions import (
    RafflesServiceError,
    RaffleNotFoundError,
    RaffleAlreadyClosedError,
    InvalidNumberRangeError,
    InvalidResultTypeError,
    InvalidManualNumbersError,
    NoNumbersIssuedError,
)

__all__ = [
    # Raffle management
    'get_raffle_by_id',
    'get_active_raffles',
    'create_raffle',
    'update_raffle',
    'delete_raffle',
    'get_raffle_statistics',
    # Draw
    'parse_manual_numbers',
    'assign_prizes',
    'resolve_draw',
    'get_winners',
    # Exceptions
    'RafflesServiceError',
    'RaffleNotFoundError',
    'RaffleAlreadyClosedError',
    'InvalidNumberRangeError',
    'InvalidResultTypeError',
    'InvalidManualNumbersError',
    'NoNumbersIssuedError',
]
