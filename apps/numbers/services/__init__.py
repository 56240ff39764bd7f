"""
Numbers services.

Conversion of deposits into raffle numbers and their issuance.
"""

from .number_generation import (
    calculate_number_count,
    format_number,
    draw_unique_numbers,
    get_remaining_numbers,
    issue_numbers,
    generate_numbers_for_amount,
)
from .exceptions import (
    NumbersServiceError,
    RaffleNotFoundError,
    RaffleClosedError,
    ParticipantNotFoundError,
    InsufficientNumbersError,
)

__all__ = [
    'calculate_number_count',
    'format_number',
    'draw_unique_numbers',
    'get_remaining_numbers',
    'issue_numbers',
    'generate_numbers_for_amount',
    # Exceptions
    'NumbersServiceError',
    'RaffleNotFoundError',
    'RaffleClosedError',
    'ParticipantNotFoundError',
    'InsufficientNumbersError',
]
