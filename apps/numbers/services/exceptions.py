"""
Domain-specific exceptions for numbers app.
"""


class NumbersServiceError(Exception):
    """Base exception for all number issuance errors."""
    pass


class RaffleNotFoundError(NumbersServiceError):
    """Raised when the target raffle does not exist."""
    pass


class RaffleClosedError(NumbersServiceError):
    """Raised when numbers are requested for a raffle that is not open."""
    pass


class ParticipantNotFoundError(NumbersServiceError):
    """Raised when numbers are requested for an unknown user."""
    pass


class InsufficientNumbersError(NumbersServiceError):
    """Raised when a raffle cannot supply the requested amount of numbers."""

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
