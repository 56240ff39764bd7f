"""
Domain-specific exceptions for raffles app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class RafflesServiceError(Exception):
    """Base exception for all raffles service errors."""
    pass


class RaffleNotFoundError(RafflesServiceError):
    """Raised when a raffle does not exist."""
    pass


class InvalidNumberRangeError(RafflesServiceError):
    """Raised when min_number/max_number do not describe a usable range."""
    pass


class InvalidResultTypeError(RafflesServiceError):
    """Raised when a draw is requested with an unknown result type."""
    pass


class InvalidManualNumbersError(RafflesServiceError):
    """Raised when manually entered winning numbers are malformed."""
    pass


class NoNumbersIssuedError(RafflesServiceError):
    """Raised when an automatic draw is requested but no numbers were sold."""
    pass


class RaffleAlreadyClosedError(RafflesServiceError):
    """Raised when drawing a raffle that is no longer open."""
    pass
