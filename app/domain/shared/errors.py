"""
Base error taxonomy shared by every bounded context.

Context-specific errors subclass one of these categories; the interface
layer maps each category to an HTTP status.
No framework imports allowed.
"""


class DomainError(Exception):
    """Base error for all domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(DomainError):
    """Raised when input is missing or malformed."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class InvalidStateError(DomainError):
    """Raised when a record is not in a state that allows the operation."""


class OutOfRangeError(DomainError):
    """Raised when a numeric input lies outside its permitted bounds."""


class InsufficientFundsError(DomainError):
    """Raised when a wallet balance cannot cover a debit."""

    def __init__(self, required: str, available: str) -> None:
        super().__init__("Insufficient balance")
        self.required = required
        self.available = available


class UnauthorizedError(DomainError):
    """Raised when a privileged trigger is called without valid credentials."""


class InternalError(DomainError):
    """Raised when the backing store fails unexpectedly."""
