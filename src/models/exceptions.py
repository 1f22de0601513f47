"""Custom exceptions for the sample bank account."""


class BankError(Exception):
    """Base exception for all banking-related errors."""
    pass


class InsufficientBalanceError(BankError):
    """Raised when an account has insufficient balance for a withdrawal."""
    pass
