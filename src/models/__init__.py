"""Data models for the sample bank account."""

from .account import BankAccount
from .exceptions import BankError, InsufficientBalanceError

__all__ = [
    "BankAccount",
    "BankError",
    "InsufficientBalanceError",
]
