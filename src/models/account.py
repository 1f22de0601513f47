"""Bank account data model."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.models.exceptions import InsufficientBalanceError

if TYPE_CHECKING:
    from config.settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class BankAccount:
    """Represents a sample bank account."""

    account_number: str
    account_holder_name: str
    balance: float

    @classmethod
    def from_settings(cls, settings: "Settings") -> "BankAccount":
        """
        Create the sample account described by the configuration.

        Args:
            settings: A Settings instance

        Returns:
            A new BankAccount with the configured number, holder and balance
        """
        return cls(
            account_number=settings.account_number,
            account_holder_name=settings.account_holder_name,
            balance=settings.initial_balance,
        )

    def can_withdraw(self, amount: float) -> bool:
        """Check whether amount can be taken without overdrawing."""
        return amount <= self.balance

    def deposit(self, amount: float) -> None:
        """
        Add amount to the balance.

        The amount is not validated, so a negative deposit lowers the balance.
        """
        self.balance += amount
        logger.debug("Deposit %s to %s, balance %s", amount, self.account_number, self.balance)

    def withdraw(self, amount: float) -> None:
        """
        Take amount from the balance if the account can cover it.

        An overdraft is silently ignored: the balance stays the same and
        nothing is raised.
        """
        if not self.can_withdraw(amount):
            logger.info(
                "Withdrawal of %s from %s rejected, balance %s",
                amount,
                self.account_number,
                self.balance,
            )
            return
        self.balance -= amount
        logger.debug("Withdraw %s from %s, balance %s", amount, self.account_number, self.balance)

    def withdraw_or_raise(self, amount: float) -> None:
        """
        Take amount from the balance, reporting an overdraft.

        Args:
            amount: The amount to withdraw

        Raises:
            InsufficientBalanceError: If amount exceeds the balance
        """
        if not self.can_withdraw(amount):
            raise InsufficientBalanceError(
                f"Insufficient balance: {self.balance} available, {amount} requested"
            )
        self.withdraw(amount)
