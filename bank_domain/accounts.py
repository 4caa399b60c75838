"""
Account Module

Bank account entity holding an owner name and a floating-point balance.
Credits and debits are guarded so a debit can never take the balance
below zero; a rejected operation leaves the balance unchanged.
"""

import math
import numbers
from decimal import Decimal
from typing import Optional, Union

from .config import get_config
from .errors import AmountOutOfRangeError
from .logging_config import get_logger, log_action


Amount = Union[numbers.Real, Decimal]


class BankAccount:
    """
    Bank account with guarded credit and debit operations
    """

    DEBIT_AMOUNT_EXCEEDS_BALANCE_MESSAGE = "Debit amount exceeds balance"
    DEBIT_AMOUNT_LESS_THAN_ZERO_MESSAGE = "Debit amount is less than zero"
    CREDIT_AMOUNT_LESS_THAN_ZERO_MESSAGE = "Credit amount is less than zero"
    NON_FINITE_AMOUNT_MESSAGE = "Amount must be a finite number"

    def __init__(self, customer_name: str, initial_balance: Amount):
        self._customer_name = customer_name
        self._balance = 0.0
        self.logger = get_logger("bank_domain.accounts")

        self._balance = self._coerce_amount(initial_balance, "open", "initial_balance")

        # Negative opening balance is accepted, only flagged
        if self._balance < 0:
            self._log("warning", "Account opened with negative balance", action="open")

    @property
    def customer_name(self) -> str:
        return self._customer_name

    @property
    def balance(self) -> float:
        return self._balance

    def credit(self, amount: Amount) -> None:
        """
        Add funds to the account

        Args:
            amount: Non-negative amount to add

        Raises:
            AmountOutOfRangeError: If amount is negative or not finite
            TypeError: If amount is not a number
        """
        value = self._coerce_amount(amount, "credit")

        if value < 0:
            self._reject("credit", AmountOutOfRangeError(
                self.CREDIT_AMOUNT_LESS_THAN_ZERO_MESSAGE, "amount", amount
            ))

        self._balance += value
        self._log("info", "Account credited", action="credit", amount=value)

    def debit(self, amount: Amount) -> None:
        """
        Withdraw funds from the account

        Args:
            amount: Non-negative amount, no greater than the current balance

        Raises:
            AmountOutOfRangeError: If amount is negative, not finite, or exceeds balance
            TypeError: If amount is not a number
        """
        value = self._coerce_amount(amount, "debit")

        if value < 0:
            self._reject("debit", AmountOutOfRangeError(
                self.DEBIT_AMOUNT_LESS_THAN_ZERO_MESSAGE, "amount", amount
            ))

        if value > self._balance:
            self._reject("debit", AmountOutOfRangeError(
                self.DEBIT_AMOUNT_EXCEEDS_BALANCE_MESSAGE, "amount", amount
            ))

        self._balance -= value
        self._log("info", "Account debited", action="debit", amount=value)

    def to_string(self) -> str:
        """Format for display"""
        precision = get_config().display_precision
        return f"{self._customer_name}: {self._balance:,.{precision}f}"

    def __repr__(self) -> str:
        return f"BankAccount({self.to_string()})"

    def _coerce_amount(self, amount: Amount, action: str, param_name: str = "amount") -> float:
        # Decimal is not registered as numbers.Real
        if isinstance(amount, bool) or not isinstance(amount, (numbers.Real, Decimal)):
            raise TypeError(f"{param_name} must be a number, got {type(amount).__name__}")

        try:
            value = float(amount)
        except OverflowError:
            value = math.inf

        if not math.isfinite(value):
            self._reject(action, AmountOutOfRangeError(
                self.NON_FINITE_AMOUNT_MESSAGE, param_name, amount
            ))
        return value

    def _reject(self, action: str, error: AmountOutOfRangeError) -> None:
        self._log(
            "warning", f"Account {action} rejected: {error.message}",
            action=action, error=error.to_dict()
        )
        raise error

    def _log(self, level: str, message: str, action: str,
             amount: Optional[float] = None, error: Optional[dict] = None) -> None:
        if not get_config().enable_operation_logging:
            return

        extra = {"balance": self._balance}
        if amount is not None:
            extra["amount"] = amount
        if error is not None:
            extra["error"] = error

        log_action(
            self.logger, level, message,
            action=action, resource=f"account:{self._customer_name}",
            extra=extra
        )
