# src/cashpoint/application/withdrawal_service.py
"""
Withdrawal Service - Terminal Controller

This module contains the business logic of a single cash terminal.
ATMachine validates a withdrawal request, authorizes and charges it with
the custodian, and only then takes the notes out of the inventory.

Order of work for one request:
1. currency check
2. amount check (positive, whole units)
3. note allocation against the current stock (pure)
4. custodian authorize
5. custodian charge
6. inventory debit and receipt

A rejection at any step before 6 leaves the inventory untouched.

Files that USE this module:
- cashpoint.app (builds an ATMachine and runs withdrawals)
- tests.test_withdrawal_service (unit tests)

Files that this module USES:
- cashpoint.adapters.custodian.base (Custodian interface)
- cashpoint.domain.inventory (NoteInventory)
- cashpoint.domain.models (Card, Money, PinCode, Withdrawal)
- cashpoint.domain.errors (ErrorCode, WithdrawalError, CustodianError)
"""
from __future__ import annotations

import logging

from cashpoint.adapters.custodian.base import Custodian
from cashpoint.domain.errors import CustodianError, ErrorCode, WithdrawalError
from cashpoint.domain.inventory import NoteInventory
from cashpoint.domain.models import Card, Money, PinCode, Withdrawal
from cashpoint.shared.validators import is_whole_amount

log = logging.getLogger(__name__)


class ATMachine:
    """
    A single cash terminal bound to one custodian and one note inventory.

    Not thread-safe: callers that share a terminal between threads must
    serialize whole withdraw() calls.
    """

    def __init__(self, custodian: Custodian, inventory: NoteInventory):
        """
        Initialize the terminal.

        Args:
            custodian: Service that authorizes cards and charges accounts
            inventory: Starting note stock; the terminal takes ownership of it
        """
        self.custodian = custodian
        self._inventory = inventory

    @property
    def currency(self) -> str:
        return self._inventory.currency

    @property
    def current_deposit(self) -> NoteInventory:
        """Copy of the current note stock."""
        return self._inventory.copy()

    def set_deposit(self, inventory: NoteInventory) -> None:
        """Replace the note stock, e.g. after a cash reload."""
        log.debug("Note stock replaced: %r", inventory)
        self._inventory = inventory

    def withdraw(self, pin: PinCode, card: Card, amount: Money) -> Withdrawal:
        """
        Dispense an amount of cash.

        Args:
            pin: PIN entered by the card holder (checked by the custodian)
            card: Card identifying the account
            amount: Requested amount, in the terminal's currency

        Returns:
            Receipt listing the notes dispensed, largest denomination first

        Raises:
            WithdrawalError: With code WRONG_CURRENCY, WRONG_AMOUNT,
                AUTHORIZATION or NO_FUNDS_ON_ACCOUNT
        """
        if amount.currency != self._inventory.currency:
            raise self._reject(
                card, ErrorCode.WRONG_CURRENCY,
                f"terminal dispenses {self._inventory.currency}, requested {amount.currency}",
            )

        if not is_whole_amount(amount.amount):
            raise self._reject(card, ErrorCode.WRONG_AMOUNT, f"invalid amount {amount.amount}")

        allocation = self._inventory.allocate(amount.amount)
        if allocation is None:
            raise self._reject(card, ErrorCode.WRONG_AMOUNT, "amount cannot be dispensed from current stock")

        try:
            self.custodian.authorize(pin, card)
        except CustodianError as e:
            raise self._reject(card, ErrorCode.AUTHORIZATION, str(e) or None) from e

        try:
            self.custodian.charge(card, amount)
        except CustodianError as e:
            raise self._reject(card, ErrorCode.NO_FUNDS_ON_ACCOUNT, str(e) or None) from e

        self._inventory.debit(allocation)
        receipt = Withdrawal.create(allocation)
        log.debug("Dispensed %s to %s", amount, card.masked())
        return receipt

    @staticmethod
    def _reject(card: Card, code: ErrorCode, message: str | None) -> WithdrawalError:
        log.debug("Withdrawal rejected for %s: %s (%s)", card.masked(), code.value, message)
        return WithdrawalError(code, message)
