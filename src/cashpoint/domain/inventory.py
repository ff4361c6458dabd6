# src/cashpoint/domain/inventory.py
"""
Note Inventory - Cash Store and Note Allocation

This module holds the terminal's cash store: one note count per denomination
plus the currency the notes are in. It answers stock queries, computes which
notes would satisfy an amount (greedy, largest denomination first) and applies
the computed allocation as a single all-or-nothing debit.

Allocation is pure; the only mutating operations are debit() and the
replacement of the whole store by the terminal.

Files that USE this module:
- cashpoint.application.withdrawal_service (ATMachine allocates and debits)
- cashpoint.adapters.formatting.formatter (formats inventory snapshots)
- cashpoint.app (builds the starting inventory from settings)
- tests.test_inventory, tests.test_withdrawal_service (unit tests)

Files that this module USES:
- cashpoint.domain.models (Denomination, NotePack)
- cashpoint.domain.errors (InsufficientNotesError)
- cashpoint.shared.validators (whole amount check)
"""
from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, Optional, Tuple

from cashpoint.domain.errors import InsufficientNotesError
from cashpoint.domain.models import Denomination, NotePack
from cashpoint.shared.validators import is_whole_amount, validate_currency_code

Allocation = Tuple[NotePack, ...]


class NoteInventory:
    """
    Per-denomination note stock of one terminal.

    Every denomination of the fixed set is always present (possibly with
    a count of zero). Counts never go negative.
    """

    def __init__(self, currency: str, counts: Optional[Dict[Denomination, int]] = None):
        if not validate_currency_code(currency):
            raise ValueError(f"Invalid currency code: {currency!r}")
        self._currency = currency
        self._counts: Dict[Denomination, int] = {d: 0 for d in Denomination.descending()}
        for denomination, count in (counts or {}).items():
            if count < 0:
                raise ValueError(f"Note count cannot be negative: {count} x {denomination.value}")
            self._counts[denomination] = count

    @classmethod
    def create(cls, currency: str, packs: Iterable[NotePack]) -> NoteInventory:
        """
        Build an inventory from note packs.

        Denominations not mentioned start at zero.

        Raises:
            ValueError: If a denomination appears more than once
        """
        counts: Dict[Denomination, int] = {}
        for pack in packs:
            if pack.denomination in counts:
                raise ValueError(f"Duplicate pack for denomination {pack.denomination.value}")
            counts[pack.denomination] = pack.count
        return cls(currency, counts)

    @property
    def currency(self) -> str:
        return self._currency

    def packs(self) -> Tuple[NotePack, ...]:
        """Snapshot of the stock, one pack per denomination, largest first."""
        return tuple(NotePack(d, c) for d, c in self._counts.items())

    def count_of(self, denomination: Denomination) -> int:
        return self._counts[denomination]

    def total(self) -> int:
        """Total face value of all notes in stock."""
        return sum(d.value * c for d, c in self._counts.items())

    def allocate(self, amount: Decimal) -> Optional[Allocation]:
        """
        Pick notes for an amount, largest denomination first.

        At each denomination take as many notes as fit in the remaining
        amount, bounded by the stock, then move on. There is no backtracking:
        if the greedy pass leaves a remainder the amount is rejected even when
        another combination of the available notes would add up.

        Args:
            amount: Requested amount in whole currency units

        Returns:
            One pack per denomination (zero counts included) summing exactly
            to the amount, or None if the amount cannot be dispensed
        """
        amount = Decimal(amount)
        if not is_whole_amount(amount):
            return None
        # Compare as Decimal first; int() of a huge exponent is very slow
        if amount > self.total():
            return None

        remaining = int(amount)
        taken = []
        for denomination, available in self._counts.items():
            count = min(remaining // denomination.value, available)
            remaining -= count * denomination.value
            taken.append(NotePack(denomination, count))

        if remaining != 0:
            return None
        return tuple(taken)

    def debit(self, allocation: Iterable[NotePack]) -> None:
        """
        Remove allocated notes from the stock.

        All packs are checked before any count changes.

        Raises:
            InsufficientNotesError: If a pack asks for more notes than available
        """
        allocation = tuple(allocation)
        requested: Dict[Denomination, int] = {}
        for pack in allocation:
            requested[pack.denomination] = requested.get(pack.denomination, 0) + pack.count

        for denomination, count in requested.items():
            if count > self._counts[denomination]:
                raise InsufficientNotesError(
                    f"Cannot take {count} x {denomination.value}: "
                    f"only {self._counts[denomination]} in stock"
                )

        for denomination, count in requested.items():
            self._counts[denomination] -= count

    def copy(self) -> NoteInventory:
        return NoteInventory(self._currency, dict(self._counts))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NoteInventory):
            return NotImplemented
        return self._currency == other._currency and self._counts == other._counts

    def __repr__(self) -> str:
        stock = ", ".join(f"{d.value}x{c}" for d, c in self._counts.items())
        return f"NoteInventory({self._currency}: {stock})"
