# src/cashpoint/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Money amounts and currencies
- Note denominations and note packs
- Card and PIN credentials
- Withdrawal receipts

Files that USE this module:
- cashpoint.domain.inventory (NoteInventory is built from NotePacks)
- cashpoint.application.* (the withdrawal engine uses all models)
- cashpoint.adapters.* (custodian clients and formatters read models)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from decimal import Decimal, InvalidOperation  # Exact decimal arithmetic for amounts
from enum import Enum  # Enumerations for the fixed note set
from typing import ClassVar, Iterable, List, Tuple, Union  # Type hints

AmountLike = Union[int, float, str, Decimal]

PIN_LENGTH = 4


def _to_decimal(value: AmountLike) -> Decimal:
    """
    Convert a numeric value to Decimal without float artefacts.

    Floats go through ``str`` first so ``100.50`` becomes ``Decimal("100.5")``
    rather than its binary expansion.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Invalid amount: {value!r}") from e


@dataclass(frozen=True)
class Money:
    """
    An amount of money in a given currency.

    Attributes:
        amount: Magnitude as Decimal (ints, floats and strings are converted)
        currency: Currency identifier, compared as-is with the terminal's currency
    """
    amount: Decimal
    currency: str = "PLN"

    DEFAULT_CURRENCY: ClassVar[str] = "PLN"

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", _to_decimal(self.amount))
        if not isinstance(self.currency, str) or not self.currency.strip():
            raise ValueError(f"Invalid currency: {self.currency!r}")

    def is_whole(self) -> bool:
        """True when the amount has no fractional part."""
        return self.amount.is_finite() and self.amount == self.amount.to_integral_value()

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


class Denomination(Enum):
    """Face values of the notes the terminal can hold, largest first."""

    PL_500 = 500
    PL_200 = 200
    PL_100 = 100
    PL_50 = 50
    PL_20 = 20
    PL_10 = 10

    @classmethod
    def descending(cls) -> List[Denomination]:
        """Return all denominations ordered from largest to smallest face value."""
        return sorted(cls, key=lambda d: d.value, reverse=True)


@dataclass(frozen=True)
class NotePack:
    """
    A bundle of notes of one denomination.

    Attributes:
        denomination: Face value of every note in the pack
        count: Number of notes (never negative)
    """
    denomination: Denomination
    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(
                f"Note count cannot be negative: {self.count} x {self.denomination.value}"
            )

    @classmethod
    def create(cls, count: int, denomination: Denomination) -> NotePack:
        return cls(denomination=denomination, count=count)

    @property
    def value(self) -> int:
        """Total face value of the pack."""
        return self.denomination.value * self.count


@dataclass(frozen=True)
class Card:
    """Opaque card identifier passed through to the custodian."""
    number: str

    @classmethod
    def create(cls, number: str) -> Card:
        return cls(number=number)

    def masked(self) -> str:
        """Card number with everything but the last four characters hidden."""
        return self.number[-4:].rjust(len(self.number), "*")

    def __repr__(self) -> str:
        return f"Card({self.masked()})"


@dataclass(frozen=True)
class PinCode:
    """Fixed-length numeric PIN. Checked by the custodian, never by the terminal."""
    digits: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.digits) != PIN_LENGTH:
            raise ValueError(f"PIN must have exactly {PIN_LENGTH} digits")
        if any(not isinstance(d, int) or isinstance(d, bool) or not 0 <= d <= 9 for d in self.digits):
            raise ValueError("PIN digits must be integers between 0 and 9")

    @classmethod
    def create(cls, *digits: int) -> PinCode:
        """Build a PIN from individual digits, e.g. ``PinCode.create(1, 2, 3, 4)``."""
        return cls(digits=tuple(digits))

    @classmethod
    def parse(cls, text: str) -> PinCode:
        """Build a PIN from its string form, e.g. ``"1234"``."""
        if not text.isdigit():
            raise ValueError("PIN must contain digits only")
        return cls(digits=tuple(int(c) for c in text))

    def as_string(self) -> str:
        return "".join(str(d) for d in self.digits)

    def __repr__(self) -> str:
        return "PinCode(****)"


@dataclass(frozen=True)
class Withdrawal:
    """
    Receipt for one successful withdrawal.

    Holds only the denominations actually dispensed, largest first.
    Two receipts are equal when their ordered packs are equal.
    """
    packs: Tuple[NotePack, ...]

    @classmethod
    def create(cls, packs: Iterable[NotePack]) -> Withdrawal:
        dispensed = [p for p in packs if p.count > 0]
        dispensed.sort(key=lambda p: p.denomination.value, reverse=True)
        return cls(packs=tuple(dispensed))

    @property
    def total(self) -> int:
        """Sum of face values over all dispensed notes."""
        return sum(p.value for p in self.packs)

    def count_of(self, denomination: Denomination) -> int:
        for pack in self.packs:
            if pack.denomination is denomination:
                return pack.count
        return 0
