# src/cashpoint/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models, the note inventory and business rules.
No dependencies on infrastructure or external systems.
"""

from cashpoint.domain.models import (
    Card,
    Denomination,
    Money,
    NotePack,
    PinCode,
    Withdrawal,
)
from cashpoint.domain.inventory import NoteInventory
from cashpoint.domain.errors import (
    AccountError,
    AuthorizationError,
    CustodianError,
    CustodianUnavailableError,
    DomainError,
    ErrorCode,
    InsufficientNotesError,
    WithdrawalError,
)

__all__ = [
    "Money",
    "Denomination",
    "NotePack",
    "Card",
    "PinCode",
    "Withdrawal",
    "NoteInventory",
    "DomainError",
    "ErrorCode",
    "WithdrawalError",
    "InsufficientNotesError",
    "CustodianError",
    "AuthorizationError",
    "AccountError",
    "CustodianUnavailableError",
]
