# src/cashpoint/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions that represent
business rule violations and domain errors, plus the typed failure
returned to callers of the withdrawal engine.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class ErrorCode(str, Enum):
    """Reason codes for a rejected withdrawal."""

    WRONG_CURRENCY = "WRONG_CURRENCY"
    WRONG_AMOUNT = "WRONG_AMOUNT"
    AUTHORIZATION = "AUTHORIZATION"
    NO_FUNDS_ON_ACCOUNT = "NO_FUNDS_ON_ACCOUNT"


class WithdrawalError(DomainError):
    """
    Raised when a withdrawal cannot be completed.

    Attributes:
        code: Reason code for the rejection
        message: Optional human-readable detail
    """

    def __init__(self, code: ErrorCode, message: Optional[str] = None):
        self.code = code
        self.message = message
        super().__init__(f"{code.value}: {message}" if message else code.value)


class InsufficientNotesError(DomainError):
    """Raised when a debit asks for more notes than the inventory holds."""
    pass


class CustodianError(DomainError):
    """Base exception for failures signalled by the custodian service."""
    pass


class AuthorizationError(CustodianError):
    """Raised when the custodian rejects the card/PIN pair."""
    pass


class AccountError(CustodianError):
    """Raised when the custodian rejects a charge against the linked account."""
    pass


class CustodianUnavailableError(CustodianError):
    """Raised when the custodian cannot be reached or answers unexpectedly."""
    pass
