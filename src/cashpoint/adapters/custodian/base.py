# src/cashpoint/adapters/custodian/base.py
"""
Base Custodian Interface for Account Authorities

This module defines the abstract base class for the external service that
authorizes card holders and charges their accounts. It establishes the
contract that all custodian implementations must follow.

Files that USE this module:
- cashpoint.adapters.custodian.http_custodian (HttpCustodian implements Custodian)
- cashpoint.application.withdrawal_service (ATMachine calls a Custodian)
- tests.* (fake custodians implement Custodian)

Files that this module USES:
- cashpoint.domain.models (Card, Money, PinCode)
"""
from abc import ABC, abstractmethod

from cashpoint.domain.models import Card, Money, PinCode


class Custodian(ABC):
    @abstractmethod
    def authorize(self, pin: PinCode, card: Card) -> None:
        """Accept the card/PIN pair or raise AuthorizationError."""
        raise NotImplementedError

    @abstractmethod
    def charge(self, card: Card, amount: Money) -> None:
        """Debit the card's account or raise AccountError."""
        raise NotImplementedError
