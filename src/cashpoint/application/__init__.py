# src/cashpoint/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains application services that orchestrate domain logic.
No direct I/O dependencies - uses adapters through interfaces.
"""

from cashpoint.application.withdrawal_service import ATMachine

__all__ = [
    "ATMachine",
]
