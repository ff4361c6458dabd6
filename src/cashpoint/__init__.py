# src/cashpoint/__init__.py
"""
Cashpoint - Cash Terminal Withdrawal Engine

A single cash-dispensing terminal: it authorizes withdrawals with an
external custodian, picks notes from its stock largest denomination first,
and returns a receipt of exactly what was dispensed.
"""

__version__ = "1.0.0"
