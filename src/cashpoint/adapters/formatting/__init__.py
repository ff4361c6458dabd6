# src/cashpoint/adapters/formatting/__init__.py
"""
Formatting Adapters - Receipt Formatting

This package contains plain-text formatting for terminal output.
"""

from cashpoint.adapters.formatting.formatter import (
    format_inventory,
    format_receipt,
    format_rejection,
)

__all__ = [
    "format_inventory",
    "format_receipt",
    "format_rejection",
]
