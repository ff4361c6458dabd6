# src/cashpoint/adapters/formatting/formatter.py
"""
Receipt Formatter - Text Formatting and Presentation

This module turns receipts, inventory snapshots and rejections into plain
text for the terminal's screen or printer.

Files that USE this module:
- cashpoint.app (prints receipts and remaining stock)
- tests.test_formatter (unit tests)

Files that this module USES:
- cashpoint.domain.models (Withdrawal, NotePack)
- cashpoint.domain.inventory (NoteInventory)
- cashpoint.domain.errors (WithdrawalError)
"""
from __future__ import annotations

from typing import Iterable, List

from cashpoint.domain.errors import WithdrawalError
from cashpoint.domain.inventory import NoteInventory
from cashpoint.domain.models import NotePack, Withdrawal


def _pack_lines(packs: Iterable[NotePack], currency: str) -> List[str]:
    return [
        f"— {p.denomination.value:>4} {currency} x {p.count:<3} = {p.value} {currency}"
        for p in packs
    ]


def format_receipt(receipt: Withdrawal, currency: str) -> str:
    """
    Format a withdrawal receipt.

    Args:
        receipt: Dispensed notes
        currency: Currency code to print next to amounts

    Returns:
        Multi-line string with one line per dispensed denomination and a total
    """
    lines = ["Withdrawal receipt"]
    lines.extend(_pack_lines(receipt.packs, currency))
    lines.append(f"Total: {receipt.total} {currency}")
    return "\n".join(lines)


def format_inventory(inventory: NoteInventory) -> str:
    """
    Format the terminal's note stock, including empty denominations.
    """
    lines = [f"Note stock ({inventory.currency})"]
    lines.extend(_pack_lines(inventory.packs(), inventory.currency))
    lines.append(f"Total: {inventory.total()} {inventory.currency}")
    return "\n".join(lines)


def format_rejection(error: WithdrawalError) -> str:
    """Format a rejected withdrawal as a single line."""
    if error.message:
        return f"Withdrawal rejected: {error.code.value} ({error.message})"
    return f"Withdrawal rejected: {error.code.value}"
