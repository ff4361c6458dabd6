# src/cashpoint/app.py
"""
Application Entry Point - Terminal Initialization and Startup

This module serves as the composition root for a cash terminal.
It wires settings, logging, the custodian client and the starting note
stock together, and offers a small command line for a single withdrawal.

Files that USE this module:
- cashpoint.__main__ (python -m cashpoint)
- tests.test_app (unit tests)

Files that this module USES:
- cashpoint.shared.logging_conf (setup_logging for logging configuration)
- cashpoint.config (settings for configuration management)
- cashpoint.adapters.custodian (HttpCustodian for the account authority)
- cashpoint.adapters.formatting (receipt and stock formatting)
- cashpoint.application (ATMachine)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import argparse  # Command-line parsing
import logging  # Standard library for logging messages and errors
from typing import List, Optional, Sequence  # Type hints

from cashpoint.adapters.custodian import Custodian, HttpCustodian
from cashpoint.adapters.formatting import format_inventory, format_receipt, format_rejection
from cashpoint.application import ATMachine
from cashpoint.config import Settings, settings
from cashpoint.domain import (
    Card,
    Denomination,
    Money,
    NoteInventory,
    NotePack,
    PinCode,
    WithdrawalError,
)
from cashpoint.shared.logging_conf import setup_logging

log = logging.getLogger(__name__)


def build_inventory(cfg: Settings) -> NoteInventory:
    """Create the starting note stock described by ATM_STARTING_STOCK."""
    packs = [NotePack(Denomination(face), count) for face, count in cfg.starting_packs]
    return NoteInventory.create(cfg.currency, packs)


def build_terminal(cfg: Settings, custodian: Optional[Custodian] = None) -> ATMachine:
    """
    Wire a terminal from settings.

    Args:
        cfg: Loaded settings
        custodian: Optional custodian; defaults to an HttpCustodian on CUSTODIAN_URL
    """
    if custodian is None:
        custodian = HttpCustodian(
            base_url=cfg.custodian_url,
            api_key=cfg.custodian_api_key,
            timeout=cfg.http_timeout_seconds,
        )
    inventory = build_inventory(cfg)
    log.info("Terminal ready: %r", inventory)
    return ATMachine(custodian, inventory)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cashpoint",
        description="Withdraw cash from a terminal configured via environment/.env",
    )
    parser.add_argument("--card", required=True, help="Card number")
    parser.add_argument("--pin", required=True, help="Four-digit PIN")
    parser.add_argument("--amount", required=True, help="Amount to withdraw, e.g. 3000")
    parser.add_argument("--currency", default=None, help="Currency code (defaults to ATM_CURRENCY)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one withdrawal from the command line.

    Returns:
        Process exit code: 0 on success, 1 when the withdrawal is rejected,
        2 on invalid input or configuration
    """
    args = _parse_args(argv)

    setup_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_to_stdout=settings.log_stdout,
    )

    try:
        pin = PinCode.parse(args.pin)
        amount = Money(args.amount, (args.currency or settings.currency).upper())
        terminal = build_terminal(settings)
    except ValueError as e:
        log.error("Invalid input or configuration: %s", e)
        print(f"Error: {e}")
        return 2

    try:
        receipt = terminal.withdraw(pin, Card.create(args.card), amount)
    except WithdrawalError as e:
        log.warning("Withdrawal of %s rejected: %s", amount, e.code.value)
        print(format_rejection(e))
        return 1

    log.info("Dispensed %s", amount)
    print(format_receipt(receipt, terminal.currency))
    print()
    print(format_inventory(terminal.current_deposit))
    return 0
